# mediadiff/database/manager.py
import logging
import sqlite3
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from ..config import ORDER_DIRECTIONS, ORDERBY_FIELDS, validate_choice
from ..models.known_record import KnownRecord
from .init import init_db_if_needed
from .schema import ORDER_COLUMNS

logger = logging.getLogger(__name__)

AttachmentRow = Tuple[int, str, Optional[str], Optional[str]]


class DatabaseManager:
    """Manages the SQLite database of known attachments."""

    def __init__(self, db_path: Path):
        self.db_path = Path(db_path)
        init_db_if_needed(self.db_path)
        self.conn = sqlite3.connect(str(self.db_path))
        # Pragmas for performance & integrity
        self.conn.execute("PRAGMA foreign_keys=ON;")
        self.conn.execute("PRAGMA journal_mode=WAL;")
        self.conn.execute("PRAGMA synchronous=NORMAL;")

    def close(self) -> None:
        self.conn.close()

    def list_known(self, order_by: str = "date", order: str = "ASC") -> List[KnownRecord]:
        """
        Return every attachment, ordered for display.

        Args:
            order_by: One of 'name', 'date', 'ID'.
            order: 'ASC' or 'DESC'.

        Raises:
            ConfigurationError: order_by or order is not an accepted value.
        """
        validate_choice("orderby", order_by, ORDERBY_FIELDS)
        validate_choice("order", order, ORDER_DIRECTIONS)
        column = ORDER_COLUMNS[order_by]

        # column and direction come from the whitelists above
        rows = self.conn.execute(
            f"SELECT id, name, path FROM attachments ORDER BY {column} {order}, id {order}"
        ).fetchall()
        logger.debug("Loaded %d attachments ordered by %s %s", len(rows), column, order)
        return [KnownRecord(id=int(r[0]), name=r[1] or "", path=r[2]) for r in rows]

    def batch_insert_attachments(self, rows: Iterable[AttachmentRow], batch_size: int = 1000) -> int:
        """
        Insert or replace attachments.

        Each row is (id, name, path, uploaded_at); a None uploaded_at takes the
        current time.
        """
        rows = [
            (int(r[0]), r[1] or "", r[2] or None, r[3] or None)
            for r in rows
        ]
        total = len(rows)
        with self.conn:
            for i in range(0, total, batch_size):
                batch = rows[i:i + batch_size]
                self.conn.executemany("""
                    INSERT OR REPLACE INTO attachments (id, name, path, uploaded_at)
                    VALUES (?, ?, ?, COALESCE(?, datetime('now')))
                """, batch)
        logger.info("Inserted %d attachments", total)
        return total

    def get_option(self, name: str) -> Optional[str]:
        row = self.conn.execute("SELECT value FROM options WHERE name=?", (name,)).fetchone()
        return row[0] if row else None

    def set_option(self, name: str, value: str) -> None:
        with self.conn:
            self.conn.execute(
                "INSERT OR REPLACE INTO options (name, value) VALUES (?, ?)",
                (name, str(value)),
            )
