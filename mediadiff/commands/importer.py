#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Import command: load known attachments from a CSV export.
"""

import csv
import sys
from pathlib import Path
from typing import Optional, TextIO

from ..config import ConfigurationError
from ..database.manager import DatabaseManager

REQUIRED_COLUMNS = ("id", "name", "path")


def cmd_import_known(db_manager: DatabaseManager, csv_path: Path,
                     stream: Optional[TextIO] = None) -> int:
    """Insert rows of an id,name,path[,date] CSV into the attachments table."""
    stream = stream or sys.stdout
    csv_path = Path(csv_path)
    if not csv_path.is_file():
        raise ConfigurationError(f"Invalid CSV file: {csv_path}")

    with csv_path.open(newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        missing = [c for c in REQUIRED_COLUMNS if c not in (reader.fieldnames or [])]
        if missing:
            raise ConfigurationError(f"CSV file {csv_path} is missing columns: {', '.join(missing)}")

        rows = []
        for line_no, row in enumerate(reader, start=2):
            try:
                attachment_id = int(row["id"])
            except (TypeError, ValueError) as e:
                raise ConfigurationError(f"Invalid id on line {line_no}: {row['id']!r}") from e
            rows.append((attachment_id, row["name"], row["path"], row.get("date")))

    count = db_manager.batch_insert_attachments(rows)
    print(f"Imported {count:,} attachments from {csv_path}", file=stream)
    return count
