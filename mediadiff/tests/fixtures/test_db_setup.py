#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Test database and upload tree setup for mediadiff.
"""

import sqlite3
import tempfile
from pathlib import Path
from typing import Iterable, Optional, Sequence, Tuple

from mediadiff.config import YEAR_MONTH_OPTION
from mediadiff.database.init import init_db_if_needed

# (id, name, path, uploaded_at)
KNOWN_ATTACHMENTS = [
    (1, "photo", "2017/03/photo.png", "2017-03-04 10:00:00"),
    (2, "kept", "2018/01/kept.gif", "2018-01-02 09:30:00"),
    (3, "broken", None, "2016-12-31 23:59:59"),
    (4, "another-photo", "2017/03/photo.png", "2019-05-05 05:05:05"),
]

# Files relative to the upload root of a year/month installation
UPLOAD_FILES = [
    "2017/03/photo.png",
    "2017/03/photo-312x338.png",
    "2017/03/photo-220x165.png",
    "2017/03/orphan.jpg",
    "2017/03/orphan-150x150.jpg",
    "2017/03/orphan-1024x768.jpg",
    "2017/03/orphan-96x96.jpg",
    "2017/03/logo-10x10.png",
    "2017/notes.txt",
    "2017/misc/ignored.png",
    "1999/01/old.png",
    "2018/01/kept.gif",
    "readme.txt",
]


def create_test_database(rows: Sequence[Tuple[int, str, Optional[str], str]] = KNOWN_ATTACHMENTS,
                         year_month_folders: Optional[bool] = None) -> Path:
    """Create a database of known attachments in a fresh temp dir and return its path."""
    temp_dir = Path(tempfile.mkdtemp(prefix="mediadiff_test_"))
    db_path = temp_dir / "test_mediadiff.db"

    init_db_if_needed(db_path)
    conn = sqlite3.connect(str(db_path))
    try:
        conn.executemany("""
            INSERT OR REPLACE INTO attachments (id, name, path, uploaded_at)
            VALUES (?, ?, ?, ?)
        """, rows)
        if year_month_folders is not None:
            conn.execute("INSERT OR REPLACE INTO options (name, value) VALUES (?, ?)",
                         (YEAR_MONTH_OPTION, "1" if year_month_folders else "0"))
        conn.commit()
    finally:
        conn.close()
    return db_path


def build_upload_tree(root: Path, files: Iterable[str] = UPLOAD_FILES) -> Path:
    """Create every relative path in files below root with small dummy content."""
    root.mkdir(parents=True, exist_ok=True)
    for rel in files:
        target = root / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(b"\x89PNG" + rel.encode("utf-8"))
    return root
