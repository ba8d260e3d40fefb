#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Database schema definitions for mediadiff.
"""

# Known attachments and installation options
MAIN_SCHEMA = """
PRAGMA journal_mode=WAL;
PRAGMA foreign_keys=ON;

CREATE TABLE IF NOT EXISTS attachments (
    id INTEGER PRIMARY KEY,
    name TEXT NOT NULL DEFAULT '',
    path TEXT,
    uploaded_at TEXT DEFAULT (datetime('now'))
);

CREATE INDEX IF NOT EXISTS idx_attachments_path ON attachments(path);
CREATE INDEX IF NOT EXISTS idx_attachments_uploaded ON attachments(uploaded_at);

CREATE TABLE IF NOT EXISTS options (
    name TEXT PRIMARY KEY,
    value TEXT
);
"""

# CLI orderby value -> column
ORDER_COLUMNS = {
    "name": "name",
    "date": "uploaded_at",
    "ID": "id",
}
