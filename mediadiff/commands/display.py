#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Display command: list database, filesystem or orphaned media.
"""

from typing import Any, Dict, List, Optional, TextIO

from ..config import (
    DATABASE_FIELDS, DEFAULT_FORMAT, DEFAULT_LIST_TYPE, DEFAULT_ORDER, DEFAULT_ORDERBY,
    LIST_TYPES, MEDIA_FIELDS, ORDER_DIRECTIONS, ORDERBY_FIELDS, OUTPUT_FORMATS,
    resolve_upload_dir, validate_choice,
)
from ..database.manager import DatabaseManager
from ..formatting import format_items
from .inventory import load_database_records, load_filesystem_records, load_orphans


def cmd_display(
    db_manager: DatabaseManager,
    fmt: str = DEFAULT_FORMAT,
    list_type: str = DEFAULT_LIST_TYPE,
    upload_dir: Optional[str] = None,
    orderby: str = DEFAULT_ORDERBY,
    order: str = DEFAULT_ORDER,
    year_month_folders: Optional[bool] = None,
    stream: Optional[TextIO] = None,
) -> List[Dict[str, Any]]:
    """List media.

    Args:
        db_manager: DatabaseManager instance.
        fmt: table, json, csv, yaml or count.
        list_type: database, filesystem or diff.
        upload_dir: Upload root; falls back to the stored option, then the default.
        orderby: name, date or ID (database ordering).
        order: ASC or DESC.
        year_month_folders: Layout override; None reads the stored option.
        stream: Output stream, stdout by default.

    Returns:
        The rows that were written.

    Raises:
        ConfigurationError: an enumerated value or the upload directory is invalid.
    """
    validate_choice("format", fmt, OUTPUT_FORMATS)
    validate_choice("list", list_type, LIST_TYPES)
    validate_choice("orderby", orderby, ORDERBY_FIELDS)
    validate_choice("order", order, ORDER_DIRECTIONS)

    if list_type == "database":
        records = load_database_records(db_manager, orderby, order)
        fields = DATABASE_FIELDS
    elif list_type == "filesystem":
        root = resolve_upload_dir(upload_dir, db_manager)
        records = load_filesystem_records(root, year_month_folders, db_manager)
        fields = MEDIA_FIELDS
    else:
        root = resolve_upload_dir(upload_dir, db_manager)
        records = load_orphans(db_manager, root, year_month_folders, orderby, order)
        fields = MEDIA_FIELDS

    rows = [record.to_row() for record in records]
    format_items(fmt, rows, fields, stream)
    return rows
