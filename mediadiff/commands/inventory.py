#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Inventory loaders shared by the display and delete commands.
"""

import logging
from pathlib import Path
from typing import List, Optional

from ..config import DEFAULT_ORDER, DEFAULT_ORDERBY, resolve_year_month_folders
from ..database.source import RecordSource
from ..diff import find_orphans
from ..models import KnownRecord, MediaRecord, OrphanRecord
from ..scanning.discovery import scan_upload_dir

logger = logging.getLogger(__name__)


def load_database_records(source: RecordSource, orderby: str = DEFAULT_ORDERBY,
                          order: str = DEFAULT_ORDER) -> List[KnownRecord]:
    return source.list_known(orderby, order)


def load_filesystem_records(upload_dir: Path, year_month_folders: Optional[bool] = None,
                            db_manager=None) -> List[MediaRecord]:
    """Scan upload_dir; the layout flag falls back to the stored option when None."""
    partitioned = resolve_year_month_folders(year_month_folders, db_manager)
    logger.info("Scanning %s (year/month folders: %s)", upload_dir, "on" if partitioned else "off")
    return scan_upload_dir(upload_dir, partitioned)


def load_orphans(db_manager, upload_dir: Path, year_month_folders: Optional[bool] = None,
                 orderby: str = DEFAULT_ORDERBY, order: str = DEFAULT_ORDER) -> List[OrphanRecord]:
    """Files on disk with no attachment in the database."""
    known = load_database_records(db_manager, orderby, order)
    media = load_filesystem_records(upload_dir, year_month_folders, db_manager)
    orphans = find_orphans(known, media)
    logger.info("%d known attachments, %d files on disk, %d orphaned",
                len(known), len(media), len(orphans))
    return orphans
