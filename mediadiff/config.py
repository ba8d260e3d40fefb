#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Global configuration and constants for mediadiff.
"""

import re
from pathlib import Path
from typing import Iterable, Optional, Set

# Enumerated CLI values
OUTPUT_FORMATS = ("table", "json", "csv", "yaml", "count")
LIST_TYPES = ("database", "filesystem", "diff")
ORDERBY_FIELDS = ("name", "date", "ID")
ORDER_DIRECTIONS = ("ASC", "DESC")

DEFAULT_FORMAT = "table"
DEFAULT_LIST_TYPE = "diff"
DEFAULT_ORDERBY = "date"
DEFAULT_ORDER = "ASC"

# Output columns
DATABASE_FIELDS = ["Id", "Name", "Path"]
MEDIA_FIELDS = ["Path", "File", "Sizes"]
DELETION_FIELDS = ["File", "Deleted"]

# Storage defaults
DEFAULT_DB_PATH = "mediadiff.db"
DEFAULT_UPLOAD_DIR = "uploads"

# Option names stored in the database
YEAR_MONTH_OPTION = "uploads_use_yearmonth_folders"
UPLOAD_PATH_OPTION = "upload_path"
DEFAULT_YEAR_MONTH_FOLDERS = True

# Upload layout
YEAR_DIR_PATTERN = re.compile(r"^20..$")
MONTH_DIR_PATTERN = re.compile(r"^[0-1][0-9]$")

TRUE_VALUES: Set[str] = {"1", "true", "yes", "on"}


class ConfigurationError(Exception):
    """Fatal configuration problem detected before any work begins."""


def validate_choice(flag: str, value: str, allowed: Iterable[str]) -> str:
    """Return value if it is one of allowed, otherwise raise ConfigurationError."""
    if value not in allowed:
        raise ConfigurationError(f"Invalid flag value for --{flag}: {value}")
    return value


def parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in TRUE_VALUES


def resolve_upload_dir(cli_value: Optional[str], db_manager=None) -> Path:
    """Pick the upload directory: CLI flag, then stored option, then default."""
    value = cli_value
    if not value and db_manager is not None:
        value = db_manager.get_option(UPLOAD_PATH_OPTION)
    if not value:
        value = DEFAULT_UPLOAD_DIR
    # "uploads/" and "uploads" name the same root
    stripped = str(value).rstrip("/")
    return Path(stripped or "/")


def resolve_year_month_folders(cli_value: Optional[bool], db_manager=None) -> bool:
    """Decide once per run whether uploads are partitioned into year/month folders."""
    if cli_value is not None:
        return bool(cli_value)
    if db_manager is not None:
        stored = db_manager.get_option(YEAR_MONTH_OPTION)
        if stored is not None:
            return parse_bool(stored)
    return DEFAULT_YEAR_MONTH_FOLDERS
