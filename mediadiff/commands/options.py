#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Option command: store the upload settings the other commands fall back on.
"""

import sys
from typing import Optional, TextIO

from ..config import UPLOAD_PATH_OPTION, YEAR_MONTH_OPTION, validate_choice
from ..database.manager import DatabaseManager

SETTABLE_OPTIONS = (UPLOAD_PATH_OPTION, YEAR_MONTH_OPTION)


def cmd_set_option(db_manager: DatabaseManager, name: str, value: str,
                   stream: Optional[TextIO] = None) -> None:
    """Write one option to the database; unknown names raise ConfigurationError."""
    stream = stream or sys.stdout
    validate_choice("name", name, SETTABLE_OPTIONS)
    db_manager.set_option(name, value)
    print(f"Option {name} set to {value!r}", file=stream)
