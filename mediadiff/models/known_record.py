#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Data structures for database-origin records.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class KnownRecord:
    """Attachment registered in the database."""
    id: int
    name: str
    path: Optional[str] = None  # full relative path including filename

    def to_row(self) -> Dict[str, Any]:
        return {"Id": self.id, "Name": self.name, "Path": self.path or ""}
