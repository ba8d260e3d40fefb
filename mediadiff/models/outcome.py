#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Outcome of deleting a single file.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class DeletionOutcome:
    """Result of one physical file handled by a deletion run."""
    file: str  # absolute path
    deleted: bool

    def to_row(self) -> Dict[str, Any]:
        return {"File": self.file, "Deleted": int(self.deleted)}
