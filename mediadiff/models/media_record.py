#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Data structures for filesystem-origin records.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple


@dataclass(frozen=True)
class MediaRecord:
    """A base file found on disk together with the size tags of its resized variants."""
    path: str  # directory relative to the upload root, '' for a flat layout
    file: str
    sizes: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def relative_path(self) -> str:
        """Join key shared with the database inventory."""
        if not self.path:
            return self.file
        return f"{self.path}/{self.file}"

    @property
    def sizes_display(self) -> str:
        return " ".join(self.sizes)

    def to_row(self) -> Dict[str, str]:
        return {"Path": self.path, "File": self.file, "Sizes": self.sizes_display}


@dataclass(frozen=True)
class OrphanRecord(MediaRecord):
    """A MediaRecord with no matching entry in the database."""

    @classmethod
    def from_media(cls, record: MediaRecord) -> "OrphanRecord":
        return cls(path=record.path, file=record.file, sizes=tuple(record.sizes))
