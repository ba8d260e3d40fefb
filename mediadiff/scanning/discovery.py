#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Filesystem inventory for mediadiff.
Walks the upload directory, optionally through year/month folders, and groups
resized variants under their base file.
"""

import logging
import os
from pathlib import Path
from typing import Dict, List, Optional

from ..config import MONTH_DIR_PATTERN, YEAR_DIR_PATTERN, ConfigurationError
from ..models.media_record import MediaRecord
from ..utils.path import is_real_dir
from ..utils.sorting import natural_sorted_desc
from .matcher import variant_of

logger = logging.getLogger(__name__)


class DirectoryScanner:
    """Builds MediaRecords for an upload root."""

    def __init__(self, root: Path, year_month_folders: bool = True):
        self.root = Path(root)
        self.year_month_folders = year_month_folders

    def scan(self) -> List[MediaRecord]:
        """
        Scan the upload root.

        Returns:
            Records in scan order: year, then month, then file name.

        Raises:
            ConfigurationError: the root is missing, not a directory or unreadable.
        """
        self._check_root()
        if self.year_month_folders:
            records = self._scan_years()
        else:
            records = self.scan_directory(self.root)
        logger.debug("Scanned %s: %d records", self.root, len(records))
        return records

    def _check_root(self) -> None:
        if not self.root.exists() or not self.root.is_dir():
            raise ConfigurationError(f"Invalid directory: {self.root}")
        if not os.access(self.root, os.R_OK | os.X_OK):
            raise ConfigurationError("Upload directory is not readable")

    def _scan_years(self) -> List[MediaRecord]:
        records: List[MediaRecord] = []
        for year_entry in self._list_subdirs(self.root, is_root=True):
            if not YEAR_DIR_PATTERN.match(year_entry.name):
                continue
            for month_entry in self._list_subdirs(Path(year_entry.path)):
                if not MONTH_DIR_PATTERN.match(month_entry.name):
                    continue
                rel_path = f"{year_entry.name}/{month_entry.name}"
                records.extend(self.scan_directory(Path(month_entry.path), rel_path))
        return records

    def _list_subdirs(self, directory: Path, is_root: bool = False) -> List[os.DirEntry]:
        """Sorted real sub-directories of directory; symlinked directories are not followed."""
        entries = self._list_entries(directory, is_root)
        if entries is None:
            return []
        return [entry for entry in entries if is_real_dir(entry)]

    def _list_entries(self, directory: Path, is_root: bool = False) -> Optional[List[os.DirEntry]]:
        try:
            with os.scandir(directory) as it:
                return sorted(it, key=lambda e: e.name)
        except OSError as e:
            if is_root:
                raise ConfigurationError("Upload directory is not readable") from e
            logger.warning("Directory %s is not readable: %s", directory, e)
            return None

    def scan_directory(self, directory: Path, rel_path: str = "") -> List[MediaRecord]:
        """
        Group the files of a single directory into MediaRecords.

        Sub-directories are ignored. A name matching the resized pattern only
        becomes a variant when its base file is present in the same directory.
        """
        entries = self._list_entries(directory, is_root=(rel_path == "" and Path(directory) == self.root))
        if entries is None:
            return []

        file_names = [entry.name for entry in entries if _is_listed_file(entry)]
        existing = set(file_names)
        matches = {name: variant_of(name, existing) for name in file_names}
        # a file with variants of its own stays a base, never a size tag of another base
        parents = {m.base_with_ext for m in matches.values() if m is not None}

        # insertion order of the dict is the output order
        sizes_by_base: Dict[str, List[str]] = {}
        for name in file_names:
            match = matches[name]
            if match is not None and name not in parents:
                sizes_by_base.setdefault(match.base_with_ext, []).append(match.size_tag)
                continue
            sizes_by_base.setdefault(name, [])

        return [
            MediaRecord(path=rel_path, file=base, sizes=tuple(natural_sorted_desc(sizes)))
            for base, sizes in sizes_by_base.items()
        ]


def _is_listed_file(entry: os.DirEntry) -> bool:
    try:
        return not entry.is_dir(follow_symlinks=False) and entry.is_file()
    except OSError:
        return False


def scan_upload_dir(root: Path, year_month_folders: bool = True) -> List[MediaRecord]:
    """Convenience wrapper around DirectoryScanner.scan()."""
    return DirectoryScanner(root, year_month_folders).scan()
