#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Deletion of orphaned media.

Each orphan expands to its base file plus one file per size tag. A dry run
reports every expanded file as deleted without touching the disk; a hard run
removes files one by one and records an independent outcome for each.
"""

import logging
import os
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Set

from .models.media_record import OrphanRecord
from .models.outcome import DeletionOutcome
from .scanning.matcher import variant_filename
from .utils.path import is_writable_dir

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[OrphanRecord], None]


class DeletionWorkflow:
    """Deletes (or pretends to delete) the files behind orphan records."""

    def __init__(self, upload_root: Path, hard: bool = False,
                 progress: Optional[ProgressCallback] = None):
        self.upload_root = Path(os.path.abspath(upload_root))
        self.hard = hard
        self.progress = progress

    def run(self, orphans: Iterable[OrphanRecord]) -> List[DeletionOutcome]:
        """Process every orphan; failures are logged and never stop the run."""
        outcomes: List[DeletionOutcome] = []
        handled: Set[str] = set()
        for orphan in orphans:
            if self.progress is not None:
                self.progress(orphan)
            outcomes.extend(self._process(orphan, handled))
        return outcomes

    def _process(self, orphan: OrphanRecord, handled: Set[str]) -> List[DeletionOutcome]:
        directory = self.upload_root / orphan.path if orphan.path else self.upload_root

        if not directory.exists() or not directory.is_dir():
            logger.warning("Invalid directory %s. Skipping file %s.", directory, orphan.file)
            return []
        if not is_writable_dir(directory):
            logger.warning("Directory %s is not writable. Skipping file %s.", directory, orphan.file)
            return []

        # a file already reported for an earlier orphan is not reported again
        files = [f for f in self.expand_files(directory, orphan) if f not in handled]
        handled.update(files)
        if not self.hard:
            return [DeletionOutcome(file=f, deleted=True) for f in files]
        return [self._remove(f) for f in files]

    @staticmethod
    def expand_files(directory: Path, orphan: OrphanRecord) -> List[str]:
        """Base file first, then one variant per size tag in record order."""
        files = [str(directory / orphan.file)]
        for size in orphan.sizes:
            files.append(str(directory / variant_filename(orphan.file, size)))
        return files

    @staticmethod
    def _remove(file_path: str) -> DeletionOutcome:
        if not os.path.lexists(file_path):
            logger.warning("Skipping invalid file %s.", file_path)
            return DeletionOutcome(file=file_path, deleted=False)
        try:
            os.remove(file_path)
        except OSError as e:
            logger.warning("Unable to delete file %s: %s", file_path, e)
            return DeletionOutcome(file=file_path, deleted=False)
        logger.debug("Deleted %s", file_path)
        return DeletionOutcome(file=file_path, deleted=True)


def delete_orphans(orphans: Iterable[OrphanRecord], upload_root: Path, hard: bool = False,
                   progress: Optional[ProgressCallback] = None) -> List[DeletionOutcome]:
    """Convenience wrapper around DeletionWorkflow.run()."""
    return DeletionWorkflow(upload_root, hard=hard, progress=progress).run(orphans)
