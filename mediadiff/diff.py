#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Comparison of the database inventory against the filesystem inventory.
"""

from typing import Iterable, List, Set

from .models.known_record import KnownRecord
from .models.media_record import MediaRecord, OrphanRecord


def known_paths(known: Iterable[KnownRecord]) -> Set[str]:
    """Relative paths registered in the database; entries without a path are ignored."""
    return {record.path for record in known if record.path}


def find_orphans(known: Iterable[KnownRecord], media: Iterable[MediaRecord]) -> List[OrphanRecord]:
    """Filesystem records whose relative path is absent from the database, in scan order."""
    registered = known_paths(known)
    return [
        OrphanRecord.from_media(record)
        for record in media
        if record.relative_path not in registered
    ]
