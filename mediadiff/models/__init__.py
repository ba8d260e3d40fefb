"""Data models for mediadiff."""

from .media_record import MediaRecord, OrphanRecord
from .known_record import KnownRecord
from .outcome import DeletionOutcome

__all__ = ['MediaRecord', 'OrphanRecord', 'KnownRecord', 'DeletionOutcome']
