"""Known-attachment storage for mediadiff."""

from .manager import DatabaseManager
from .source import RecordSource

__all__ = ['DatabaseManager', 'RecordSource']
