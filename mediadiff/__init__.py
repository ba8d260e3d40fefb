"""mediadiff - find and delete uploaded media with no entry in the database."""

__version__ = "1.0.0"
__author__ = "Media Tool Team"

# Import key classes for convenient top-level access
from .database import DatabaseManager, RecordSource
from .scanning import DirectoryScanner, scan_upload_dir, match_variant
from .diff import find_orphans
from .deletion import DeletionWorkflow, delete_orphans
from .models import MediaRecord, OrphanRecord, KnownRecord, DeletionOutcome
from .config import ConfigurationError

__all__ = [
    # Core classes
    'DatabaseManager',
    'RecordSource',
    'DirectoryScanner',
    'DeletionWorkflow',

    # Operations
    'scan_upload_dir',
    'match_variant',
    'find_orphans',
    'delete_orphans',

    # Data models
    'MediaRecord',
    'OrphanRecord',
    'KnownRecord',
    'DeletionOutcome',

    'ConfigurationError',

    # Package metadata
    '__version__',
    '__author__'
]
