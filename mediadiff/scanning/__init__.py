"""Filesystem scanning modules for mediadiff."""

from .matcher import VariantMatch, match_variant, variant_of, variant_filename
from .discovery import DirectoryScanner, scan_upload_dir

__all__ = [
    'VariantMatch',
    'match_variant',
    'variant_of',
    'variant_filename',
    'DirectoryScanner',
    'scan_upload_dir'
]
