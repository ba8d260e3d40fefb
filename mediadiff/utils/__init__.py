"""Utility functions for mediadiff."""

from .sorting import natural_key, natural_sorted_desc
from .path import is_writable_dir, is_real_dir

__all__ = ['natural_key', 'natural_sorted_desc', 'is_writable_dir', 'is_real_dir']
