#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Path utility functions for mediadiff.
"""

import os
from pathlib import Path


def is_writable_dir(p: Path) -> bool:
    """True if p is an existing directory the current user may create/remove entries in."""
    return p.is_dir() and os.access(p, os.W_OK | os.X_OK)


def is_real_dir(entry: os.DirEntry) -> bool:
    """Directory entry that is a directory and not a symlink to one."""
    return entry.is_dir(follow_symlinks=False)
