#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Recognition of resized variants such as ``photo-312x338.png``.

A variant is named ``<base>-<width>x<height>.<ext>`` and only counts as a
variant when ``<base>.<ext>`` sits in the same directory.
"""

import os
import re
from dataclasses import dataclass
from typing import Collection, Optional

RESIZED_PATTERN = re.compile(
    r"^(?P<base_name>.*)-(?P<size>\d+x\d+)\.(?P<extension>[A-Za-z0-9]+)$"
)


@dataclass(frozen=True)
class VariantMatch:
    base_with_ext: str
    size_tag: str


def match_variant(filename: str) -> Optional[VariantMatch]:
    """Parse filename against the resized pattern without touching the disk."""
    m = RESIZED_PATTERN.match(filename)
    if not m:
        return None
    return VariantMatch(
        base_with_ext=f"{m.group('base_name')}.{m.group('extension')}",
        size_tag=m.group("size"),
    )


def variant_of(filename: str, existing_names: Collection[str]) -> Optional[VariantMatch]:
    """Return the match only when its base file is among existing_names."""
    match = match_variant(filename)
    if match is None or match.base_with_ext not in existing_names:
        return None
    return match


def variant_filename(base_file: str, size_tag: str) -> str:
    """Inverse of match_variant: 'photo.png' + '312x338' -> 'photo-312x338.png'."""
    stem, ext = os.path.splitext(base_file)
    return f"{stem}-{size_tag}{ext}"
