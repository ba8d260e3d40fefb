#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Sorting helpers for mediadiff.
"""

import re
from typing import Iterable, List, Tuple, Union

_DIGITS = re.compile(r"(\d+)")


def natural_key(value: str) -> Tuple[Union[int, str], ...]:
    """Split value into text and integer runs so '96x96' sorts before '150x150'."""
    parts = _DIGITS.split(value)
    # split() alternates text/number, so odd indexes are always digit runs
    return tuple(int(part) if i % 2 else part for i, part in enumerate(parts))


def natural_sorted_desc(values: Iterable[str]) -> List[str]:
    """Return values in descending natural order."""
    return sorted(values, key=natural_key, reverse=True)
