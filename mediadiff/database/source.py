#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Interface of the known-attachment inventory.
"""

from typing import List, Protocol

from ..models.known_record import KnownRecord


class RecordSource(Protocol):
    """Anything that can list the attachments the installation knows about."""

    def list_known(self, order_by: str, order: str) -> List[KnownRecord]:
        ...
