#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Delete command: remove orphaned media from the upload directory.
"""

import logging
import sys
from typing import Callable, List, Optional, TextIO

from tqdm import tqdm

from ..config import DELETION_FIELDS, ConfigurationError, resolve_upload_dir
from ..database.manager import DatabaseManager
from ..deletion import DeletionWorkflow
from ..formatting import format_items
from ..models.outcome import DeletionOutcome
from .inventory import load_orphans

logger = logging.getLogger(__name__)

CONFIRM_PROMPT = "Permanently delete orphaned media?"


def prompt_confirmation(question: str) -> bool:
    """Ask a y/n question on the terminal."""
    answer = input(f"{question} [y/n] ")
    return answer.strip().lower() in ("y", "yes")


def cmd_delete(
    db_manager: DatabaseManager,
    upload_dir: Optional[str] = None,
    hard: bool = False,
    year_month_folders: Optional[bool] = None,
    assume_yes: bool = False,
    confirm: Optional[Callable[[str], bool]] = None,
    stream: Optional[TextIO] = None,
) -> Optional[List[DeletionOutcome]]:
    """Delete orphaned media, or only report what would be deleted.

    Returns:
        One outcome per physical file, or None when the user declined.
    """
    stream = stream or sys.stdout

    if hard and not assume_yes:
        confirm = confirm or prompt_confirmation
        if not confirm(CONFIRM_PROMPT):
            print("Aborted.", file=stream)
            return None

    root = resolve_upload_dir(upload_dir, db_manager)
    if not root.exists() or not root.is_dir():
        raise ConfigurationError(f"Invalid upload directory: {root}")

    orphans = load_orphans(db_manager, root, year_month_folders)
    if not orphans:
        print("Success: No orphaned media items to delete.", file=stream)
        return []

    print(f"{'Hard' if hard else 'Soft'} deleting {len(orphans)} orphaned media.", file=stream)

    with tqdm(total=len(orphans), desc="Progress", unit="media") as bar:
        workflow = DeletionWorkflow(root, hard=hard, progress=lambda _orphan: bar.update(1))
        outcomes = workflow.run(orphans)

    failed = sum(1 for o in outcomes if not o.deleted)
    if failed:
        logger.warning("%d of %d files could not be deleted", failed, len(outcomes))

    format_items("table", [o.to_row() for o in outcomes], DELETION_FIELDS, stream)
    return outcomes
