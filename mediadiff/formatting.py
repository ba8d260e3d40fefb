#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Rendering of result rows as table, json, csv, yaml or count.
"""

import csv
import json
import logging
import sys
from typing import Any, Dict, List, Optional, Sequence, TextIO

import yaml

from .config import OUTPUT_FORMATS, validate_choice

Row = Dict[str, Any]


def enable_machine_output_logging(level: int = logging.WARNING):
    """Send logs to stderr and suppress info noise when stdout carries data."""
    # Drop existing handlers to avoid duplicate logs
    for h in logging.root.handlers[:]:
        logging.root.removeHandler(h)
    logging.basicConfig(stream=sys.stderr, level=level,
                        format="%(asctime)s [%(levelname)s] %(message)s")


def format_items(fmt: str, items: Sequence[Row], fields: List[str], stream: Optional[TextIO] = None) -> None:
    """Write items to stream (stdout by default) in the requested format."""
    validate_choice("format", fmt, OUTPUT_FORMATS)
    stream = stream or sys.stdout
    rows = [{field: item.get(field, "") for field in fields} for item in items]

    if fmt == "table":
        _write_table(rows, fields, stream)
    elif fmt == "json":
        stream.write(json.dumps(rows, ensure_ascii=False))
        stream.write("\n")
    elif fmt == "csv":
        writer = csv.DictWriter(stream, fieldnames=fields, lineterminator="\n")
        writer.writeheader()
        writer.writerows(rows)
    elif fmt == "yaml":
        yaml.safe_dump(rows, stream, sort_keys=False, explicit_start=True,
                       default_flow_style=False, allow_unicode=True)
    elif fmt == "count":
        stream.write(f"{len(rows)}\n")
    stream.flush()


def _write_table(rows: List[Row], fields: List[str], stream: TextIO) -> None:
    widths = {f: len(f) for f in fields}
    for row in rows:
        for f in fields:
            widths[f] = max(widths[f], len(str(row[f])))

    border = "+" + "+".join("-" * (widths[f] + 2) for f in fields) + "+"
    header = "| " + " | ".join(f"{f:<{widths[f]}}" for f in fields) + " |"

    lines = [border, header, border]
    for row in rows:
        lines.append("| " + " | ".join(f"{str(row[f]):<{widths[f]}}" for f in fields) + " |")
    lines.append(border)
    stream.write("\n".join(lines) + "\n")
