#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Main CLI entry point for mediadiff.
"""

import argparse
import logging
import sys
from pathlib import Path

from .config import (
    DEFAULT_DB_PATH, DEFAULT_FORMAT, DEFAULT_LIST_TYPE, DEFAULT_ORDER, DEFAULT_ORDERBY,
    LIST_TYPES, ORDER_DIRECTIONS, ORDERBY_FIELDS, OUTPUT_FORMATS, ConfigurationError,
)
from .commands.delete import cmd_delete
from .commands.display import cmd_display
from .commands.importer import cmd_import_known
from .commands.options import SETTABLE_OPTIONS, cmd_set_option
from .database.manager import DatabaseManager
from .formatting import enable_machine_output_logging


def setup_logging(verbose: bool):
    """Configure logging for the CLI tool. Logs go to stderr; stdout carries listings."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)]
    )
    logging.debug("Verbose logging enabled (DEBUG level).")


def create_parser():
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="mediadiff",
        description="List and delete media in the uploads folder with no entry in the database",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""Examples:
  # List orphaned media
  %(prog)s display --list diff --format table

  # List everything on disk as CSV
  %(prog)s display --format csv --list filesystem --upload-dir ./uploads

  # Show what would be deleted, then delete for real
  %(prog)s delete
  %(prog)s delete --hard
        """
    )

    # Global options
    parser.add_argument("--db", default=DEFAULT_DB_PATH,
                        help=f"SQLite database of known attachments (default: {DEFAULT_DB_PATH})")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable verbose (DEBUG) output")

    subparsers = parser.add_subparsers(dest="command", required=True, help="Available commands")
    _add_display_parser(subparsers)
    _add_delete_parser(subparsers)
    _add_import_parser(subparsers)
    _add_set_option_parser(subparsers)
    return parser


def _add_layout_argument(subparser):
    subparser.add_argument("--year-month-folders", action=argparse.BooleanOptionalAction, default=None,
                           help="Uploads are organised in YYYY/MM folders "
                                "(default: stored option, otherwise on)")


def _add_display_parser(subparsers):
    """Add display command parser."""
    display_parser = subparsers.add_parser("display", help="List database, filesystem or orphaned media")
    display_parser.add_argument("--format", default=DEFAULT_FORMAT,
                                help=f"Output format: {', '.join(OUTPUT_FORMATS)} (default: {DEFAULT_FORMAT})")
    display_parser.add_argument("--list", dest="list_type", default=DEFAULT_LIST_TYPE,
                                help=f"What to list: {', '.join(LIST_TYPES)} (default: {DEFAULT_LIST_TYPE})")
    display_parser.add_argument("--upload-dir",
                                help="Uploads directory, not including any year/month folders")
    display_parser.add_argument("--orderby", default=DEFAULT_ORDERBY,
                                help=f"Database ordering field: {', '.join(ORDERBY_FIELDS)} "
                                     f"(default: {DEFAULT_ORDERBY})")
    display_parser.add_argument("--order", default=DEFAULT_ORDER,
                                help=f"Database ordering: {', '.join(ORDER_DIRECTIONS)} (default: {DEFAULT_ORDER})")
    _add_layout_argument(display_parser)


def _add_delete_parser(subparsers):
    """Add delete command parser."""
    delete_parser = subparsers.add_parser("delete", help="Delete orphaned media")
    delete_parser.add_argument("--upload-dir",
                               help="Uploads directory, not including any year/month folders")
    delete_parser.add_argument("--hard", action="store_true",
                               help="Actually delete files; without it only the intended deletions are listed")
    delete_parser.add_argument("--yes", "-y", action="store_true",
                               help="Do not ask for confirmation before a hard delete")
    _add_layout_argument(delete_parser)


def _add_import_parser(subparsers):
    """Add import-known command parser."""
    import_parser = subparsers.add_parser("import-known", help="Load known attachments from a CSV file")
    import_parser.add_argument("--csv", required=True,
                               help="CSV file with id,name,path[,date] columns")


def _add_set_option_parser(subparsers):
    """Add set-option command parser."""
    option_parser = subparsers.add_parser("set-option", help="Store an upload setting in the database")
    option_parser.add_argument("--name", required=True,
                               help=f"Option name: {', '.join(SETTABLE_OPTIONS)}")
    option_parser.add_argument("--value", required=True,
                               help="Option value, e.g. a path or 0/1")


def main(argv=None):
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Machine-readable listings keep stdout clean
    if args.command == "display" and args.format != "table":
        enable_machine_output_logging(logging.DEBUG if args.verbose else logging.WARNING)
    else:
        setup_logging(args.verbose)

    logging.debug("Parsed arguments: %s", args)

    db_manager = None
    try:
        db_path = Path(args.db)
        logging.debug("Using database: %s", db_path)
        db_manager = DatabaseManager(db_path)

        if args.command == "display":
            cmd_display(
                db_manager,
                fmt=args.format,
                list_type=args.list_type,
                upload_dir=args.upload_dir,
                orderby=args.orderby,
                order=args.order,
                year_month_folders=args.year_month_folders,
            )

        elif args.command == "delete":
            outcomes = cmd_delete(
                db_manager,
                upload_dir=args.upload_dir,
                hard=args.hard,
                year_month_folders=args.year_month_folders,
                assume_yes=args.yes,
            )
            if outcomes is None:
                return 1

        elif args.command == "import-known":
            cmd_import_known(db_manager, Path(args.csv))

        elif args.command == "set-option":
            cmd_set_option(db_manager, args.name, args.value)

        return 0

    except ConfigurationError as e:
        logging.error("Error: %s", e)
        sys.exit(1)
    except KeyboardInterrupt:
        logging.warning("Operation interrupted by user.")
        sys.exit(130)
    except Exception as e:
        logging.error("Error occurred: %s", e, exc_info=args.verbose)
        sys.exit(1)
    finally:
        if db_manager is not None:
            db_manager.close()


if __name__ == "__main__":
    sys.exit(main())
