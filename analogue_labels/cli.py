"""
Command line for editing an Analogue 3D labels.db.

    analogue-labels add [--db labels.db] 3274BDAF.png 0x0a00b94f.jpg ...
    analogue-labels list [--db labels.db]
    analogue-labels export [--db labels.db] out_dir [--signature 3274bdaf]
    analogue-labels init labels.db

Each image is named after the cartridge signature it belongs to.
"""

import argparse
import logging
import os
import shutil
import sys
from pathlib import Path

from .constants import DEFAULT_DB_LOCATIONS
from .errors import LabelsDBError
from .labels_db import create_labels_db, export_images, list_signatures, update_labels_db
from .logging_config import configure_logging
from .signature import format_signature, hex_string_transform, pending_images_from_paths

logger = logging.getLogger(__name__)


def auto_detect_labels_db(cwd=None):
    """Find labels.db in the current directory or where an SD card keeps it"""
    current_dir = Path(cwd) if cwd else Path.cwd()
    for location in DEFAULT_DB_LOCATIONS:
        path = current_dir / location
        if path.exists():
            return str(path)
    return None


def _resolve_db(args):
    if args.db:
        return os.path.abspath(args.db)

    path = auto_detect_labels_db()
    if path is None:
        raise FileNotFoundError(
            "labels.db not found in the current directory, pass it with --db"
        )
    logger.info("Using %s", path)
    return path


def _add(args):
    path = _resolve_db(args)
    pending = pending_images_from_paths(args.images)

    if args.backup and not args.dry_run:
        backup_path = path + ".bak"
        shutil.copy2(path, backup_path)
        logger.info("Backed up %s to %s", path, backup_path)

    signatures = update_labels_db(path, pending, dry_run=args.dry_run)
    print(f"{len(signatures)} entries in {path}")


def _list(args):
    path = _resolve_db(args)
    signatures = list_signatures(path)
    for sig in signatures:
        print(format_signature(sig))
    print(f"Total: {len(signatures)} entries")


def _export(args):
    path = _resolve_db(args)
    only = None
    if args.signature:
        only = {hex_string_transform(s) for s in args.signature}

    os.makedirs(args.export_dir, exist_ok=True)
    exported = export_images(path, args.export_dir, only)
    print(f"Exported {len(exported)} images to {args.export_dir}")


def _init(args):
    create_labels_db(args.path)
    print(f"Created {args.path}")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="analogue-labels", description="Add custom cartridge labels to an Analogue 3D labels.db"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug output")
    parser.add_argument("--log-file", type=str, default=None, help="Also write the log to this file")
    subparsers = parser.add_subparsers(dest="command", required=True)

    add_parser = subparsers.add_parser("add", help="Add or replace label images")
    add_parser.add_argument("--db", type=str, help="Path to labels.db (auto-detected if omitted)")
    add_parser.add_argument("--backup", action="store_true", help="Copy labels.db to labels.db.bak first")
    add_parser.add_argument("--dry-run", action="store_true", help="Load and merge but don't write")
    add_parser.add_argument("images", nargs="+", help="Image files named <signature>.<ext>")
    add_parser.set_defaults(func=_add)

    list_parser = subparsers.add_parser("list", help="List the signatures in labels.db")
    list_parser.add_argument("--db", type=str, help="Path to labels.db (auto-detected if omitted)")
    list_parser.set_defaults(func=_list)

    export_parser = subparsers.add_parser("export", help="Export labels as PNG files")
    export_parser.add_argument("--db", type=str, help="Path to labels.db (auto-detected if omitted)")
    export_parser.add_argument("export_dir", help="Directory to write the PNG files to")
    export_parser.add_argument(
        "-s", "--signature", action="append", help="Only export this signature (repeatable)"
    )
    export_parser.set_defaults(func=_export)

    init_parser = subparsers.add_parser("init", help="Create an empty labels.db")
    init_parser.add_argument("path", help="Where to create the file")
    init_parser.set_defaults(func=_init)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO, args.log_file)

    try:
        args.func(args)
    except (LabelsDBError, OSError) as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
