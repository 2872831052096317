#!/usr/bin/env python3
"""
Catalog store - Main Entry Point
Command-line access to the JSON collections managed by FileStorage.
"""
import argparse
import asyncio
import json
import sys
from pathlib import Path

from conf import STORAGE_ROOT
from fs_store import FileStorage, registry
from log import store_log
import records  # noqa: F401  (registers record classes)

EXIT_NOT_FOUND = 1
EXIT_FAILURE = 2

# =============================================================================
# ARGUMENTS
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="catalog",
        description="Read and modify catalog collections stored as JSON arrays",
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=STORAGE_ROOT,
        help=f"Storage root holding <type>.json files (default: {STORAGE_ROOT})",
    )
    parser.add_argument(
        "--pretty",
        "-p",
        action="store_true",
        help="Pretty print JSON output",
    )

    sub = parser.add_subparsers(dest="action", required=True)

    for action, help_text in (
        ("init", "Create an empty collection file if missing"),
        ("all", "Print every record of a collection"),
        ("type", "Print the type descriptor of a record type"),
    ):
        p = sub.add_parser(action, help=help_text)
        p.add_argument("record_type", help="Record type tag, e.g. 'case'")

    for action, help_text in (
        ("get", "Print one record by id"),
        ("delete", "Delete one record by id"),
    ):
        p = sub.add_parser(action, help=help_text)
        p.add_argument("record_type", help="Record type tag, e.g. 'case'")
        p.add_argument("id", help="Record id")

    for action, help_text in (
        ("add", "Append a record (missing fields take their defaults)"),
        ("update", "Merge fields onto the record with the same id"),
    ):
        p = sub.add_parser(action, help=help_text)
        p.add_argument("record_type", help="Record type tag, e.g. 'case'")
        p.add_argument("--data", "-d", required=True, help="Record JSON object carrying 'id'")

    return parser


# =============================================================================
# MAIN LOGIC
# =============================================================================

async def run(args: argparse.Namespace):
    """Execute one CLI action and return its JSON-serializable result."""
    storage = FileStorage(args.root)
    record_cls = registry.resolve(args.record_type)

    if args.action == "init":
        return {"created": await storage.ensure_collection(record_cls)}
    if args.action == "all":
        return await storage.all(record_cls)
    if args.action == "type":
        return await storage.type(record_cls)
    if args.action == "get":
        return await storage.get(record_cls, args.id)
    if args.action == "delete":
        return await storage.delete(record_cls, args.id)

    data = json.loads(args.data)
    if not isinstance(data, dict):
        raise ValueError("--data must be a JSON object")
    if "id" not in data:
        raise ValueError("--data must carry 'id'")
    if args.action == "add":
        return await storage.add(record_cls, record_cls.from_dict(data))
    return await storage.update(record_cls, data)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    store_log(f"CLI {args.action} {args.record_type} (root: {args.root})")

    try:
        result = asyncio.run(run(args))
    except (OSError, ValueError, KeyError, TypeError) as e:
        store_log(f"ERROR: {args.action} {args.record_type} failed: {e!r}")
        print(json.dumps({"error": str(e)}))  # noqa: T201
        return EXIT_FAILURE

    indent = 2 if args.pretty else None
    print(json.dumps(result, indent=indent, ensure_ascii=False))  # noqa: T201
    return EXIT_NOT_FOUND if result is None else 0


if __name__ == "__main__":
    sys.exit(main())
