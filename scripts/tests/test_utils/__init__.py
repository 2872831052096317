"""Helpers shared by the catalog storage tests."""

import json
from pathlib import Path


def write_collection(root: Path, record_type: str, records: list) -> Path:
    """Write a collection file straight to disk, bypassing FileStorage."""
    path = Path(root) / f"{record_type}.json"
    path.write_text(json.dumps(records), encoding="utf-8")
    return path


def read_collection(root: Path, record_type: str) -> list:
    """Read a collection file straight from disk."""
    return json.loads((Path(root) / f"{record_type}.json").read_text(encoding="utf-8"))
