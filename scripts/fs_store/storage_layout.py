"""Storage layout for catalog collections."""

from __future__ import annotations

from pathlib import Path

from conf import TYPE_COLLECTION

from .resource_record import record_type_of

COLLECTION_SUFFIX = ".json"


def collection_path(storage_root: Path, record_type: str) -> Path:
    """Return ``<storage_root>/<record_type>.json`` for a collection."""
    return Path(storage_root) / f"{record_type_of(record_type)}{COLLECTION_SUFFIX}"


def type_collection_path(storage_root: Path) -> Path:
    """Return the path of the shared type descriptor collection."""
    return collection_path(storage_root, TYPE_COLLECTION)
