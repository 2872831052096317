"""JSON-array collection storage: one file per record type with generic CRUD.

Every public operation starts from a clean cache and re-reads the collection
file; mutations rewrite the whole file. Lookups are linear scans over
canonical (string) ids, so ``"5"`` matches a stored ``5``.
"""

from __future__ import annotations

import asyncio
import copy
import json
import os
import tempfile
import weakref
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from conf import STORAGE_ROOT, TYPE_COLLECTION
from log import store_log

from .resource_record import canonical_id, record_type_of
from .storage_layout import collection_path, type_collection_path


def to_record(entity: Any) -> dict:
    """Convert an entity into a plain record through a JSON round trip."""
    if hasattr(entity, "to_json"):
        return json.loads(entity.to_json())
    if hasattr(entity, "to_dict"):
        data = entity.to_dict()
    elif isinstance(entity, Mapping):
        data = dict(entity)
    else:
        raise TypeError(f"Cannot convert {type(entity).__name__} to a record")
    return json.loads(json.dumps(data, ensure_ascii=False))


def entity_id(entity: Any) -> Any:
    """Return the id carried by a record, a mapping, or a bare id value."""
    if isinstance(entity, Mapping):
        return entity["id"]
    if hasattr(entity, "id"):
        return entity.id
    return entity


def _find(collection: list[dict], record_id: Any) -> int | None:
    wanted = canonical_id(record_id)
    if wanted is None:
        return None
    for index, record in enumerate(collection):
        if canonical_id(record.get("id")) == wanted:
            return index
    return None


def _read_collection(path: Path) -> list[dict]:
    with open(path, "r", encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, list):
        raise ValueError(f"{path} does not hold a JSON array")
    return data


def _write_collection(path: Path, collection: list[dict]) -> None:
    text = json.dumps(collection, ensure_ascii=False)
    path.parent.mkdir(parents=True, exist_ok=True)
    # Write a sibling temp file, then rename it over the target in one step
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(text)
        os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def _create_empty(path: Path) -> bool:
    if path.exists():
        return False
    _write_collection(path, [])
    return True


class FileStorage:
    """Async CRUD engine over ``<storage_root>/<record_type>.json`` files.

    ``entity_cls`` arguments accept a record class, a record instance, or a
    record type tag. ``entity`` arguments accept records (``to_json()``/``to_dict()``)
    or a mapping carrying ``id`` (``get``/``delete`` also take a bare id).

    ``get``, ``update``, ``delete`` and ``type`` return ``None`` when nothing
    matches. I/O and JSON errors propagate to the caller unchanged.
    """

    def __init__(self, storage_root: Path | str | None = None) -> None:
        self.storage_root = Path(storage_root) if storage_root is not None else STORAGE_ROOT
        # Locks bind to the loop that first waits on them, so keep one set per loop
        self._locks: weakref.WeakKeyDictionary[asyncio.AbstractEventLoop, dict[str, asyncio.Lock]] = (
            weakref.WeakKeyDictionary()
        )
        self.reload()

    # -- Cache --

    def reload(self) -> None:
        """Drop the cached collection so the next read comes from disk."""
        self._data: list[dict] | None = None
        self._data_type: str | None = None

    @property
    def cached(self) -> list[dict] | None:
        """Copy of the most recently loaded collection, or None after reload."""
        return copy.deepcopy(self._data)

    @property
    def cached_type(self) -> str | None:
        return self._data_type

    # -- Paths --

    def path_for(self, entity_cls: Any) -> Path:
        return collection_path(self.storage_root, record_type_of(entity_cls))

    # -- Read operations --

    async def type(self, entity: Any) -> dict | None:
        """Return the first type descriptor whose ``type`` matches the entity's tag."""
        self.reload()
        record_type = record_type_of(entity)
        descriptors = await asyncio.to_thread(
            _read_collection, type_collection_path(self.storage_root)
        )
        self._data = descriptors
        self._data_type = TYPE_COLLECTION
        for descriptor in descriptors:
            if descriptor.get("type") == record_type:
                return copy.deepcopy(descriptor)
        return None

    async def all(self, entity_cls: Any) -> list[dict]:
        """Read the full collection. The result is a copy of the cache."""
        return copy.deepcopy(await self._load(entity_cls))

    async def get(self, entity_cls: Any, entity: Any) -> dict | None:
        self.reload()
        collection = await self._load(entity_cls)
        index = _find(collection, entity_id(entity))
        if index is None:
            return None
        return copy.deepcopy(collection[index])

    # -- Mutations --

    async def add(self, entity_cls: Any, entity: Any) -> Any:
        """Append ``entity`` to its collection and return its id.

        Ids are caller-assigned; a duplicate id is logged but still appended.
        """
        record_type = record_type_of(entity_cls)
        record = to_record(entity)
        record_id = record["id"]
        async with self._lock(record_type):
            self.reload()
            collection = await self._load(record_type)
            if _find(collection, record_id) is not None:
                store_log(f"WARNING: {record_type} already holds id {record_id!r}, appending duplicate")
            collection.append(record)
            await self.save(record_type, collection)
        store_log(f"Added {record_type} {record_id!r} ({len(collection)} records)")
        return entity_id(entity)

    async def update(self, entity_cls: Any, entity: Any) -> Any:
        """Merge every field of ``entity`` except ``id`` onto the stored record."""
        record_type = record_type_of(entity_cls)
        changes = to_record(entity)
        record_id = changes.pop("id")
        async with self._lock(record_type):
            self.reload()
            collection = await self._load(record_type)
            index = _find(collection, record_id)
            if index is None:
                store_log(f"Update skipped: no {record_type} with id {record_id!r}")
                return None
            collection[index].update(changes)
            await self.save(record_type, collection)
        store_log(f"Updated {record_type} {record_id!r}: {sorted(changes)}")
        return record_id

    async def delete(self, entity_cls: Any, entity: Any) -> Any:
        record_type = record_type_of(entity_cls)
        record_id = entity_id(entity)
        async with self._lock(record_type):
            self.reload()
            collection = await self._load(record_type)
            index = _find(collection, record_id)
            if index is None:
                store_log(f"Delete skipped: no {record_type} with id {record_id!r}")
                return None
            del collection[index]
            await self.save(record_type, collection)
        store_log(f"Deleted {record_type} {record_id!r} ({len(collection)} records left)")
        return record_id

    async def save(self, entity_cls: Any, collection: list[dict]) -> None:
        """Replace the collection file with the full ``collection``."""
        await asyncio.to_thread(_write_collection, self.path_for(entity_cls), collection)

    async def ensure_collection(self, entity_cls: Any) -> bool:
        """Create an empty collection file if none exists. Returns True if created."""
        record_type = record_type_of(entity_cls)
        async with self._lock(record_type):
            created = await asyncio.to_thread(_create_empty, self.path_for(record_type))
        if created:
            store_log(f"Created empty {record_type} collection at {self.path_for(record_type)}")
        return created

    # -- Internals --

    async def _load(self, entity_cls: Any) -> list[dict]:
        self.reload()
        record_type = record_type_of(entity_cls)
        collection = await asyncio.to_thread(
            _read_collection, collection_path(self.storage_root, record_type)
        )
        self._data = collection
        self._data_type = record_type
        return collection

    def _lock(self, record_type: str) -> asyncio.Lock:
        locks = self._locks.setdefault(asyncio.get_running_loop(), {})
        lock = locks.get(record_type)
        if lock is None:
            lock = locks[record_type] = asyncio.Lock()
        return lock
