"""CatalogRecords: central manager for catalog record collections.

Provides lazy access to a shared ``FileStorage`` plus typed helpers that turn
stored records back into record instances.

Usage::

    from records.catalog_records import catalog_records
    from records import Case

    cases = await catalog_records.load(Case)
    descriptor = await catalog_records.describe(Case)
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, TypeVar

from fs_store import CatalogRecord, FileStorage

from .type_descriptor import TypeDescriptor

T = TypeVar("T", bound=CatalogRecord)


class CatalogRecords:
    """Manages catalog collections with lazy storage initialization."""

    def __init__(self, storage_root: Path | None = None):
        self._storage_root = storage_root
        self._storage: FileStorage | None = None

    def _get_storage_root(self) -> Path:
        if self._storage_root is not None:
            return self._storage_root
        from conf import STORAGE_ROOT
        return STORAGE_ROOT

    @property
    def storage(self) -> FileStorage:
        if self._storage is None:
            self._storage = FileStorage(self._get_storage_root())
        return self._storage

    async def load(self, record_cls: type[T]) -> list[T]:
        """Load every record of ``record_cls`` as typed instances."""
        return [record_cls.from_dict(data) for data in await self.storage.all(record_cls)]

    async def find(self, record_cls: type[T], record_id: Any) -> T | None:
        """Look up one record by id (``"5"`` and ``5`` are the same id)."""
        data = await self.storage.get(record_cls, {"id": record_id})
        if data is None:
            return None
        return record_cls.from_dict(data)

    async def describe(self, record_cls: type[CatalogRecord] | str) -> TypeDescriptor | None:
        """Return the type descriptor for a record class or tag."""
        data = await self.storage.type(record_cls)
        if data is None:
            return None
        return TypeDescriptor.model_validate(data)

    async def init_collection(self, record_cls: type[CatalogRecord] | str) -> bool:
        """Create an empty collection file for ``record_cls`` if missing."""
        return await self.storage.ensure_collection(record_cls)

    def reset(self) -> None:
        """Drop the cached storage so the next access starts fresh."""
        self._storage = None


catalog_records = CatalogRecords()
