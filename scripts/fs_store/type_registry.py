"""Type registry for catalog record classes."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .resource_record import CatalogRecord


class TypeRegistry:
    def __init__(self) -> None:
        self._types: dict[str, type["CatalogRecord"]] = {}

    def register(self, record_type: str, cls: type["CatalogRecord"]) -> None:
        if record_type:
            self._types[record_type] = cls

    def get(self, record_type: str) -> type["CatalogRecord"] | None:
        return self._types.get(record_type)

    def resolve(self, record_type: str) -> type["CatalogRecord"]:
        """Like ``get`` but raises ``KeyError`` for unknown tags."""
        cls = self._types.get(record_type)
        if cls is None:
            known = ", ".join(sorted(self._types)) or "none"
            raise KeyError(f"Unknown record type {record_type!r} (known: {known})")
        return cls

    def items(self) -> dict[str, type["CatalogRecord"]]:
        return dict(self._types)


# Global registry
registry = TypeRegistry()
