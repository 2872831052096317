"""Case: a typed record for computer case products."""

from __future__ import annotations

from dataclasses import dataclass

from fs_store import CatalogRecord, RecordType


@dataclass
class Case(CatalogRecord):
    """A computer case product.

    Stored as one entry of ``<storage-root>/case.json``.
    """

    record_type = RecordType.CASE

    manufacturer: str | None = None
    name: str | None = None
    image_url: str | None = None
    price: float = 0.0
    rating: float = 0.0
    stock: int = 0
    type: str | None = None
    color: str | None = None
    power_supply: str | None = None
    side_panel: str | None = None
    external_volume: float | None = None
    internal_bays: int = 0
