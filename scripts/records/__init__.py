"""Catalog record definitions.

Each module defines a typed ``CatalogRecord`` subclass representing a catalog
entity. Records of one type share a single collection file,
``<storage-root>/<record_type>.json``, holding a JSON array, and are managed
through ``FileStorage`` (see ``CatalogRecords`` for a typed front end).

Per-type metadata lives in ``<storage-root>/type.json`` and is read back as
``TypeDescriptor`` models.

Example::

    from records import Case
    from records.catalog_records import catalog_records

    await catalog_records.storage.add(Case, Case(id="c-1", name="Meshify 2"))
"""

from .case import Case
from .catalog_records import CatalogRecords, catalog_records
from .type_descriptor import TypeDescriptor
