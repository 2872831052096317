"""File-system backed storage utilities."""

from .file_storage import FileStorage, entity_id, to_record
from .record_types import RecordType
from .resource_record import CatalogRecord, canonical_id, record_type_of
from .storage_layout import collection_path, type_collection_path
from .type_registry import TypeRegistry, registry
