"""Record type constants used across the fs_store layer."""

from enum import StrEnum


class RecordType(StrEnum):
    """Lowercase tags naming each collection file and its type descriptor.

    The shared descriptor collection itself is ``conf.TYPE_COLLECTION``.
    """

    CASE = "case"
