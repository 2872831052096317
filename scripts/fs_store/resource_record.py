"""Base catalog record: pure data contract for persisted entities (stdlib only).

No filesystem I/O here; see ``FileStorage`` for persistence.
"""

from __future__ import annotations

import json
import uuid
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, ClassVar, TypeVar

from .type_registry import registry

T = TypeVar("T", bound="CatalogRecord")


def canonical_id(value: Any) -> str | None:
    """Normalize a record id to its canonical string form.

    ``5``, ``5.0`` and ``"5"`` all become ``"5"``. ``None`` stays ``None``
    and never matches anything.
    """
    if value is None:
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


def record_type_of(entity: Any) -> str:
    """Return the record type tag for a tag string, record class or instance.

    Tags must be non-empty and lowercase; they double as file names.
    """
    if isinstance(entity, str):
        record_type = str(entity)
    else:
        record_type = getattr(entity, "record_type", None)
        if not isinstance(record_type, str) or not record_type:
            raise TypeError(f"{entity!r} does not declare a record_type")
        record_type = str(record_type)
    if not record_type or record_type != record_type.lower():
        raise ValueError(f"Invalid record type tag: {record_type!r}")
    return record_type


@dataclass
class CatalogRecord:
    """Base record for every catalog entity.

    Subclasses set ``record_type`` to the lowercase tag of their collection
    and are registered in the global type registry under that tag.
    Doubles as a key-value store via dict-style access on ``extra``.
    """

    record_type: ClassVar[str] = ""

    id: str | int = field(default_factory=lambda: str(uuid.uuid4()))

    # Fields not declared by the record class
    extra: dict = field(default_factory=dict)

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        record_type = cls.__dict__.get("record_type")
        if record_type:
            registry.register(str(record_type), cls)

    # -- Key-value access --

    def __getitem__(self, key: str) -> Any:
        known = {f.name for f in self.__dataclass_fields__.values()}
        if key in known:
            return getattr(self, key)
        return self.extra[key]

    def __setitem__(self, key: str, value: Any) -> None:
        known = {f.name for f in self.__dataclass_fields__.values()}
        if key in known:
            setattr(self, key, value)
        else:
            self.extra[key] = value

    def __delitem__(self, key: str) -> None:
        if key not in self.extra:
            raise KeyError(key)
        del self.extra[key]

    def __contains__(self, key: str) -> bool:
        known = {f.name for f in self.__dataclass_fields__.values()}
        return key in known or key in self.extra

    def keys(self) -> list[str]:
        """All field names + extra keys."""
        known = [f.name for f in self.__dataclass_fields__.values() if f.name != "extra"]
        return known + list(self.extra.keys())

    # -- Serialization --

    def to_dict(self) -> dict:
        """Serialize to a flat dict, extra fields merged at the top level."""
        def _convert(obj):
            if isinstance(obj, Enum):
                return obj.value
            return obj

        data = asdict(self)
        extra = data.pop("extra", {})
        result = {key: _convert(value) for key, value in data.items()}
        for key, value in extra.items():
            result[key] = _convert(value)
        return result

    def to_json(self) -> str:
        """Serialize to the flat JSON text stored in collection files."""
        return json.dumps(self.to_dict(), ensure_ascii=False)

    @classmethod
    def from_dict(cls: type[T], data: dict) -> T:
        """Deserialize from a plain dict. Unknown keys land in ``extra``."""
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        kwargs: dict[str, Any] = {}
        extra: dict[str, Any] = {}

        for key, value in data.items():
            if key in known_fields and key != "extra":
                kwargs[key] = value
            elif key == "extra" and isinstance(value, dict):
                extra.update(value)
            else:
                extra[key] = value

        kwargs["extra"] = extra
        return cls(**kwargs)
