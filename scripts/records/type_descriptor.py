"""TypeDescriptor: per-type metadata stored in ``type.json``."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TypeDescriptor(BaseModel):
    """Descriptor keyed by a lowercase record type tag.

    Any metadata besides ``type`` (display names, categories, units...) is
    kept as extra fields.
    """

    model_config = ConfigDict(extra="allow")

    type: str = Field(min_length=1)

    @property
    def metadata(self) -> dict[str, Any]:
        """Everything in the descriptor except ``type``."""
        return dict(self.model_extra or {})
