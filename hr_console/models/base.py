"""Shared pydantic bases: snake_case in Python, camelCase on the wire."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HRRecord(CamelModel):
    """A stored record. ``id`` is assigned by the owning service."""

    model_config = ConfigDict(extra="allow")

    id: int = Field(default=0, alias="Id")


class PatchModel(CamelModel):
    """Partial update body. Only fields the client actually sent become changes."""

    nullable_fields: ClassVar[frozenset[str]] = frozenset()

    def changes(self) -> dict[str, Any]:
        data = self.model_dump(mode="json", exclude_unset=True)
        return {k: v for k, v in data.items() if v is not None or k in self.nullable_fields}
