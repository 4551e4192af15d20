"""JSON-Schema Document Model

One node type for the whole document tree. Unset (None) members are
omitted on serialization; properties keep insertion order so output is
reproducible.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class JSONSchema(BaseModel):
    """A JSON-Schema node (object, array or leaf)."""

    model_config = ConfigDict(populate_by_name=True, validate_assignment=False)

    # Metadata
    dialect: str | None = Field(default=None, alias="$schema")
    title: str | None = None
    description: str | None = None

    # Core
    type: str

    # Object
    properties: dict[str, JSONSchema] | None = None
    required: list[str] | None = None

    # String
    min_length: int | None = Field(default=None, alias="minLength")
    max_length: int | None = Field(default=None, alias="maxLength")

    # Array
    items: JSONSchema | None = None
    min_items: int | None = Field(default=None, alias="minItems")
    max_items: int | None = Field(default=None, alias="maxItems")

    @classmethod
    def object(cls, title: str = "", description: str = "") -> JSONSchema:
        return cls(type="object", title=title or None, description=description or None)

    @classmethod
    def leaf(cls, type_: str, description: str | None = None, **bounds: Any) -> JSONSchema:
        """Leaf node; an empty description is omitted."""
        return cls(type=type_, description=description or None, **bounds)

    def add_property(self, name: str, node: JSONSchema, *, required: bool) -> None:
        if self.properties is None: self.properties = {}
        self.properties[name] = node
        if required: self.add_required(name)

    def add_required(self, name: str) -> None:
        if self.required is None: self.required = []
        self.required.append(name)

    def to_dict(self) -> dict[str, Any]:
        """Serialize with JSON-Schema keyword names, omitting unset members."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def to_json(self, indent: int | None = None) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)


JSONSchema.model_rebuild()
