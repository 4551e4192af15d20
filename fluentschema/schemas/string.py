"""String Schema

Same engine as the number schema, with bounds on the character count
instead of ordering.
"""
from __future__ import annotations

from fluentschema.jsonschema import JSONSchema
from fluentschema.validation import MaxLength, MinLength, ValidationOptions

from .base import ScalarSchema


class StringSchema(ScalarSchema[str]):
    """Schema for ``str`` values with inclusive length bounds."""
    value_type = str
    type_label = "string"
    json_type = "string"

    def __init__(self) -> None:
        super().__init__()
        self.min_length: int | None = None
        self.max_length: int | None = None

    def min(self, length: int, options: ValidationOptions | None = None) -> StringSchema:
        """Minimum length in characters."""
        self.min_length = length
        return self._register(MinLength.build(length, options))

    def max(self, length: int, options: ValidationOptions | None = None) -> StringSchema:
        """Maximum length in characters."""
        self.max_length = length
        return self._register(MaxLength.build(length, options))

    def to_json_schema(self) -> JSONSchema:
        return JSONSchema.leaf(self.json_type, self._description, min_length=self.min_length, max_length=self.max_length)


def String() -> StringSchema:
    return StringSchema()
