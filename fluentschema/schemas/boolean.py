from __future__ import annotations

from .base import ScalarSchema


class BoolSchema(ScalarSchema[bool]):
    """Presence-only schema for ``bool`` values."""
    value_type = bool
    type_label = "bool"
    json_type = "boolean"
    required_message = "bool has not been set"


def Bool() -> BoolSchema:
    return BoolSchema()
