"""Recursive Ensure Engine

Walks an object graph depth first and validates every schema it finds,
stitching the member path onto each error:

    @dataclass
    class Order:
        customer: Customer = schema_field("customer", factory=Customer)
        quantity: IntSchema = schema_field("quantity", factory=lambda: Int().min(1))

    ensure(order).error_message()
    # validation failed: customer.name: [required] value has not been set

Schemas are leaves: their internals are never walked, so each schema member
is validated exactly once. A declaration that is itself a Schema is
validated as a whole and its members are walked too.

The walk does not track visited objects; a reference cycle between records
recurses until the interpreter's recursion limit.
"""
from __future__ import annotations

import dataclasses
from typing import Any

from fluentschema.fields import is_record, iter_members, join_path
from fluentschema.logging import ensure_logger
from fluentschema.schemas import Schema
from fluentschema.validation import ValidationResult

log = ensure_logger()


def ensure(value: Any) -> ValidationResult:
    """Validate ``value`` and everything reachable from it. Never raises for invalid data."""
    result = ValidationResult()
    _walk(value, "", result)
    log.debug("ensure_complete", root=type(value).__name__, errors=len(result))
    return result


def _walk(value: Any, path: str, result: ValidationResult) -> None:
    if value is None: return

    if isinstance(value, Schema):
        log.debug("validate", path=path or "<root>", schema=type(value).__name__)
        result.merge(value.validate(), path=path)
        if not dataclasses.is_dataclass(value): return
    elif not is_record(value):
        return

    for member in iter_members(value):
        _walk(member.value, join_path(path, member.name), result)
