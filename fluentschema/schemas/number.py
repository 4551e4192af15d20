"""Constrained Value Schema

One generic engine for every totally ordered scalar type. ``IntSchema`` and
``FloatSchema`` are its concrete instantiations; ``Number(value_type)``
builds one for any other ordered type (``Decimal``, ``Fraction``, ...).

Usage:
    age = Int().min(0).max(150).description("Age in years")
    age.set(42)
    assert not age.validate().has_errors()
"""
from __future__ import annotations

from typing import Any, Protocol, TypeVar

from fluentschema.errors import Fault, Ok, Result, type_mismatch
from fluentschema.jsonschema import JSONSchema
from fluentschema.validation import MaxValue, MinValue, ValidationOptions

from .base import ScalarSchema


class SupportsOrdering(Protocol):
    def __lt__(self, other: Any, /) -> bool: ...
    def __gt__(self, other: Any, /) -> bool: ...


N = TypeVar("N", bound=SupportsOrdering)


class NumberSchema(ScalarSchema[N]):
    """Schema for a totally ordered scalar with inclusive min/max bounds.

    Each ``min``/``max`` call registers an independent check; calling ``min``
    twice enforces both thresholds. ``min_value``/``max_value`` report the
    most recently declared thresholds.
    """
    json_type = "number"

    def __init__(self, value_type: type[N]) -> None:
        super().__init__()
        self.value_type = value_type
        self.min_value: N | None = None
        self.max_value: N | None = None

    @property
    def type_label(self) -> str: return self.value_type.__name__

    def min(self, threshold: N, options: ValidationOptions | None = None) -> NumberSchema[N]:
        self.min_value = threshold
        return self._register(MinValue.build(threshold, options))

    def max(self, threshold: N, options: ValidationOptions | None = None) -> NumberSchema[N]:
        self.max_value = threshold
        return self._register(MaxValue.build(threshold, options))

    def to_json_schema(self) -> JSONSchema:
        """``"integer"`` for int types, ``"number"`` for every other ordered type.

        Numeric bounds are not emitted.
        """
        type_ = "integer" if issubclass(self.value_type, int) else self.json_type
        return JSONSchema.leaf(type_, self._description)


class IntSchema(NumberSchema[int]):
    """Schema for ``int`` values (``bool`` is rejected)."""

    def __init__(self) -> None:
        super().__init__(int)


class FloatSchema(NumberSchema[float]):
    """Schema for ``float`` values. ``int`` is accepted and stored as ``float``."""

    def __init__(self) -> None:
        super().__init__(float)

    def _coerce(self, value: Any) -> Result[float, Fault]:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return type_mismatch(self.type_label, value)
        return Ok(float(value))


def Number(value_type: type[N]) -> NumberSchema[N]:
    """Create a schema for any totally ordered ``value_type``."""
    if value_type is int: return IntSchema()  # type: ignore[return-value]
    if value_type is float: return FloatSchema()  # type: ignore[return-value]
    return NumberSchema(value_type)


def Int() -> IntSchema:
    return IntSchema()


def Float() -> FloatSchema:
    return FloatSchema()
