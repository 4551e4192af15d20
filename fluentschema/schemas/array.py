"""Array Schema

Wraps an element schema used as a template: every element is assigned,
decoded and validated on a fresh clone of the template, so one element's
value never leaks into another's and the template itself is never mutated.

Elements rejected at assignment or decode time are not stored; their errors
are kept and reported by the next ``validate()``. Count bounds apply to the
stored elements.
"""
from __future__ import annotations

import copy
from typing import Any

from pydantic_core import from_json, to_json

from fluentschema.errors import (
    DecodeError,
    EncodeError,
    Err,
    ErrorKind,
    Fault,
    Ok,
    Result,
    invalid_format,
    raise_fault,
    required_field,
    type_mismatch,
)
from fluentschema.jsonschema import JSONSchema
from fluentschema.logging import schema_logger
from fluentschema.validation import (
    BoundCheck,
    MaxItems,
    MinItems,
    ValidationErrorDetail,
    ValidationOptions,
    ValidationResult,
    decode_failure,
)

from .base import NULL, Schema, as_bytes, is_null

log = schema_logger()


def _element_error(kind: ErrorKind, index: int, message: str) -> ValidationErrorDetail:
    return ValidationErrorDetail(kind, f"element {index}: {message}")


class ArraySchema(Schema):
    """Schema for an ordered sequence of values described by one element schema."""
    json_type = "array"

    def __init__(self, element: Schema) -> None:
        if element is None:
            raise ValueError("element schema cannot be None")
        self._element = element
        self._checks: list[BoundCheck] = []
        self.min_items_value: int | None = None
        self.max_items_value: int | None = None
        self._value: list[Any] | None = None
        self._rejected: list[ValidationErrorDetail] = []
        self._optional = False
        self._description: str | None = None

    @property
    def element(self) -> Schema: return self._element

    # ------------------------------------------------------------------
    # Fluent configuration
    # ------------------------------------------------------------------

    def min_items(self, count: int, options: ValidationOptions | None = None) -> ArraySchema:
        check = MinItems.build(count, options)
        self.min_items_value = count
        self._checks.append(check)
        return self

    def max_items(self, count: int, options: ValidationOptions | None = None) -> ArraySchema:
        check = MaxItems.build(count, options)
        self.max_items_value = count
        self._checks.append(check)
        return self

    def optional(self) -> ArraySchema:
        self._optional = True
        return self

    def description(self, text: str) -> ArraySchema:
        self._description = text
        return self

    def set(self, *values: Any) -> ArraySchema:
        """Assign elements through template clones.

        An element the template rejects is recorded as ``invalid_element_type``
        and skipped, so the stored array can be shorter than the input.
        """
        stored: list[Any] = []
        rejected: list[ValidationErrorDetail] = []
        for i, item in enumerate(values):
            element = self._element.clone()
            match element.set_internal_value(item):
                case Err(fault):
                    rejected.append(_element_error(ErrorKind.INVALID_ELEMENT_TYPE, i, fault.message))
                    continue
            value, present = element.get_internal_value()
            if present:
                stored.append(value)
        self._value, self._rejected = stored, rejected
        return self

    def values(self) -> tuple[list[Any] | None, bool]:
        return self._value, self._value is not None

    def get_description(self) -> str | None: return self._description

    # ------------------------------------------------------------------
    # Contract
    # ------------------------------------------------------------------

    def is_optional(self) -> bool: return self._optional

    def validate(self) -> ValidationResult:
        result = ValidationResult()
        if self._value is None:
            if not self._optional:
                result.add_error(ValidationErrorDetail(ErrorKind.REQUIRED, "array is required"))
            return result

        # min bounds before max bounds, each group in registration order
        for check in sorted(self._checks, key=lambda c: isinstance(c, MaxItems)):
            if (detail := check(self._value)) is not None:
                result.add_error(detail)
        for detail in self._rejected:
            result.add_error(detail)

        for i, item in enumerate(self._value):
            element = self._element.clone()
            match element.set_internal_value(item):
                case Ok():
                    result.merge(element.validate(), prefix=f"element {i}: ")
                case Err(fault):
                    result.add_error(_element_error(ErrorKind.INVALID_ELEMENT_TYPE, i, fault.message))
        return result

    def encode(self) -> bytes:
        if self._value is None:
            if self._optional: return NULL
            raise_fault(required_field("required array has no value"), EncodeError)
        return to_json(self._value)

    def decode(self, data: bytes | str) -> None:
        raw = as_bytes(data)
        if is_null(raw):
            if not self._optional:
                raise_fault(required_field("array is required"), DecodeError)
            self._value, self._rejected = None, []
            return

        try:
            payload = from_json(raw)
        except ValueError as e:
            raise_fault(invalid_format("array", e), DecodeError)
        if not isinstance(payload, list):
            raise_fault(invalid_format("array"), DecodeError)

        stored: list[Any] = []
        rejected: list[ValidationErrorDetail] = []
        for i, item in enumerate(payload):
            element = self._element.clone()
            try:
                element.decode(to_json(item))
            except DecodeError as e:
                log.debug("element_rejected", index=i, kind=e.kind.value)
                rejected.append(_element_error(ErrorKind.INVALID_ELEMENT_TYPE, i, str(e)))
                continue
            value, present = element.get_internal_value()
            if present:
                stored.append(value)
            else:
                rejected.append(_element_error(ErrorKind.MISSING_ELEMENT_VALUE, i, "missing value"))

        self._value, self._rejected = stored, rejected
        if (result := self.validate()).has_errors():
            raise decode_failure(result)

    def clone(self) -> ArraySchema:
        clone = ArraySchema(self._element.clone())
        clone._checks = list(self._checks)
        clone.min_items_value, clone.max_items_value = self.min_items_value, self.max_items_value
        clone._value = copy.deepcopy(self._value)
        clone._rejected = list(self._rejected)
        clone._optional, clone._description = self._optional, self._description
        return clone

    def get_internal_value(self) -> tuple[Any, bool]:
        return self._value, self._value is not None

    def set_internal_value(self, value: Any) -> Result[None, Fault]:
        if not isinstance(value, (list, tuple)):
            return type_mismatch("array", value)
        self._value, self._rejected = list(value), []
        return Ok(None)

    def to_json_schema(self) -> JSONSchema:
        return JSONSchema(type=self.json_type, items=self._element.to_json_schema(), description=self._description or None,
            min_items=self.min_items_value, max_items=self.max_items_value)

    def __repr__(self) -> str:
        return f"ArraySchema(element={self._element!r}, value={self._value!r}, optional={self._optional})"


def Array(element: Schema) -> ArraySchema:
    return ArraySchema(element)
