"""Schema Capability Contract

Every schema variant (number, string, bool, array) implements the same
contract: validate, encode/decode, clone, optionality, type-erased value
access and JSON-Schema compilation. ScalarSchema is the shared engine for
single-valued schemas: value storage, optionality, description, replayable
bound checks and the JSON codec.
"""
from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import TypeAdapter, ValidationError as PydanticValidationError
from pydantic_core import to_json

from fluentschema.jsonschema import JSONSchema
from fluentschema.errors import (
    DecodeError,
    EncodeError,
    Err,
    ErrorKind,
    Fault,
    Ok,
    Result,
    TypeMismatchError,
    invalid_format,
    raise_fault,
    required_field,
    type_mismatch,
)
from fluentschema.logging import schema_logger
from fluentschema.validation import BoundCheck, ValidationErrorDetail, ValidationResult, decode_failure

T = TypeVar("T")

log = schema_logger()

NULL = b"null"


class Schema(ABC):
    """Core schema contract.

    A schema stores a value, knows the constraints it must satisfy and can
    move that value across JSON and across the type-erased boundary used by
    composite schemas.
    """

    @abstractmethod
    def validate(self) -> ValidationResult:
        """Re-derive a full result from current configuration and value. Never raises."""

    @abstractmethod
    def encode(self) -> bytes:
        """Serialize the current value. Raises EncodeError when a required value is missing."""

    @abstractmethod
    def decode(self, data: bytes | str) -> None:
        """Parse a JSON value, store it and validate it. Raises DecodeError."""

    @abstractmethod
    def clone(self) -> Schema:
        """Deep, independent copy including rules and current value."""

    @abstractmethod
    def is_optional(self) -> bool: ...

    @abstractmethod
    def get_internal_value(self) -> tuple[Any, bool]:
        """Return ``(value, present)``."""

    @abstractmethod
    def set_internal_value(self, value: Any) -> Result[None, Fault]:
        """Store ``value`` if its shape matches; ``Err`` with an ``invalid_type`` fault otherwise."""

    @abstractmethod
    def to_json_schema(self) -> JSONSchema:
        """Describe this schema as a JSON-Schema node."""


def as_bytes(data: bytes | str) -> bytes:
    return data.encode("utf-8") if isinstance(data, str) else bytes(data)


def is_null(raw: bytes) -> bool:
    return raw.strip() == NULL


@lru_cache(maxsize=None)
def adapter_for(value_type: type) -> TypeAdapter:
    """Cached pydantic adapter used for strict JSON decoding of ``value_type``."""
    return TypeAdapter(value_type)


class ScalarSchema(Schema, Generic[T]):
    """Shared engine for single-valued schemas.

    Subclasses set ``value_type`` (the Python type stored), ``type_label``
    (used in messages) and ``json_type`` (the JSON-Schema type tag).
    """
    value_type: type
    type_label: ClassVar[str] = "value"
    json_type: ClassVar[str] = "string"
    required_message: ClassVar[str] = "value has not been set"

    def __init__(self) -> None:
        self._value: T | None = None
        self._optional = False
        self._description: str | None = None
        self._checks: list[BoundCheck] = []

    # ------------------------------------------------------------------
    # Fluent configuration
    # ------------------------------------------------------------------

    def optional(self):
        """Mark the field as optional."""
        self._optional = True
        return self

    def description(self, text: str):
        self._description = text
        return self

    def set(self, value: T):
        """Assign a value. Raises TypeMismatchError if the Python type is wrong."""
        match self._coerce(value):
            case Ok(coerced):
                self._value = coerced
            case Err(fault):
                raise_fault(fault, TypeMismatchError)
        return self

    def value(self) -> tuple[T | None, bool]:
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
                result.add_error(ValidationErrorDetail(ErrorKind.REQUIRED, self.required_message))
            return result
        for check in self._checks:
            if (detail := check(self._value)) is not None:
                result.add_error(detail)
        return result

    def encode(self) -> bytes:
        if self._value is None:
            if self._optional: return NULL
            raise_fault(required_field("required field has no value"), EncodeError)
        return to_json(self._value)

    def decode(self, data: bytes | str) -> None:
        raw = as_bytes(data)
        if is_null(raw):
            if not self._optional:
                raise_fault(required_field("validation failed: field is required"), DecodeError)
            self._value = None
            return

        try:
            value = adapter_for(self.value_type).validate_json(raw, strict=True)
        except PydanticValidationError as e:
            log.debug("decode_rejected", schema=type(self).__name__, errors=e.error_count())
            raise_fault(invalid_format(self.type_label, e), DecodeError)

        self._value = value
        if (result := self.validate()).has_errors():
            raise decode_failure(result)

    def clone(self):
        clone = copy.copy(self)
        clone._checks = list(self._checks)
        return clone

    def get_internal_value(self) -> tuple[Any, bool]:
        return self._value, self._value is not None

    def set_internal_value(self, value: Any) -> Result[None, Fault]:
        return self._coerce(value).map(self._store)

    def to_json_schema(self) -> JSONSchema:
        return JSONSchema.leaf(self.json_type, self._description)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _store(self, value: T) -> None:
        self._value = value

    def _coerce(self, value: Any) -> Result[T, Fault]:
        """Accept instances of ``value_type``; bool is never accepted as a number."""
        if isinstance(value, bool) and self.value_type is not bool:
            return type_mismatch(self.type_label, value)
        if isinstance(value, self.value_type):
            return Ok(value)
        return type_mismatch(self.type_label, value)

    def _register(self, check: BoundCheck):
        self._checks.append(check)
        return self

    def __repr__(self) -> str:
        return f"{type(self).__name__}(value={self._value!r}, optional={self._optional})"
