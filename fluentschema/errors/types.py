"""Error Taxonomy and Result Types

Typed error kinds for validation, decoding and compilation, an immutable
Fault value carrying them, and a small Result/Either monad used at the
type-erased value boundary between composite schemas.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable, Generic, NoReturn, TypeVar, Union, final

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound="Fault")


class ErrorKind(str, Enum):
    """Error kind taxonomy.

    The string value is the stable tag rendered as ``[kind]`` in error text.
    """
    # Presence
    REQUIRED = "required"

    # Ordering bounds
    MIN_NUMBER = "min_number"
    MAX_NUMBER = "max_number"

    # Length bounds
    MIN_STRING_LENGTH = "min_string_length"
    MAX_STRING_LENGTH = "max_string_length"

    # Cardinality
    MIN_ITEMS = "min_items"
    MAX_ITEMS = "max_items"
    INVALID_ELEMENT_TYPE = "invalid_element_type"
    MISSING_ELEMENT_VALUE = "missing_element_value"

    # Decoding / assignment
    INVALID_FORMAT = "invalid_format"
    INVALID_TYPE = "invalid_type"
    VALIDATION_FAILED = "validation_failed"

    # Compiler
    UNSUPPORTED_FIELD_SHAPE = "unsupported_field_shape"
    NIL_SCHEMA_REFERENCE = "nil_schema_reference"

    @property
    def category(self) -> str:
        """Human-readable error category."""
        if self in (ErrorKind.UNSUPPORTED_FIELD_SHAPE, ErrorKind.NIL_SCHEMA_REFERENCE):
            return "compile"
        if self in (ErrorKind.INVALID_FORMAT, ErrorKind.INVALID_TYPE, ErrorKind.VALIDATION_FAILED):
            return "decode"
        return "validation"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Fault:
    """Immutable error value: kind, message, debugging metadata and an optional cause."""
    kind: ErrorKind
    message: str
    metadata: dict[str, Any] = field(default_factory=dict)
    cause: Exception | None = None

    def with_metadata(self, **extra: Any) -> Fault: return replace(self, metadata={**self.metadata, **extra})

    def with_prefix(self, prefix: str) -> Fault:
        """Same fault with ``prefix`` (usually a member path) in front of the message."""
        return replace(self, message=f"{prefix}{self.message}")

    def chain(self, cause: Exception) -> Fault: return replace(self, cause=cause)

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "category": self.kind.category, "message": self.message,
            "metadata": self.metadata}

    def __str__(self) -> str: return f"[{self.kind.value}] {self.message}"


# ============================================================================
# Result
# ============================================================================

@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful outcome holding ``value``."""
    value: T

    def is_ok(self) -> bool: return True
    def is_err(self) -> bool: return False
    def unwrap(self) -> T: return self.value
    def unwrap_or(self, default: Any) -> T: return self.value
    def map(self, f: Callable[[T], U]) -> Ok[U]: return Ok(f(self.value))
    def map_err(self, f: Callable[[Fault], Fault]) -> Ok[T]: return self
    def and_then(self, f: Callable[[T], Result[U, Fault]]) -> Result[U, Fault]: return f(self.value)
    def match(self, ok: Callable[[T], U], err: Callable[[Fault], U]) -> U: return ok(self.value)


@final
@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed outcome holding a Fault."""
    error: E

    def is_ok(self) -> bool: return False
    def is_err(self) -> bool: return True

    def unwrap(self) -> NoReturn:
        raise ValueError(f"unwrap called on Err: {self.error}")

    def unwrap_or(self, default: U) -> U: return default
    def unwrap_err(self) -> E: return self.error
    def map(self, f: Callable[[Any], Any]) -> Err[E]: return self
    def map_err(self, f: Callable[[E], Fault]) -> Err[Fault]: return Err(f(self.error))
    def and_then(self, f: Callable[[Any], Any]) -> Err[E]: return self
    def match(self, ok: Callable[[Any], U], err: Callable[[E], U]) -> U: return err(self.error)


Result = Union[Ok[T], Err[E]]


def from_exception(exc: Exception, kind: ErrorKind, message: str | None = None, **metadata: Any) -> Err[Fault]:
    """Wrap a caught exception as an ``Err`` keeping it as the cause."""
    return Err(Fault(kind=kind, message=message or str(exc), metadata=metadata, cause=exc))
