"""Fault Builders

Ergonomic constructors for typed faults across decoding, assignment and
compilation. Each builder returns an Err wrapping a Fault with the
appropriate kind and metadata.
"""
from __future__ import annotations

from typing import Any

from .types import Err, ErrorKind, Fault


def _fault(kind: ErrorKind, message: str, cause: Exception | None = None, **metadata: Any) -> Err[Fault]:
    return Err(Fault(kind=kind, message=message, metadata={k: v for k, v in metadata.items() if v is not None},
        cause=cause))


# =============================================================================
# Decode / Encode
# =============================================================================

def required_field(message: str = "field is required", *, field: str | None = None) -> Err[Fault]:
    return _fault(ErrorKind.REQUIRED, message, field=field)


def invalid_format(target: str, cause: Exception | None = None, *, field: str | None = None) -> Err[Fault]:
    """Create fault for a payload that is not well-formed for the target shape."""
    detail = f": {cause}" if cause is not None else ""
    return _fault(ErrorKind.INVALID_FORMAT, f"invalid {target} value{detail}", cause, field=field, target=target)


def type_mismatch(expected: str, actual: Any) -> Err[Fault]:
    """Create fault for a value whose Python type does not match the schema."""
    return _fault(ErrorKind.INVALID_TYPE, f"expected {expected} value, got {type(actual).__name__}",
        expected=expected, actual=type(actual).__name__)


# =============================================================================
# Compiler
# =============================================================================

def unsupported_field_shape(field: str, actual: Any) -> Err[Fault]:
    return _fault(ErrorKind.UNSUPPORTED_FIELD_SHAPE, f"unsupported schema type for field {field}",
        field=field, actual=type(actual).__name__)


def nil_schema_reference(json_tag: str) -> Err[Fault]:
    return _fault(ErrorKind.NIL_SCHEMA_REFERENCE, f"found nil schema interface with JSON tag: {json_tag}",
        json_tag=json_tag)
