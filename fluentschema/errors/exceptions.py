"""Exception Wrappers

Raise a Fault in code that does not use the Result monad: decoding,
encoding and compilation fail fatally for the call that hit them.
"""
from __future__ import annotations

from typing import NoReturn

from .types import Err, ErrorKind, Fault


class SchemaError(Exception):
    """Exception wrapper for Fault."""

    def __init__(self, fault: Fault):
        self.fault = fault
        super().__init__(fault.message)

    @property
    def kind(self) -> ErrorKind:
        return self.fault.kind


class DecodeError(SchemaError):
    """Payload could not be decoded into a schema (null for required, malformed, or invalid).

    When the payload was well-formed but failed validation, ``result`` holds
    the ValidationResult.
    """

    def __init__(self, fault: Fault, result=None):
        self.result = result
        super().__init__(fault)


class EncodeError(SchemaError):
    """Schema could not be encoded (required value missing)."""


class CompileError(SchemaError):
    """Declaration could not be compiled to a JSON-Schema document."""


class TypeMismatchError(SchemaError, TypeError):
    """Value assigned to a schema has the wrong Python type."""


def raise_fault(error: Fault | Err[Fault], exc_type: type[SchemaError] = SchemaError) -> NoReturn:
    """Raise a Fault (or the Fault inside an Err) as ``exc_type``."""
    fault = error.unwrap_err() if isinstance(error, Err) else error
    raise exc_type(fault) from fault.cause
