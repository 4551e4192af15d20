"""Monadic Error Handling System

Key components:
- Result[T, E]: Monadic container for success/failure
- Fault: Immutable error value with kind, message and metadata
- ErrorKind: Error kind taxonomy (the ``[kind]`` tags)
- Builder functions: Ergonomic fault construction
- SchemaError hierarchy: Exceptions raised by decode/encode/compile

Usage:
    from fluentschema.errors import Ok, Err, ErrorKind

    match schema.set_internal_value(value):
        case Ok():
            ...
        case Err(fault):
            log.debug("rejected", kind=fault.kind.value, message=fault.message)
"""
from .types import (
    Result,
    Ok,
    Err,
    Fault,
    ErrorKind,
    from_exception,
)

from .builders import (
    required_field,
    invalid_format,
    type_mismatch,
    unsupported_field_shape,
    nil_schema_reference,
)

from .exceptions import (
    SchemaError,
    DecodeError,
    EncodeError,
    CompileError,
    TypeMismatchError,
    raise_fault,
)

__all__ = [
    # Core types
    "Result",
    "Ok",
    "Err",
    "Fault",
    "ErrorKind",
    # Constructors
    "from_exception",
    # Builders
    "required_field",
    "invalid_format",
    "type_mismatch",
    "unsupported_field_shape",
    "nil_schema_reference",
    # Exceptions
    "SchemaError",
    "DecodeError",
    "EncodeError",
    "CompileError",
    "TypeMismatchError",
    "raise_fault",
]
