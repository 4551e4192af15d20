"""Validation Results and Bound Checks

- ValidationErrorDetail / ValidationResult: ordered, path-aware error accumulation
- ValidationError: exception raised when a result must fail a call
- Bound checks: frozen, replayable min/max records for values, lengths and item counts
"""
from .errors import (
    ValidationErrorDetail,
    ValidationResult,
    ValidationError,
    decode_failure,
)

from .validators import (
    ValidationOptions,
    BoundCheck,
    MinValue,
    MaxValue,
    MinLength,
    MaxLength,
    MinItems,
    MaxItems,
)

__all__ = [
    "ValidationErrorDetail",
    "ValidationResult",
    "ValidationError",
    "decode_failure",
    "ValidationOptions",
    "BoundCheck",
    "MinValue",
    "MaxValue",
    "MinLength",
    "MaxLength",
    "MinItems",
    "MaxItems",
]
