"""Validation Error System

Structured errors with dotted field paths, error kinds, expected and actual
values. A ValidationResult accumulates them in discovery order and renders
them as one machine-stable message:

    validation failed: address.city: [min_string_length] must be at least 3 characters long; [required] value has not been set
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Iterator

from fluentschema.errors import DecodeError, ErrorKind, Fault, SchemaError


@dataclass(frozen=True, slots=True)
class ValidationErrorDetail:
    """Validation error for a single value.

    - kind: Error kind from the taxonomy (rendered as ``[kind]``)
    - message: Human-readable message
    - field: Dotted path to the offending field, empty at the root
    - expected: The constraint that failed (threshold, count, ...)
    - actual: The value that failed
    """
    kind: ErrorKind
    message: str
    field: str = ""
    expected: Any = None
    actual: Any = None

    def at(self, path: str) -> ValidationErrorDetail:
        """Stitch ``path`` in front of this error's own field."""
        if not path: return self
        return replace(self, field=f"{path}.{self.field}" if self.field else path)

    def with_prefix(self, prefix: str) -> ValidationErrorDetail:
        return replace(self, message=f"{prefix}{self.message}")

    def render(self) -> str:
        prefix = f"{self.field}: " if self.field else ""
        return f"{prefix}[{self.kind.value}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for reporting."""
        result = {"kind": self.kind.value, "field": self.field, "message": self.message}
        if self.expected is not None: result["expected"] = self.expected
        if self.actual is not None: result["actual"] = self.actual
        return result

    @classmethod
    def from_fault(cls, fault: Fault, *, field: str = "") -> ValidationErrorDetail:
        """Create from an assignment/decode Fault."""
        return cls(kind=fault.kind, message=fault.message, field=field,
            expected=fault.metadata.get("expected"), actual=fault.metadata.get("actual"))


@dataclass
class ValidationResult:
    """Ordered accumulation of validation errors. Empty means valid."""
    errors: list[ValidationErrorDetail] = field(default_factory=list)

    def add_error(self, detail: ValidationErrorDetail) -> None: self.errors.append(detail)

    def has_errors(self) -> bool: return len(self.errors) > 0

    def merge(self, other: ValidationResult, *, path: str = "", prefix: str = "") -> None:
        """Append ``other``'s errors, stitching ``path`` and prefixing messages."""
        for detail in other.errors:
            self.errors.append(detail.at(path).with_prefix(prefix) if prefix else detail.at(path))

    def error_message(self) -> str | None:
        if not self.errors: return None
        return "validation failed: " + "; ".join(d.render() for d in self.errors)

    def to_error(self) -> ValidationError | None:
        """Convert to a single ValidationError exception if errors exist."""
        if not self.errors: return None
        return ValidationError(self)

    def raise_if_errors(self) -> None:
        if self.errors: raise ValidationError(self)

    def to_dict(self) -> dict[str, Any]:
        return {"valid": not self.errors, "error_count": len(self.errors), "errors": [d.to_dict() for d in self.errors]}

    def __len__(self) -> int: return len(self.errors)

    def __iter__(self) -> Iterator[ValidationErrorDetail]: return iter(self.errors)


class ValidationError(SchemaError):
    """Validation failure carrying the full ValidationResult."""

    def __init__(self, result: ValidationResult, kind: ErrorKind = ErrorKind.VALIDATION_FAILED):
        self.result = result
        super().__init__(Fault(kind=kind, message=result.error_message() or "validation failed",
            metadata={"error_count": len(result)}))

    @property
    def details(self) -> list[ValidationErrorDetail]: return self.result.errors

    @property
    def first_error(self) -> ValidationErrorDetail | None: return self.result.errors[0] if self.result.errors else None

    def get_errors_for_field(self, field_path: str) -> list[ValidationErrorDetail]:
        return [d for d in self.result.errors if d.field == field_path]


def decode_failure(result: ValidationResult) -> DecodeError:
    """Surface a failed validate-on-read as a DecodeError."""
    return DecodeError(Fault(kind=ErrorKind.VALIDATION_FAILED, message=result.error_message() or "validation failed",
        metadata={"error_count": len(result)}), result=result)
