"""Bound Check Validators

Declarative, replayable constraint records. A schema registers one check per
``min``/``max`` call and re-evaluates every check against its current value
on each ``validate()``; nothing is decided at configuration time.

Features:
- Frozen dataclass checks: immutable, so clones share them safely
- Inclusive bounds (``value < threshold`` fails ``min``, ``value > threshold`` fails ``max``)
- Custom message override through ValidationOptions
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Sized

from fluentschema.errors import ErrorKind

from .errors import ValidationErrorDetail


@dataclass(frozen=True, slots=True)
class ValidationOptions:
    """Per-constraint options. ``message`` replaces the default error message."""
    message: str = ""


class BoundCheck(ABC):
    """Base class for bound checks.

    A check inspects one value and returns an error detail when the bound is
    violated, ``None`` otherwise.
    """
    threshold: Any
    message: str

    @abstractmethod
    def check(self, value: Any) -> ValidationErrorDetail | None:
        """Check a value against the bound."""

    @property
    @abstractmethod
    def constraint_name(self) -> str:
        """Human-readable constraint name."""

    def __call__(self, value: Any) -> ValidationErrorDetail | None: return self.check(value)


def _message(options: ValidationOptions | None, default: str) -> str:
    return options.message if options is not None and options.message else default


# ============================================================================
# Ordering bounds
# ============================================================================

@dataclass(frozen=True, slots=True)
class MinValue(BoundCheck):
    """Value must be at least ``threshold``."""
    threshold: Any
    message: str

    @classmethod
    def build(cls, threshold: Any, options: ValidationOptions | None = None) -> MinValue:
        return cls(threshold, _message(options, f"must be at least {threshold}"))

    @property
    def constraint_name(self) -> str: return f"min[{self.threshold}]"

    def check(self, value: Any) -> ValidationErrorDetail | None:
        if value < self.threshold:
            return ValidationErrorDetail(ErrorKind.MIN_NUMBER, self.message, expected=self.threshold, actual=value)
        return None


@dataclass(frozen=True, slots=True)
class MaxValue(BoundCheck):
    """Value must not exceed ``threshold``."""
    threshold: Any
    message: str

    @classmethod
    def build(cls, threshold: Any, options: ValidationOptions | None = None) -> MaxValue:
        return cls(threshold, _message(options, f"must not exceed: {threshold}"))

    @property
    def constraint_name(self) -> str: return f"max[{self.threshold}]"

    def check(self, value: Any) -> ValidationErrorDetail | None:
        if value > self.threshold:
            return ValidationErrorDetail(ErrorKind.MAX_NUMBER, self.message, expected=self.threshold, actual=value)
        return None


# ============================================================================
# Length bounds
# ============================================================================

@dataclass(frozen=True, slots=True)
class MinLength(BoundCheck):
    """String must have at least ``threshold`` characters."""
    threshold: int
    message: str

    @classmethod
    def build(cls, threshold: int, options: ValidationOptions | None = None) -> MinLength:
        return cls(threshold, _message(options, f"must be at least {threshold} characters long"))

    @property
    def constraint_name(self) -> str: return f"min_length[{self.threshold}]"

    def check(self, value: Sized) -> ValidationErrorDetail | None:
        if (length := len(value)) < self.threshold:
            return ValidationErrorDetail(ErrorKind.MIN_STRING_LENGTH, self.message, expected=self.threshold, actual=length)
        return None


@dataclass(frozen=True, slots=True)
class MaxLength(BoundCheck):
    """String must have at most ``threshold`` characters."""
    threshold: int
    message: str

    @classmethod
    def build(cls, threshold: int, options: ValidationOptions | None = None) -> MaxLength:
        return cls(threshold, _message(options, f"must be at most {threshold} characters long"))

    @property
    def constraint_name(self) -> str: return f"max_length[{self.threshold}]"

    def check(self, value: Sized) -> ValidationErrorDetail | None:
        if (length := len(value)) > self.threshold:
            return ValidationErrorDetail(ErrorKind.MAX_STRING_LENGTH, self.message, expected=self.threshold, actual=length)
        return None


# ============================================================================
# Cardinality bounds
# ============================================================================

@dataclass(frozen=True, slots=True)
class MinItems(BoundCheck):
    """Sequence must have at least ``threshold`` items."""
    threshold: int
    message: str

    @classmethod
    def build(cls, threshold: int, options: ValidationOptions | None = None) -> MinItems:
        if threshold < 0: raise ValueError("minItems cannot be negative")
        return cls(threshold, _message(options, f"minimum {threshold} items required"))

    @property
    def constraint_name(self) -> str: return f"min_items[{self.threshold}]"

    def check(self, value: Sized) -> ValidationErrorDetail | None:
        if (count := len(value)) < self.threshold:
            return ValidationErrorDetail(ErrorKind.MIN_ITEMS, self.message, expected=self.threshold, actual=count)
        return None


@dataclass(frozen=True, slots=True)
class MaxItems(BoundCheck):
    """Sequence must have at most ``threshold`` items."""
    threshold: int
    message: str

    @classmethod
    def build(cls, threshold: int, options: ValidationOptions | None = None) -> MaxItems:
        if threshold < 0: raise ValueError("maxItems cannot be negative")
        return cls(threshold, _message(options, f"maximum {threshold} items allowed"))

    @property
    def constraint_name(self) -> str: return f"max_items[{self.threshold}]"

    def check(self, value: Sized) -> ValidationErrorDetail | None:
        if (count := len(value)) > self.threshold:
            return ValidationErrorDetail(ErrorKind.MAX_ITEMS, self.message, expected=self.threshold, actual=count)
        return None
