"""Constraint primitives for schema-declared simple types.

Each constraint is a frozen description of the facets one XSD simple type
declares. ``check()`` is a pure function of the constraint and a value.

Patterns are compiled once per process and shared by every value type that
declares the same expression.
"""

from __future__ import annotations

import functools
import re
from decimal import Decimal

from pydantic import BaseModel

from isoval.domain.errors import VALID, ErrorCategory, ValidationResult


@functools.lru_cache(maxsize=None)
def compiled_pattern(pattern: str) -> re.Pattern[str]:
    """Return the compiled form of *pattern*, compiling it on first use."""
    return re.compile(pattern)


class TextConstraint(BaseModel):
    """Length, pattern and code-set facets of a text simple type.

    Checks run in declaration order (min length, max length, pattern,
    enumeration); the first violation is reported.
    """

    model_config = {"frozen": True}

    min_length: int | None = None
    max_length: int | None = None
    pattern: str | None = None
    enumeration: frozenset[str] | None = None

    def check(self, value: str, *, label: str, path: str = "") -> ValidationResult:
        length = len(value)
        if self.min_length is not None and length < self.min_length:
            return ValidationResult.fail(
                ErrorCategory.TOO_SHORT,
                f"{label} is shorter than the minimum length of {self.min_length}",
                path,
            )
        if self.max_length is not None and length > self.max_length:
            return ValidationResult.fail(
                ErrorCategory.TOO_LONG,
                f"{label} exceeds the maximum length of {self.max_length}",
                path,
            )
        if self.pattern is not None and compiled_pattern(self.pattern).fullmatch(value) is None:
            return ValidationResult.fail(
                ErrorCategory.PATTERN_MISMATCH,
                f"{label} does not match the required pattern {self.pattern}",
                path,
            )
        if self.enumeration is not None and value not in self.enumeration:
            return ValidationResult.fail(
                ErrorCategory.NOT_IN_ENUMERATION,
                f"{label} value {value!r} is not one of the allowed codes",
                path,
            )
        return VALID


class NumericConstraint(BaseModel):
    """Inclusive range facets of a decimal simple type."""

    model_config = {"frozen": True}

    min_inclusive: Decimal | None = None
    max_inclusive: Decimal | None = None

    def check(self, value: Decimal, *, label: str, path: str = "") -> ValidationResult:
        if self.min_inclusive is not None and value < self.min_inclusive:
            return ValidationResult.fail(
                ErrorCategory.BELOW_MINIMUM,
                f"{label} is less than the minimum value of {self.min_inclusive}",
                path,
            )
        if self.max_inclusive is not None and value > self.max_inclusive:
            return ValidationResult.fail(
                ErrorCategory.ABOVE_MAXIMUM,
                f"{label} exceeds the maximum value of {self.max_inclusive}",
                path,
            )
        return VALID
