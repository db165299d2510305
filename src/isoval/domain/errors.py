"""Validation error taxonomy and the single-failure outcome type.

Every ``validate()`` in the domain layer returns a :class:`ValidationResult`.
A failed result carries exactly one :class:`ValidationFailure`: the first
violation met by the depth-first walk. Failures are built once, at the
violating leaf, and returned unchanged by every enclosing composite.
"""

from __future__ import annotations

from enum import IntEnum

from pydantic import BaseModel


class ErrorCategory(IntEnum):
    """Stable numeric codes for structural constraint violations."""

    TOO_SHORT = 1001
    TOO_LONG = 1002
    BELOW_MINIMUM = 1003
    ABOVE_MAXIMUM = 1004
    PATTERN_MISMATCH = 1005
    NOT_IN_ENUMERATION = 1006
    CHOICE_VIOLATION = 1007
    MISSING_REQUIRED_ALTERNATIVE = 1008
    TOO_FEW_ELEMENTS = 1009
    TOO_MANY_ELEMENTS = 1010


class ValidationFailure(BaseModel):
    """The first violated constraint found in a record tree.

    Attributes:
        code: Category of the violation.
        message: Human-readable description naming the offending field.
        path: Slash-separated tag path from the validated root
            (``EvtInf/EvtParam[1]``). Empty when a leaf is validated directly.
    """

    model_config = {"frozen": True}

    code: ErrorCategory
    message: str
    path: str = ""

    @property
    def category(self) -> str:
        return self.code.name


class InvalidMessageError(Exception):
    """Raised by :meth:`ValidationResult.raise_for_error` on a failed result."""

    def __init__(self, failure: ValidationFailure) -> None:
        super().__init__(f"[{int(failure.code)}] {failure.message}")
        self.failure = failure


class ValidationResult(BaseModel):
    """Success, or a single :class:`ValidationFailure`."""

    model_config = {"frozen": True}

    error: ValidationFailure | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        """Raise :class:`InvalidMessageError` if this result is a failure."""
        if self.error is not None:
            raise InvalidMessageError(self.error)

    @classmethod
    def fail(cls, code: ErrorCategory, message: str, path: str = "") -> ValidationResult:
        return cls(error=ValidationFailure(code=code, message=message, path=path))


VALID = ValidationResult()
