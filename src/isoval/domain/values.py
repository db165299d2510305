"""Constrained value types: one scalar bound to one simple-type constraint.

A schema simple type is a subclass that only sets ``constraint``::

    class Max35Text(ConstrainedText):
        constraint = TextConstraint(min_length=1, max_length=35)

Values are frozen root models, so a record field typed ``Max35Text`` accepts
the bare string when decoded and dumps back to it.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import ClassVar

from pydantic import ConfigDict, RootModel

from isoval.domain.constraints import NumericConstraint, TextConstraint
from isoval.domain.errors import ValidationResult
from isoval.domain.policy import DEFAULT_POLICY, ValidationPolicy


def enumeration_of(codes: type[Enum]) -> frozenset[str]:
    """Return the wire values of a code-set enum as a constraint enumeration."""
    return frozenset(str(member.value) for member in codes)


class ConstrainedText(RootModel[str]):
    """Text value checked against a :class:`TextConstraint`."""

    model_config = ConfigDict(frozen=True)

    constraint: ClassVar[TextConstraint] = TextConstraint()

    def validate(  # type: ignore[override]
        self, path: str = "", policy: ValidationPolicy = DEFAULT_POLICY
    ) -> ValidationResult:
        return self.constraint.check(self.root, label=path or type(self).__name__, path=path)

    def __str__(self) -> str:
        return self.root


class ConstrainedDecimal(RootModel[Decimal]):
    """Decimal value checked against a :class:`NumericConstraint`."""

    model_config = ConfigDict(frozen=True)

    constraint: ClassVar[NumericConstraint] = NumericConstraint()

    def validate(  # type: ignore[override]
        self, path: str = "", policy: ValidationPolicy = DEFAULT_POLICY
    ) -> ValidationResult:
        return self.constraint.check(self.root, label=path or type(self).__name__, path=path)

    def __str__(self) -> str:
        return format(self.root, "f")
