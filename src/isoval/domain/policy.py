"""Switches for the structural checks layered on top of leaf constraints."""

from __future__ import annotations

from pydantic import BaseModel


class ValidationPolicy(BaseModel):
    """Which composite-level checks a validation walk applies.

    Attributes:
        enforce_occurrence: Reject repeated fields whose element count falls
            outside their declared :class:`~isoval.domain.records.Occurs` bounds.
        enforce_choice: Reject choice groups with zero or several populated
            alternatives.
    """

    model_config = {"frozen": True}

    enforce_occurrence: bool = True
    enforce_choice: bool = True


DEFAULT_POLICY = ValidationPolicy()
LEGACY_POLICY = ValidationPolicy(enforce_occurrence=False, enforce_choice=False)
