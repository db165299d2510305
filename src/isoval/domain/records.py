"""Composite records, choice groups, and the recursive validation walk.

A :class:`Record` validates its fields in declaration order and stops at the
first failure:

- absent optional field (``None``): always valid, whatever its type;
- repeated field (``list``): occurrence bounds first, then each element in
  order, stopping at the first failing element;
- constrained value, nested record or choice: delegated with the same
  contract, depth first;
- anything else (plain ``str``, ``bool``, ``Decimal``...): unconstrained.

A :class:`Choice` is a record whose fields are alternatives. Exactly one may
be populated, and only that one is validated.

Schema trees are finite and acyclic, so the walk always terminates.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Self

from pydantic import BaseModel, ConfigDict
from pydantic.fields import FieldInfo

from isoval.domain.errors import VALID, ErrorCategory, ValidationResult
from isoval.domain.policy import DEFAULT_POLICY, ValidationPolicy
from isoval.domain.values import ConstrainedDecimal, ConstrainedText

# --- Field markers (attached with typing.Annotated) ---


@dataclass(frozen=True)
class Occurs:
    """Declared cardinality of a repeated field."""

    min_items: int = 0
    max_items: int | None = None


@dataclass(frozen=True)
class XmlAttribute:
    """The field is carried as a markup attribute (e.g. ``Ccy``)."""


@dataclass(frozen=True)
class XmlText:
    """The field is carried as the element's own text content."""


def field_tag(name: str, info: FieldInfo) -> str:
    """Markup tag (or attribute name) of a field."""
    return info.alias or name


def field_occurs(info: FieldInfo) -> Occurs | None:
    return next((m for m in info.metadata if isinstance(m, Occurs)), None)


def is_attribute(info: FieldInfo) -> bool:
    return any(isinstance(m, XmlAttribute) for m in info.metadata)


def is_text(info: FieldInfo) -> bool:
    return any(isinstance(m, XmlText) for m in info.metadata)


def _child_path(path: str, tag: str) -> str:
    return f"{path}/{tag}" if path else tag


class Record(BaseModel):
    """A schema complex type: an ordered set of named, typed fields."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    def validate(  # type: ignore[override]
        self, path: str = "", policy: ValidationPolicy = DEFAULT_POLICY
    ) -> ValidationResult:
        for name, info in type(self).model_fields.items():
            tag = field_tag(name, info)
            result = validate_member(getattr(self, name), info, _child_path(path, tag), policy)
            if not result.ok:
                return result
        return VALID


class Choice(Record):
    """A closed set of mutually exclusive alternatives.

    Every alternative is declared optional; :meth:`validate` enforces that
    exactly one is populated. Build instances with :meth:`of` to get a
    single-arm value by construction.
    """

    @classmethod
    def of(cls, alternative: str, value: Any) -> Self:
        """Build a choice with only *alternative* (tag or field name) populated."""
        return cls.model_validate({alternative: value})

    def _populated(self) -> list[tuple[str, FieldInfo, Any]]:
        populated = []
        for name, info in type(self).model_fields.items():
            value = getattr(self, name)
            if value is None or (isinstance(value, list) and not value):
                continue
            populated.append((name, info, value))
        return populated

    @property
    def selected(self) -> tuple[str, Any] | None:
        """``(tag, value)`` of the first populated alternative, if any."""
        populated = self._populated()
        if not populated:
            return None
        name, info, value = populated[0]
        return field_tag(name, info), value

    def validate(  # type: ignore[override]
        self, path: str = "", policy: ValidationPolicy = DEFAULT_POLICY
    ) -> ValidationResult:
        populated = self._populated()
        label = path or type(self).__name__
        if policy.enforce_choice:
            if not populated:
                tags = ", ".join(field_tag(n, i) for n, i in type(self).model_fields.items())
                return ValidationResult.fail(
                    ErrorCategory.MISSING_REQUIRED_ALTERNATIVE,
                    f"{label} has no alternative populated; expected one of {tags}",
                    path,
                )
            if len(populated) > 1:
                tags = ", ".join(field_tag(n, i) for n, i, _ in populated)
                return ValidationResult.fail(
                    ErrorCategory.CHOICE_VIOLATION,
                    f"{label} has {len(populated)} alternatives populated ({tags}); "
                    "expected exactly one",
                    path,
                )
        for name, info, value in populated:
            result = validate_member(value, info, _child_path(path, field_tag(name, info)), policy)
            if not result.ok:
                return result
        return VALID


_NODE_TYPES = (Record, ConstrainedText, ConstrainedDecimal)


def validate_member(
    value: Any, info: FieldInfo, path: str, policy: ValidationPolicy = DEFAULT_POLICY
) -> ValidationResult:
    """Validate one field value according to its kind."""
    if value is None:
        return VALID
    if isinstance(value, list):
        return _validate_sequence(value, field_occurs(info), path, policy)
    if isinstance(value, _NODE_TYPES):
        return value.validate(path, policy)
    return VALID


def _validate_sequence(
    items: list[Any], occurs: Occurs | None, path: str, policy: ValidationPolicy
) -> ValidationResult:
    if occurs is not None and policy.enforce_occurrence:
        count = len(items)
        if count < occurs.min_items:
            return ValidationResult.fail(
                ErrorCategory.TOO_FEW_ELEMENTS,
                f"{path} has {count} element(s); at least {occurs.min_items} required",
                path,
            )
        if occurs.max_items is not None and count > occurs.max_items:
            return ValidationResult.fail(
                ErrorCategory.TOO_MANY_ELEMENTS,
                f"{path} has {count} element(s); at most {occurs.max_items} allowed",
                path,
            )
    for index, item in enumerate(items):
        if isinstance(item, _NODE_TYPES):
            result = item.validate(f"{path}[{index}]", policy)
            if not result.ok:
                return result
    return VALID
