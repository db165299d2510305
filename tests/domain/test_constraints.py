"""Tests for text and numeric constraint primitives."""

from decimal import Decimal

import pytest

from isoval.domain.constraints import NumericConstraint, TextConstraint, compiled_pattern
from isoval.domain.errors import ErrorCategory


class TestTextConstraint:
    def test_unconstrained_accepts_anything(self) -> None:
        assert TextConstraint().check("", label="x").ok

    @pytest.mark.parametrize("value", ["a", "abcd"])
    def test_length_bounds_inclusive(self, value: str) -> None:
        assert TextConstraint(min_length=1, max_length=4).check(value, label="x").ok

    def test_too_short(self) -> None:
        result = TextConstraint(min_length=1).check("", label="EvtCd")
        assert result.error is not None
        assert result.error.code == ErrorCategory.TOO_SHORT
        assert result.error.message == "EvtCd is shorter than the minimum length of 1"

    def test_too_long(self) -> None:
        result = TextConstraint(max_length=4).check("abcde", label="EvtCd")
        assert result.error is not None
        assert result.error.code == ErrorCategory.TOO_LONG
        assert result.error.message == "EvtCd exceeds the maximum length of 4"

    def test_length_checked_before_pattern(self) -> None:
        constraint = TextConstraint(max_length=4, pattern=r"[0-9]+")
        result = constraint.check("abcdef", label="x")
        assert result.error is not None
        assert result.error.code == ErrorCategory.TOO_LONG

    def test_pattern_must_match_whole_value(self) -> None:
        constraint = TextConstraint(pattern=r"[0-9]{9,9}")
        assert constraint.check("123456789", label="x").ok
        result = constraint.check("1234567890", label="x")
        assert result.error is not None
        assert result.error.code == ErrorCategory.PATTERN_MISMATCH

    def test_pattern_message_names_pattern(self) -> None:
        result = TextConstraint(pattern=r"[A-Z]{3,3}").check("usd", label="Ccy")
        assert result.error is not None
        assert result.error.message == "Ccy does not match the required pattern [A-Z]{3,3}"

    def test_enumeration(self) -> None:
        constraint = TextConstraint(enumeration=frozenset({"ENAB", "DISA"}))
        assert constraint.check("ENAB", label="Sts").ok
        result = constraint.check("XXXX", label="Sts")
        assert result.error is not None
        assert result.error.code == ErrorCategory.NOT_IN_ENUMERATION
        assert "'XXXX'" in result.error.message

    def test_path_recorded(self) -> None:
        result = TextConstraint(min_length=2).check("a", label="Id", path="Acct/Id")
        assert result.error is not None
        assert result.error.path == "Acct/Id"

    def test_check_is_deterministic(self) -> None:
        constraint = TextConstraint(min_length=2, pattern=r"[a-z]+")
        assert constraint.check("A1", label="x") == constraint.check("A1", label="x")


class TestNumericConstraint:
    def test_minimum_inclusive(self) -> None:
        constraint = NumericConstraint(min_inclusive=Decimal("0"))
        assert constraint.check(Decimal("0.0"), label="Amt").ok
        result = constraint.check(Decimal("-0.01"), label="Amt")
        assert result.error is not None
        assert result.error.code == ErrorCategory.BELOW_MINIMUM
        assert result.error.message == "Amt is less than the minimum value of 0"

    def test_maximum_inclusive(self) -> None:
        constraint = NumericConstraint(max_inclusive=Decimal("100"))
        assert constraint.check(Decimal("100"), label="Pct").ok
        result = constraint.check(Decimal("100.5"), label="Pct")
        assert result.error is not None
        assert result.error.code == ErrorCategory.ABOVE_MAXIMUM


class TestCompiledPattern:
    def test_compiled_once(self) -> None:
        assert compiled_pattern(r"[0-9]+") is compiled_pattern(r"[0-9]+")
