"""Tests for numeric input normalization (magnitude + sign)."""

from __future__ import annotations

import math
from decimal import Decimal
from fractions import Fraction

import pytest

from ordinals.errors import InvalidValueError
from ordinals.format.schema import Magnitude, MagnitudeKind
from ordinals.format.value import normalize_value


def test_positive_and_negative_ints() -> None:
    assert normalize_value(3).magnitude == Magnitude.exact(3)
    assert normalize_value(3).positive is True

    negative = normalize_value(-7)
    assert negative.magnitude == Magnitude.exact(7)
    assert negative.positive is False


def test_zero_is_positive() -> None:
    normalized = normalize_value(0)
    assert normalized.magnitude.is_exactly(0)
    assert normalized.positive is True
    assert normalize_value("-0").positive is True


def test_huge_integers_stay_exact() -> None:
    value = 10 ** 40 + 11
    normalized = normalize_value(str(value))
    assert normalized.magnitude.kind == MagnitudeKind.exact
    assert normalized.magnitude.value == value

    assert normalize_value(Decimal("1e30")).magnitude.value == 10 ** 30


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (" 42 ", 42),
        ("+5", 5),
        ("1_000", 1000),
        ("0x10", 16),
        ("0b101", 5),
        ("0o17", 15),
        ("1e3", 1000),
        ("12.0", 12),
        (12.0, 12),
        (Fraction(10, 2), 5),
    ],
)
def test_integral_forms_become_exact(raw: object, expected: int) -> None:
    magnitude = normalize_value(raw).magnitude
    assert magnitude.kind == MagnitudeKind.exact
    assert magnitude.value == expected


@pytest.mark.parametrize(
    ("raw", "positive"),
    [
        (math.inf, True),
        (-math.inf, False),
        ("Infinity", True),
        ("-Infinity", False),
        ("inf", True),
        (Decimal("-Infinity"), False),
    ],
)
def test_infinity_becomes_unbounded(raw: object, positive: bool) -> None:
    normalized = normalize_value(raw)
    assert normalized.magnitude.is_unbounded
    assert normalized.positive is positive
    assert str(normalized.magnitude) == "n"


def test_fractional_values_keep_their_digits() -> None:
    normalized = normalize_value("-2.5")
    assert normalized.magnitude.kind == MagnitudeKind.fractional
    assert str(normalized.magnitude) == "2.5"
    assert normalized.magnitude.integer_part == 2
    assert normalized.positive is False


@pytest.mark.parametrize(
    "raw",
    [None, True, False, math.nan, "NaN", Decimal("NaN"), "", "   ", "abc", "12abc", "0x", [], object()],
)
def test_invalid_values_are_rejected(raw: object) -> None:
    with pytest.raises(InvalidValueError):
        normalize_value(raw)


def test_decimal_fraction_is_not_rounded() -> None:
    magnitude = normalize_value(Decimal("1.0000000000000000000001")).magnitude
    assert magnitude.kind == MagnitudeKind.fractional
    assert magnitude.value == Decimal("1.0000000000000000000001")
    assert not magnitude.is_exactly(1)


def test_very_long_digit_strings_stay_exact() -> None:
    digits = "9" * 4400
    magnitude = normalize_value(digits).magnitude
    assert magnitude.kind == MagnitudeKind.exact
    assert str(magnitude) == digits
    assert magnitude.leading_digit == "9"
