"""Tests for the per-language ordinal rules."""

from __future__ import annotations

import math
from collections.abc import Callable

import pytest

from ordinals.format.rules import RULES, RuleContext, english, italian, supported_languages
from ordinals.format.schema import Gender, Magnitude

_MALE = RuleContext()
_FEMALE = RuleContext(gender=Gender.female)


def _expected_english(n: int) -> str:
    if n % 100 in {11, 12, 13}:
        return f"{n}th"
    return f"{n}" + {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")


def _expected_italian(n: int, *, female: bool) -> str:
    suffix = "ª" if female else "º"
    if n == 11 or str(n).startswith("8"):
        return f"l’{n}{suffix}"
    return f"{'la' if female else 'il'} {n}{suffix}"


_POSITIVE_FORMS: dict[str, tuple[RuleContext, Callable[[int], str]]] = {
    "zh": (_MALE, lambda n: f"第{n}"),
    "ja": (_MALE, lambda n: f"{n}番目"),
    "ko": (_MALE, lambda n: f"{n}번째"),
    "vi": (_MALE, lambda n: f"thứ {n}"),
    "id": (_MALE, lambda n: "pertama" if n == 1 else f"ke-{n}"),
    "ms": (_MALE, lambda n: "pertama" if n == 1 else f"ke-{n}"),
    "fr": (_MALE, lambda n: f"{n}er" if n == 1 else f"{n}ème"),
    "es": (_FEMALE, lambda n: f"{n}.ª"),
    "pt": (_MALE, lambda n: f"{n}.º"),
    "de": (_MALE, lambda n: f"{n}."),
    "ru": (_MALE, lambda n: f"{n}-й"),
}


def test_supported_languages() -> None:
    assert supported_languages() == {
        "en", "zh", "ja", "ko", "vi", "id", "ms", "fr", "es", "pt", "it", "de", "ru",
    }


@pytest.mark.parametrize("n", range(0, 201))
def test_english_suffix_table(n: int) -> None:
    assert english(Magnitude.exact(n), True, _MALE) == _expected_english(n)


@pytest.mark.parametrize(
    ("n", "expected"),
    [(1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"), (11, "11th"), (12, "12th"), (13, "13th"),
     (21, "21st"), (101, "101st"), (111, "111th"), (112, "112th"), (113, "113th"), (122, "122nd")],
)
def test_english_teen_exceptions(n: int, expected: str) -> None:
    assert english(Magnitude.exact(n), True, _MALE) == expected


@pytest.mark.parametrize("n", range(0, 201))
@pytest.mark.parametrize("female", [False, True])
def test_italian_article_table(n: int, female: bool) -> None:
    context = _FEMALE if female else _MALE
    assert italian(Magnitude.exact(n), True, context) == _expected_italian(n, female=female)


@pytest.mark.parametrize("n", [8, 80, 81, 88, 800, 888, 8000])
def test_italian_leading_eight_elides(n: int) -> None:
    assert italian(Magnitude.exact(n), True, _MALE) == f"l’{n}º"


def test_italian_eleven_is_not_a_mod_100_class() -> None:
    assert italian(Magnitude.exact(111), True, _MALE) == "il 111º"


@pytest.mark.parametrize("language", sorted(_POSITIVE_FORMS))
def test_positive_tables(language: str) -> None:
    context, expected = _POSITIVE_FORMS[language]
    rule = RULES[language]
    for n in range(0, 201):
        assert rule(Magnitude.exact(n), True, context) == expected(n)


def test_english_fractional_takes_th() -> None:
    assert english(Magnitude.fractional(1.5), True, _MALE) == "1.5th"


def test_rules_never_fail_on_unbounded() -> None:
    for rule in RULES.values():
        for context in (_MALE, _FEMALE, RuleContext(script="Hant")):
            for positive in (True, False):
                assert rule(Magnitude.unbounded(), positive, context)


def test_unbounded_value_is_infinite() -> None:
    assert Magnitude.unbounded().value == math.inf
    assert Magnitude.unbounded().integer_part is None
    assert Magnitude.unbounded().leading_digit == ""
