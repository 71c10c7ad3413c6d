"""Per-language ordinal rules.

Each rule is a plain function `(magnitude, positive, context) -> str`. `positive=False` means the
position is counted from the end ("2nd to last"), and the unbounded magnitude renders the "nth"
placeholder. The table is intentionally closed: languages missing from `RULES` are unsupported
and never guessed.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ordinals.format.schema import Gender, Magnitude, MagnitudeKind


@dataclass(frozen=True)
class RuleContext:
    """Locale-derived parameters a rule may depend on."""

    script: str = ""
    gender: Gender = Gender.male

    @property
    def is_female(self) -> bool:
        return self.gender == Gender.female


Rule = Callable[[Magnitude, bool, RuleContext], str]

_ENGLISH_SUFFIXES: dict[int, str] = {1: "st", 2: "nd", 3: "rd"}


def _english_suffix(magnitude: Magnitude) -> str:
    if magnitude.kind != MagnitudeKind.exact:
        return "th"
    if 11 <= magnitude.value % 100 <= 13:
        return "th"
    return _ENGLISH_SUFFIXES.get(magnitude.value % 10, "th")


def english(magnitude: Magnitude, positive: bool, context: RuleContext) -> str:
    """English: 1st, 2nd, 3rd, 4th, 11th, 21st; last, 2nd to last; 0th, nth."""

    result = f"{magnitude}{_english_suffix(magnitude)}"
    if positive:
        return result
    return "last" if magnitude.is_exactly(1) else f"{result} to last"


def chinese(magnitude: Magnitude, positive: bool, context: RuleContext) -> str:
    """Chinese: 第1, 第2; 倒数第1 (Simplified) or 倒數第1 (Traditional); 第n."""

    result = f"第{magnitude}"
    if positive:
        return result
    prefix = "倒數" if context.script == "Hant" else "倒数"
    return prefix + result


def japanese(magnitude: Magnitude, positive: bool, context: RuleContext) -> str:
    """Japanese: 1番目; 最後, 最後から2番目; n番目."""

    result = f"{magnitude}番目"
    if positive:
        return result
    return "最後" if magnitude.is_exactly(1) else f"最後から{result}"


def korean(magnitude: Magnitude, positive: bool, context: RuleContext) -> str:
    """Korean: 1번째; 마지막에서 1번째; n번째."""

    result = f"{magnitude}번째"
    return result if positive else f"마지막에서 {result}"


def vietnamese(magnitude: Magnitude, positive: bool, context: RuleContext) -> str:
    """Vietnamese: thứ 1, thứ 2; thứ 2 đến cuối cùng; thứ n.

    CLDR lists an irregular form for the Vietnamese first ordinal; it is not used here.
    """

    result = f"thứ {magnitude}"
    return result if positive else f"{result} đến cuối cùng"


def malay(magnitude: Magnitude, positive: bool, context: RuleContext) -> str:
    """Indonesian and Malay: pertama, ke-2; terakhir, ke-2 terakhir; ke-n."""

    if magnitude.is_exactly(1):
        return "pertama" if positive else "terakhir"
    result = f"ke-{magnitude}"
    return result if positive else f"{result} terakhir"


def french(magnitude: Magnitude, positive: bool, context: RuleContext) -> str:
    """French: 1er, 2ème; 2ème avant dernier; 0ème, nième."""

    suffix = "er" if magnitude.is_exactly(1) else "ème"
    stem = "ni" if magnitude.is_unbounded else str(magnitude)
    result = stem + suffix
    return result if positive else f"{result} avant dernier"


def iberian(magnitude: Magnitude, positive: bool, context: RuleContext) -> str:
    """Spanish and Portuguese.

    Male: 1.º, 1.º al último, n.º
    Female: 1.ª, 1.ª a la última, n.ª
    """

    suffix = ".ª" if context.is_female else ".º"
    result = f"{magnitude}{suffix}"
    if positive:
        return result
    last = "a la última" if context.is_female else "al último"
    return f"{result} {last}"


def _italian_article(magnitude: Magnitude, positive: bool, context: RuleContext) -> str:
    # Elided before "otto"/"undici" and before "ultimo"; CLDR only lists 8, 11, 80 and 800 but
    # every number spelled with a leading "otto" (81, 888, 8000) elides too.
    if (
            magnitude.is_unbounded
            or magnitude.integer_part == 11
            or magnitude.leading_digit == "8"
            or (not positive and magnitude.integer_part == 1)
    ):
        return "l’"
    return "la " if context.is_female else "il "


def italian(magnitude: Magnitude, positive: bool, context: RuleContext) -> str:
    """Italian, with a definite article.

    Male: il 1º, l’8º, l’11º, il 12º, l’81º; l’ultimo, il 2º dall’ultimo; l’n-esimo
    Female: la 1ª, l’8ª; l’ultima, la 2ª dall’ultima; l’n-esima
    """

    ending = "a" if context.is_female else "o"
    article = _italian_article(magnitude, positive, context)
    if magnitude.is_unbounded:
        result = f"n-esim{ending}"
    else:
        result = f"{magnitude}{'ª' if context.is_female else 'º'}"

    if positive:
        return article + result
    if magnitude.is_exactly(1):
        return f"{article}ultim{ending}"
    return f"{article}{result} dall’ultim{ending}"


def german(magnitude: Magnitude, positive: bool, context: RuleContext) -> str:
    """German: 1., 2.; 2. letzte; 0., x-te."""

    result = "x-te" if magnitude.is_unbounded else f"{magnitude}."
    return result if positive else f"{result} letzte"


def russian(magnitude: Magnitude, positive: bool, context: RuleContext) -> str:
    """Russian: 1-й; последний, 2-й до последнего; н-й."""

    stem = "н" if magnitude.is_unbounded else str(magnitude)
    result = f"{stem}-й"
    if positive:
        return result
    return "последний" if magnitude.is_exactly(1) else f"{result} до последнего"


RULES: dict[str, Rule] = {
    "en": english,
    "zh": chinese,
    "ja": japanese,
    "ko": korean,
    "vi": vietnamese,
    "id": malay,
    "ms": malay,
    "fr": french,
    "es": iberian,
    "pt": iberian,
    "it": italian,
    "de": german,
    "ru": russian,
}


def find_rule(language: str) -> Rule | None:
    """Return the rule for a language subtag, or `None` if the language is unsupported."""

    return RULES.get(language)


def supported_languages() -> frozenset[str]:
    """All language subtags with a dedicated ordinal rule."""

    return frozenset(RULES)
