"""Ordinal formatter construction and dispatch.

`ordinal()` resolves the locale, picks the language rule and returns a frozen `OrdinalFormat`.
Formatters are rebuilt on every call and never cached, so concurrent callers share nothing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import partial

from ordinals.format.rules import Rule, RuleContext, find_rule
from ordinals.format.schema import FormatOptions, Gender, render_int
from ordinals.format.value import normalize_value
from ordinals.locale.resolver import LocaleIdentifier, resolve_locale

logger = logging.getLogger(__name__)

BoundRule = partial[str]


@dataclass(frozen=True)
class OrdinalFormat:
    """An ordinal number formatter for a single locale and gender."""

    supports: bool
    _rule: BoundRule | None = field(default=None, repr=False)

    def format(self, value: object) -> str:
        """Format a number, numeric string or infinity as an ordinal.

        Unsupported locales return the input's plain string form unchanged.

        Raises:
            InvalidValueError: If the value is `None`, NaN or not numeric.
        """

        normalized = normalize_value(value)
        if self._rule is None:
            if isinstance(value, int):
                return render_int(value)
            return str(value)
        return self._rule(normalized.magnitude, normalized.positive)


def _bind(rule: Rule, context: RuleContext) -> BoundRule:
    return partial(rule, context=context)


def ordinal(locale: LocaleIdentifier, *, gender: Gender | str = Gender.male) -> OrdinalFormat:
    """Get the ordinal number formatter for a locale.

    Args:
        locale: A BCP-47 tag such as `"en-US"`, a `LocaleTag` or a `babel.Locale`.
        gender: Grammatical gender for languages that inflect ordinals (es, pt, it).

    Raises:
        InvalidLocaleError: If the locale tag is malformed.
        pydantic.ValidationError: If `gender` is not `"male"` or `"female"`.
    """

    tag = resolve_locale(locale)
    options = FormatOptions(gender=gender)

    rule = find_rule(tag.language)
    if rule is None:
        logger.debug("unsupported language=%s locale=%s", tag.language, tag)
        return OrdinalFormat(supports=False)

    context = RuleContext(script=tag.script, gender=options.gender)
    return OrdinalFormat(supports=True, _rule=_bind(rule, context))
