"""Locale-aware ordinal number formatting.

    >>> from ordinals import ordinal
    >>> ordinal("en-US").format(3)
    '3rd'
    >>> ordinal("es-ES", gender="female").format(5)
    '5.ª'
"""

from __future__ import annotations

from ordinals.errors import InvalidLocaleError, InvalidValueError, OrdinalError
from ordinals.format.formatter import OrdinalFormat, ordinal
from ordinals.format.rules import supported_languages
from ordinals.format.schema import Gender
from ordinals.locale.resolver import LocaleTag, resolve_locale

__all__ = [
    "Gender",
    "InvalidLocaleError",
    "InvalidValueError",
    "LocaleTag",
    "OrdinalError",
    "OrdinalFormat",
    "ordinal",
    "resolve_locale",
    "supported_languages",
]
