"""Composition root.

Builds formatters from `Settings` so applications can configure a default locale and gender in
the environment while still overriding them per call.
"""

from __future__ import annotations

from ordinals.config.logging import configure_logging
from ordinals.config.settings import Settings, load_settings
from ordinals.format.formatter import OrdinalFormat, ordinal
from ordinals.format.schema import Gender
from ordinals.locale.resolver import LocaleIdentifier


def create_formatter(
        settings: Settings,
        *,
        locale: LocaleIdentifier | None = None,
        gender: Gender | str | None = None,
) -> OrdinalFormat:
    """Create a formatter, falling back to the configured locale and gender."""

    return ordinal(
        locale if locale is not None else settings.default_locale,
        gender=gender if gender is not None else settings.default_gender,
    )


def create_formatter_from_env(
        *,
        locale: LocaleIdentifier | None = None,
        gender: Gender | str | None = None,
) -> OrdinalFormat:
    """Load settings, configure logging from them and build a formatter.

    Raises:
        RuntimeError: If the environment configuration is invalid.
    """

    settings = load_settings()
    configure_logging(settings)
    return create_formatter(settings, locale=locale, gender=gender)
