"""Locale identifier parsing and likely-subtag maximization.

Turns a BCP-47 tag (or an already structured locale) into a canonical `LocaleTag` triple. The
subtag data (language aliases, likely subtags) comes from the CLDR tables shipped with Babel;
only the tag grammar is checked here.
"""

from __future__ import annotations

import re

from babel.core import Locale as BabelLocale
from babel.core import get_global, parse_locale
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ordinals.errors import InvalidLocaleError

_LANGUAGE_TAG_RE = re.compile(
    r"""
    (?P<language>[a-z]{2,3}|[a-z]{5,8})
    (?:-(?P<script>[a-z]{4}))?
    (?:-(?P<region>[a-z]{2}|[0-9]{3}))?
    (?:-(?:[a-z0-9]{5,8}|[0-9][a-z0-9]{3}))*
    (?:-[0-9a-wyz](?:-[a-z0-9]{2,8})+)*
    (?:-x(?:-[a-z0-9]+)+)?
    """,
    flags=re.IGNORECASE | re.VERBOSE,
)

_UNDETERMINED = "und"


class LocaleTag(BaseModel):
    """Canonical {language, script, region} triple. Empty script/region mean undetermined."""

    model_config = ConfigDict(extra="forbid", frozen=True, str_strip_whitespace=True)

    language: str = Field(pattern=r"^[A-Za-z]{2,3}$|^[A-Za-z]{5,8}$")
    script: str = Field(default="", pattern=r"^$|^[A-Za-z]{4}$")
    region: str = Field(default="", pattern=r"^$|^[A-Za-z]{2}$|^[0-9]{3}$")

    @field_validator("language")
    @classmethod
    def lower_language(cls, value: str) -> str:
        return value.lower()

    @field_validator("script")
    @classmethod
    def title_script(cls, value: str) -> str:
        return value.title()

    @field_validator("region")
    @classmethod
    def upper_region(cls, value: str) -> str:
        return value.upper()

    def __str__(self) -> str:
        return "-".join(part for part in (self.language, self.script, self.region) if part)


LocaleIdentifier = str | LocaleTag | BabelLocale


def parse_tag(tag: str) -> LocaleTag:
    """Parse a BCP-47 tag into its language/script/region subtags (no maximization).

    Underscores are accepted as separators. Variants, extensions and private-use subtags are
    validated and then dropped.

    Raises:
        InvalidLocaleError: If the tag does not follow the language tag grammar.
    """

    value = (tag or "").strip().replace("_", "-")
    match = _LANGUAGE_TAG_RE.fullmatch(value)
    if match is None:
        raise InvalidLocaleError(f"Incorrect locale information provided: {tag!r}")

    return LocaleTag(
        language=match.group("language"),
        script=match.group("script") or "",
        region=match.group("region") or "",
    )


def _from_identifier(identifier: str) -> tuple[str, str, str]:
    parts = parse_locale(identifier)
    language, territory, script = parts[0], parts[1], parts[2]
    return language, script or "", territory or ""


def _canonicalize(tag: LocaleTag) -> LocaleTag:
    """Replace deprecated language and region codes (e.g. `in` -> `id`, `UK` -> `GB`)."""

    language, script, region = tag.language, tag.script, tag.region

    alias = get_global("language_aliases").get(language)
    if alias:
        language, alias_script, alias_region = _from_identifier(alias)
        script = script or alias_script
        region = region or alias_region

    if region:
        region = get_global("territory_aliases").get(region, (region,))[0]

    return LocaleTag(language=language, script=script, region=region)


def _likely_subtag_keys(tag: LocaleTag) -> list[str]:
    language, script, region = tag.language, tag.script, tag.region
    keys: list[str] = []
    if script and region:
        keys.append(f"{language}_{script}_{region}")
    if region:
        keys.append(f"{language}_{region}")
    if script:
        keys.append(f"{language}_{script}")
    keys.append(language)
    if language != _UNDETERMINED:
        if script:
            keys.append(f"{_UNDETERMINED}_{script}")
        if region:
            keys.append(f"{_UNDETERMINED}_{region}")
    return keys


def maximize(tag: LocaleTag) -> LocaleTag:
    """Fill in missing script/region subtags from the CLDR likely-subtags table.

    Explicit subtags always win over inferred ones. Languages unknown to CLDR are returned
    unchanged.
    """

    likely_subtags = get_global("likely_subtags")
    for key in _likely_subtag_keys(tag):
        likely = likely_subtags.get(key)
        if likely is None:
            continue

        language, script, region = _from_identifier(likely)
        return LocaleTag(
            language=language if tag.language == _UNDETERMINED else tag.language,
            script=tag.script or script,
            region=tag.region or region,
        )
    return tag


def resolve_locale(locale: LocaleIdentifier) -> LocaleTag:
    """Resolve a locale identifier into its canonical, maximized `LocaleTag`.

    Raises:
        InvalidLocaleError: If `locale` is malformed or of an unsupported type.
    """

    if isinstance(locale, LocaleTag):
        tag = locale
    elif isinstance(locale, BabelLocale):
        tag = LocaleTag(
            language=locale.language,
            script=locale.script or "",
            region=locale.territory or "",
        )
    elif isinstance(locale, str):
        tag = parse_tag(locale)
    else:
        raise InvalidLocaleError(f"Unsupported locale type: {type(locale).__name__}")

    return maximize(_canonicalize(tag))
