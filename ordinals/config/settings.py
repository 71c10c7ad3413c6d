"""Environment configuration and validation.

Settings are loaded from environment variables (optionally via a local `.env` file). They only
provide defaults for applications embedding the formatter; `ordinal()` itself never reads the
environment.
"""

from __future__ import annotations

import logging

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ordinals.errors import InvalidLocaleError
from ordinals.format.schema import Gender
from ordinals.locale.resolver import parse_tag

_LOG_LEVELS: frozenset[str] = frozenset(logging.getLevelNamesMapping())


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_locale: str = Field(default="en-US", alias="ORDINALS_DEFAULT_LOCALE")
    default_gender: Gender = Field(default=Gender.male, alias="ORDINALS_DEFAULT_GENDER")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator("default_locale")
    @classmethod
    def validate_default_locale(cls, value: str) -> str:
        """Validate that the default locale is a well-formed language tag."""

        try:
            parse_tag(value)
        except InvalidLocaleError as exc:
            raise ValueError(str(exc)) from exc
        return value.strip()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}")
        return level


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Raises:
        RuntimeError: If the environment configuration is invalid.
    """

    try:
        return Settings()
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc
