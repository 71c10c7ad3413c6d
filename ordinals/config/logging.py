"""Logging configuration for applications embedding the formatter."""

from __future__ import annotations

import logging

from ordinals.config.settings import Settings

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(settings: Settings) -> None:
    """Configure process logging at the validated `settings.log_level`.

    The package logger gets the same level so DEBUG records about unsupported languages show up
    even when the root logger was configured earlier by the host application.
    """

    logging.basicConfig(level=settings.log_level, format=_LOG_FORMAT)
    logging.getLogger("ordinals").setLevel(settings.log_level)
