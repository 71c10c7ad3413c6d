"""Exceptions raised by the ordinal formatting API.

Only two situations are errors: a malformed locale identifier and a value that is not a number.
An unsupported language is not an error; it produces a formatter with `supports=False`.
"""

from __future__ import annotations


class OrdinalError(ValueError):
    """Base class for all errors raised by this package."""


class InvalidLocaleError(OrdinalError):
    """Raised when a locale identifier is not a syntactically valid BCP-47 tag."""


class InvalidValueError(OrdinalError):
    """Raised when `format` receives `None`, NaN or a non-numeric value."""
