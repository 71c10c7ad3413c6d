"""Numeric input normalization.

Every value handed to `OrdinalFormat.format` goes through `normalize_value`, which splits it into
an absolute `Magnitude` and a sign. The integer path never touches floating point, so magnitudes
far beyond 2**53 keep their exact last digits.
"""

from __future__ import annotations

import numbers
import re
from decimal import Decimal, InvalidOperation

from ordinals.errors import InvalidValueError
from ordinals.format.schema import Magnitude, NormalizedValue

_PREFIXED_INT_RE = re.compile(r"[+-]?0(?:x[0-9a-f_]+|o[0-7_]+|b[01_]+)", flags=re.IGNORECASE)


def _invalid(value: object) -> InvalidValueError:
    return InvalidValueError(f"Invalid value: {value!r}")


def _from_int(value: int) -> NormalizedValue:
    return NormalizedValue(magnitude=Magnitude.exact(value), positive=value >= 0)


def _from_real(value: numbers.Real | Decimal) -> NormalizedValue:
    try:
        integral = int(value)
    except OverflowError:
        return NormalizedValue(magnitude=Magnitude.unbounded(), positive=value > 0)
    except ValueError as exc:
        # NaN (float or Decimal, quiet or signaling).
        raise _invalid(value) from exc

    if integral == value:
        return _from_int(integral)
    fraction = value if isinstance(value, Decimal) else float(value)
    return NormalizedValue(magnitude=Magnitude.fractional(fraction), positive=value >= 0)


def _parse_text(text: str) -> int | Decimal:
    """Parse a numeric string.

    Order matters: plain base-10 integers first, then `0x`/`0o`/`0b` literals, then `Decimal`,
    which also understands exponents, `Infinity` and `NaN`.
    """

    value = text.strip()
    if not value:
        raise _invalid(text)

    try:
        return int(value)
    except ValueError:
        pass

    if _PREFIXED_INT_RE.fullmatch(value):
        try:
            return int(value, 0)
        except ValueError as exc:
            raise _invalid(text) from exc

    try:
        return Decimal(value)
    except InvalidOperation as exc:
        raise _invalid(text) from exc


def normalize_value(value: object) -> NormalizedValue:
    """Split a number, numeric string or infinity into magnitude and sign.

    Raises:
        InvalidValueError: If the value is `None`, a bool, NaN or not numeric.
    """

    if value is None or isinstance(value, bool):
        raise _invalid(value)

    if isinstance(value, numbers.Integral):
        return _from_int(int(value))

    if isinstance(value, str):
        parsed = _parse_text(value)
        if isinstance(parsed, int):
            return _from_int(parsed)
        return _from_real(parsed)

    if isinstance(value, (numbers.Real, Decimal)):
        return _from_real(value)

    raise _invalid(value)
