"""Value types shared by the normalizer, the rule table and the formatter.

A magnitude is a tagged union rather than a bare number: the "nth" placeholder is modelled as
the infinity sentinel, which has no arbitrary-precision integer representation, so rules must
branch on `Magnitude.kind` instead of relying on numeric coercion.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum

from pydantic import BaseModel, ConfigDict

# Python refuses str() on ints above 4300 digits; longer ones are rendered in chunks.
_CHUNK_DIGITS = 4000
_CHUNK = 10 ** _CHUNK_DIGITS


def render_int(value: int) -> str:
    """Decimal rendering of an int of any size."""

    if value < 0:
        return "-" + render_int(-value)
    if value < _CHUNK:
        return str(value)

    chunks: list[str] = []
    while value >= _CHUNK:
        value, low = divmod(value, _CHUNK)
        chunks.append(str(low).zfill(_CHUNK_DIGITS))
    chunks.append(str(value))
    return "".join(reversed(chunks))


class Gender(StrEnum):
    """Grammatical gender used by the Romance-language rules."""

    male = "male"
    female = "female"


class FormatOptions(BaseModel):
    """Caller-supplied formatter options."""

    model_config = ConfigDict(extra="forbid", frozen=True, str_strip_whitespace=True)

    gender: Gender = Gender.male


class MagnitudeKind(StrEnum):
    """Which numeric class a magnitude belongs to."""

    exact = "exact"
    fractional = "fractional"
    unbounded = "unbounded"


@dataclass(frozen=True)
class Magnitude:
    """Absolute value of a formatted number.

    `exact` holds a non-negative `int` of any size, `fractional` a finite non-integral `float`
    or `Decimal` (Decimals keep every digit they were given), and `unbounded` the infinity
    sentinel that renders as the placeholder `n`.
    """

    kind: MagnitudeKind
    value: int | float | Decimal

    @classmethod
    def exact(cls, value: int) -> Magnitude:
        return cls(kind=MagnitudeKind.exact, value=abs(value))

    @classmethod
    def fractional(cls, value: float | Decimal) -> Magnitude:
        return cls(kind=MagnitudeKind.fractional, value=abs(value))

    @classmethod
    def unbounded(cls) -> Magnitude:
        return cls(kind=MagnitudeKind.unbounded, value=math.inf)

    @property
    def is_unbounded(self) -> bool:
        return self.kind == MagnitudeKind.unbounded

    @property
    def integer_part(self) -> int | None:
        """Truncated integer part, or `None` for the unbounded sentinel."""

        if self.is_unbounded:
            return None
        return int(self.value)

    @property
    def leading_digit(self) -> str:
        """First character of the decimal rendering (empty for the unbounded sentinel)."""

        if self.is_unbounded:
            return ""
        return str(self)[0]

    def is_exactly(self, number: int) -> bool:
        """Whether this is the exact integer `number` (fractions and `n` never match)."""

        return self.kind == MagnitudeKind.exact and self.value == number

    def __str__(self) -> str:
        if self.is_unbounded:
            return "n"
        if self.kind == MagnitudeKind.exact:
            return render_int(self.value)
        return str(self.value)


@dataclass(frozen=True)
class NormalizedValue:
    """A formatted number split into magnitude and sign."""

    magnitude: Magnitude
    positive: bool
