"""
The RomanNumeral value type.

An immutable (symbols, value) pair. Instances are only ever built from a
valid int or a valid Standard-form string, and pydantic re-checks the pair
on every construction path (including ``model_validate`` and JSON), so a
RomanNumeral whose symbols disagree with its value cannot exist.

Equality, hashing and ordering use ``value`` alone.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from . import arithmetic
from .cache import NumeralCache
from .exceptions import InvalidFormatError
from .formatter import format_roman, is_valid_value
from .models import RejectionReason
from .parser import is_valid_symbols, parse_roman
from .symbols import MAX_VALUE, MIN_VALUE


class RomanNumeral(BaseModel):
    """A Standard-form Roman numeral between I (1) and MMMCMXCIX (3999).

    Usage:
        RomanNumeral.of(1994)         # RomanNumeral(symbols='MCMXCIV', value=1994)
        RomanNumeral.parse("XIV")     # RomanNumeral(symbols='XIV', value=14)
        RomanNumeral.of(10) + RomanNumeral.of(5) == RomanNumeral.of(15)
    """

    model_config = ConfigDict(frozen=True, strict=True)

    symbols: str
    value: int = Field(ge=MIN_VALUE, le=MAX_VALUE)

    @model_validator(mode="after")
    def check_canonical(self) -> RomanNumeral:
        """``symbols`` must be exactly the canonical spelling of ``value``."""
        expected = format_roman(self.value)
        if self.symbols != expected:
            raise ValueError(
                f"symbols {self.symbols!r} do not spell {self.value} "
                f"(expected {expected!r})"
            )
        return self

    # ─── Construction ───────────────────────────────────────────────

    @classmethod
    def of(cls, value: int, *, cache: Optional[NumeralCache] = None) -> RomanNumeral:
        """Numeral for an integer in [1, 3999].

        Raises:
            InvalidValueError: If value is out of range or not an int.
        """
        symbols = format_roman(value)

        if cache is None:
            return cls(symbols=symbols, value=value)

        cached = cache.get(value)
        if cached is not None:
            return cached
        return cache.store(cls(symbols=symbols, value=value))

    @classmethod
    def parse(
        cls, symbols: str, *, cache: Optional[NumeralCache] = None
    ) -> RomanNumeral:
        """Numeral for a Standard-form string, keeping the input as ``symbols``.

        Raises:
            InvalidFormatError: If symbols is not a Standard-form numeral.
        """
        if cache is not None and isinstance(symbols, str):
            known = cache.value_of(symbols)
            if known is not None:
                cached = cache.get(known)
                if cached is not None:
                    return cached

        value = parse_roman(symbols)
        numeral = cls(symbols=symbols, value=value)
        return numeral if cache is None else cache.store(numeral)

    @classmethod
    def parse_range(
        cls,
        symbols: str,
        start: int,
        end: int,
        *,
        cache: Optional[NumeralCache] = None,
    ) -> RomanNumeral:
        """Parse ``symbols[start:end]``.

        Raises:
            InvalidFormatError: If symbols is None or the slice is not a
                Standard-form numeral.
            IndexError: If not ``0 <= start <= end <= len(symbols)``.
        """
        if symbols is None:
            raise InvalidFormatError(symbols, RejectionReason.MISSING_INPUT)
        if not isinstance(symbols, str):
            raise InvalidFormatError(symbols, RejectionReason.NOT_A_STRING)
        if not 0 <= start <= end <= len(symbols):
            raise IndexError(
                f"begin {start}, end {end}, length {len(symbols)}"
            )
        return cls.parse(symbols[start:end], cache=cache)

    @staticmethod
    def is_valid(candidate: object) -> bool:
        """True for an int in range or a Standard-form string. Never raises."""
        if isinstance(candidate, int) and not isinstance(candidate, bool):
            return is_valid_value(candidate)
        return is_valid_symbols(candidate)

    # ─── Equality & Ordering (by value) ─────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RomanNumeral):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, RomanNumeral):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, RomanNumeral):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, RomanNumeral):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, RomanNumeral):
            return NotImplemented
        return self.value >= other.value

    # ─── Conversions ────────────────────────────────────────────────

    def __str__(self) -> str:
        return self.symbols

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __float__(self) -> float:
        return float(self.value)

    # ─── Checked Arithmetic Operators ───────────────────────────────

    def __add__(self, other: object) -> RomanNumeral:
        if not isinstance(other, RomanNumeral):
            return NotImplemented
        return arithmetic.add(self, other)

    def __sub__(self, other: object) -> RomanNumeral:
        if not isinstance(other, RomanNumeral):
            return NotImplemented
        return arithmetic.subtract(self, other)

    def __mul__(self, other: object) -> RomanNumeral:
        if not isinstance(other, RomanNumeral):
            return NotImplemented
        return arithmetic.multiply(self, other)

    def __floordiv__(self, other: object) -> RomanNumeral:
        if not isinstance(other, RomanNumeral):
            return NotImplemented
        return arithmetic.divide(self, other)

    def __mod__(self, other: object) -> RomanNumeral:
        if not isinstance(other, RomanNumeral):
            return NotImplemented
        return arithmetic.mod(self, other)

    def __pow__(self, other: object) -> RomanNumeral:
        if not isinstance(other, RomanNumeral):
            return NotImplemented
        return arithmetic.power(self, other)
