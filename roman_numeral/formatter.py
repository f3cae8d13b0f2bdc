"""
Integer → Roman numeral conversion.

Each decimal place has a fixed lookup table; the canonical numeral is the
concatenation of the thousands, hundreds, tens and ones entries:

    1994 → "M" + "CM" + "XC" + "IV" → "MCMXCIV"

There is no subtractive form above 1000, so the thousands table stops at 3.
"""

from __future__ import annotations

from .exceptions import InvalidValueError
from .symbols import MAX_VALUE, MIN_VALUE

# ─── Per-Place Lookup Tables ─────────────────────────────────────────

_THOUSANDS: tuple[str, ...] = ("", "M", "MM", "MMM")

_HUNDREDS: tuple[str, ...] = (
    "", "C", "CC", "CCC", "CD", "D", "DC", "DCC", "DCCC", "CM",
)

_TENS: tuple[str, ...] = (
    "", "X", "XX", "XXX", "XL", "L", "LX", "LXX", "LXXX", "XC",
)

_ONES: tuple[str, ...] = (
    "", "I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX",
)


# ─── Public API ──────────────────────────────────────────────────────


def is_valid_value(value: object) -> bool:
    """True if ``value`` is an int (not a bool) in [1, 3999]."""
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return MIN_VALUE <= value <= MAX_VALUE


def format_roman(value: int) -> str:
    """Convert an integer to its canonical Standard-form numeral.

    Args:
        value: e.g. 1994

    Returns:
        "MCMXCIV"

    Raises:
        InvalidValueError: If value is not an int in [1, 3999]. Out-of-range
            input is never clamped or wrapped.
    """
    if not is_valid_value(value):
        raise InvalidValueError(value)

    return (
        _THOUSANDS[value // 1000]
        + _HUNDREDS[value // 100 % 10]
        + _TENS[value // 10 % 10]
        + _ONES[value % 10]
    )
