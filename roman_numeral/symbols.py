"""
The seven Roman symbols and the range constants derived from them.

Each symbol knows its value and how many times it may repeat in a row.
The repeat limit is derived from the value, not configured: powers of ten
(I, X, C, M) may appear three times running, the fives (V, L, D) once.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class Symbol(Enum):
    """A single Roman numeral symbol."""

    I = 1
    V = 5
    X = 10
    L = 50
    C = 100
    D = 500
    M = 1_000

    @property
    def max_run(self) -> int:
        """Maximum number of consecutive occurrences in Standard form."""
        return _MAX_RUN[self]

    @classmethod
    def from_char(cls, char: str) -> Optional[Symbol]:
        """Decode one character, or None if it is not an upper-case symbol."""
        return _BY_CHAR.get(char)


def _leading_digit(value: int) -> int:
    while value >= 10:
        value //= 10
    return value


_MAX_RUN: dict[Symbol, int] = {
    symbol: 3 if _leading_digit(symbol.value) == 1 else 1 for symbol in Symbol
}

# Direct dispatch table: character → member
_BY_CHAR: dict[str, Symbol] = {symbol.name: symbol for symbol in Symbol}


# ─── Range Constants ────────────────────────────────────────────────

MIN_VALUE: int = Symbol.I.value  # I = 1

# MMMCMXCIX; the next value would need a fourth M
MAX_VALUE: int = Symbol.M.value * (Symbol.M.max_run + 1) - Symbol.I.value  # 3999

# Length of "MMMDCCCLXXXVIII" (3888), the longest canonical form
MAX_SYMBOLS_LENGTH: int = 15
