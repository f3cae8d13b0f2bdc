"""
Overflow-checked arithmetic on RomanNumeral values.

Every helper works on the underlying ints with ordinary integer semantics
(``//`` for division; operands are always positive so it truncates), then
re-checks that the result is in [1, 3999] before building a numeral.
A result outside that range raises ArithmeticOverflowError; nothing is
clamped or wrapped. ``mod`` of exact multiples yields 0 and overflows.

Results are built with ``type(x).of``, so the helpers never import the
value type at runtime.
"""

from __future__ import annotations

import operator
from typing import TYPE_CHECKING, Callable, Optional

from .exceptions import ArithmeticOverflowError
from .formatter import is_valid_value
from .symbols import MAX_VALUE

if TYPE_CHECKING:
    from .cache import NumeralCache
    from .numeral import RomanNumeral


# ─── Core ────────────────────────────────────────────────────────────


def _checked(operation: str, result: int, *operands: int) -> int:
    if not is_valid_value(result):
        raise ArithmeticOverflowError(operation, operands, result)
    return result


def _checked_power(base: int, exponent: int) -> int:
    """``base ** exponent`` by repeated multiplication, stopping once out of range."""
    result = 1
    for _ in range(exponent):
        result *= base
        if result > MAX_VALUE:
            raise ArithmeticOverflowError("power", (base, exponent), result)
    return result


def _apply(
    operation: str,
    op: Callable[[int, int], int],
    x: RomanNumeral,
    y: RomanNumeral,
    cache: Optional[NumeralCache],
) -> RomanNumeral:
    result = _checked(operation, op(x.value, y.value), x.value, y.value)
    return type(x).of(result, cache=cache)


# ─── Binary Operations ───────────────────────────────────────────────


def add(
    x: RomanNumeral, y: RomanNumeral, *, cache: Optional[NumeralCache] = None
) -> RomanNumeral:
    return _apply("add", operator.add, x, y, cache)


def subtract(
    x: RomanNumeral, y: RomanNumeral, *, cache: Optional[NumeralCache] = None
) -> RomanNumeral:
    return _apply("subtract", operator.sub, x, y, cache)


def multiply(
    x: RomanNumeral, y: RomanNumeral, *, cache: Optional[NumeralCache] = None
) -> RomanNumeral:
    return _apply("multiply", operator.mul, x, y, cache)


def divide(
    x: RomanNumeral, y: RomanNumeral, *, cache: Optional[NumeralCache] = None
) -> RomanNumeral:
    """Truncating division. The divisor is at least I, so it is never zero."""
    return _apply("divide", operator.floordiv, x, y, cache)


def mod(
    x: RomanNumeral, y: RomanNumeral, *, cache: Optional[NumeralCache] = None
) -> RomanNumeral:
    return _apply("mod", operator.mod, x, y, cache)


def power(
    x: RomanNumeral, y: RomanNumeral, *, cache: Optional[NumeralCache] = None
) -> RomanNumeral:
    result = _checked_power(x.value, y.value)
    return type(x).of(result, cache=cache)


# ─── Unary Operations ────────────────────────────────────────────────


def increment(
    x: RomanNumeral, *, cache: Optional[NumeralCache] = None
) -> RomanNumeral:
    result = _checked("increment", x.value + 1, x.value)
    return type(x).of(result, cache=cache)


def decrement(
    x: RomanNumeral, *, cache: Optional[NumeralCache] = None
) -> RomanNumeral:
    result = _checked("decrement", x.value - 1, x.value)
    return type(x).of(result, cache=cache)


# ─── Comparison ──────────────────────────────────────────────────────


def compare(a: RomanNumeral, b: RomanNumeral) -> int:
    """-1, 0 or 1 as ``a`` is less than, equal to or greater than ``b``."""
    return (a.value > b.value) - (a.value < b.value)


def equals(a: RomanNumeral, b: RomanNumeral) -> bool:
    return a.value == b.value


def maximum(a: RomanNumeral, b: RomanNumeral) -> RomanNumeral:
    """The operand with the larger value; ``a`` on a tie."""
    return a if a.value >= b.value else b


def minimum(a: RomanNumeral, b: RomanNumeral) -> RomanNumeral:
    """The operand with the smaller value; ``a`` on a tie."""
    return a if a.value <= b.value else b


# Operation name → helper, for callers that dispatch on a name (e.g. the API)
BINARY_OPERATIONS: dict[str, Callable[..., RomanNumeral]] = {
    "add": add,
    "subtract": subtract,
    "multiply": multiply,
    "divide": divide,
    "mod": mod,
    "power": power,
}

UNARY_OPERATIONS: dict[str, Callable[..., RomanNumeral]] = {
    "increment": increment,
    "decrement": decrement,
}
