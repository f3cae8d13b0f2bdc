"""
Roman numeral → integer conversion with strict Standard-form validation.

A single right-to-left scan both validates and evaluates the string.
Three pieces of state are carried from symbol to symbol:

  - ``prev_value``:  value of the symbol just scanned (to the right)
  - ``run_length``:  how many equal symbols in a row have been seen
  - ``min_allowed``: floor set by the last placement; a subtraction raises
                     it so nothing equal or smaller can follow it

For each symbol (right to left):

  1. Run length:  a repeat beyond the symbol's ``max_run`` is rejected
                  ("IIII", "VV").
  2. Additive:    ``cur >= prev_value`` and ``cur >= min_allowed``
                  → add, ``min_allowed = prev_value``.
     Subtractive: only I, X, C; ``cur > min_allowed`` and the symbol to the
                  right is at most ten times larger
                  → subtract, ``min_allowed = 10 * cur``.
     Anything else is rejected ("IIV", "VIV", "IXC", "VX", "IL", "IC", "IVI").

Every string that survives the scan is the canonical spelling of a value in
[1, 3999]; no separate range check is needed.
"""

from __future__ import annotations

import logging
from typing import Optional

from .exceptions import InvalidFormatError
from .models import ParseFinding, RejectionReason
from .symbols import MAX_SYMBOLS_LENGTH, Symbol

logger = logging.getLogger(__name__)


# ─── Scanner ─────────────────────────────────────────────────────────


def _scan(symbols: object) -> int:
    """Validate and evaluate ``symbols``, raising on the first violation."""
    if symbols is None:
        raise InvalidFormatError(symbols, RejectionReason.MISSING_INPUT)
    if not isinstance(symbols, str):
        raise InvalidFormatError(symbols, RejectionReason.NOT_A_STRING)
    if not symbols:
        raise InvalidFormatError(symbols, RejectionReason.EMPTY)
    if len(symbols) > MAX_SYMBOLS_LENGTH:
        raise InvalidFormatError(symbols, RejectionReason.TOO_LONG)

    total = 0
    prev_value = 0  # primed below every symbol
    run_length = 1
    min_allowed = 0

    for position in range(len(symbols) - 1, -1, -1):
        symbol = Symbol.from_char(symbols[position])
        if symbol is None:
            raise InvalidFormatError(
                symbols, RejectionReason.INVALID_CHARACTER, position
            )

        cur = symbol.value
        if cur == prev_value:
            run_length += 1
            if run_length > symbol.max_run:
                raise InvalidFormatError(
                    symbols, RejectionReason.RUN_TOO_LONG, position
                )
        else:
            run_length = 1

        if cur >= prev_value and cur >= min_allowed:
            total += cur
            min_allowed = prev_value
        elif symbol.max_run == 3 and cur > min_allowed and cur * 10 >= prev_value:
            total -= cur
            min_allowed = 10 * cur
        else:
            raise InvalidFormatError(symbols, RejectionReason.BAD_PLACEMENT, position)

        prev_value = cur

    return total


# ─── Public API ──────────────────────────────────────────────────────


def parse_roman(symbols: str) -> int:
    """Convert a Standard-form numeral to its integer value.

    Args:
        symbols: e.g. "MCMXCIV" (upper case only)

    Returns:
        1994

    Raises:
        InvalidFormatError: If symbols is None, not a string, empty, longer
            than 15 characters, contains anything but I V X L C D M, or
            breaks the repetition / placement rules.
    """
    try:
        return _scan(symbols)
    except InvalidFormatError as exc:
        logger.debug("Rejected %r: %s", symbols, exc.reason)
        raise


def is_valid_symbols(symbols: object) -> bool:
    """True if ``symbols`` is a Standard-form numeral. Never raises."""
    try:
        _scan(symbols)
    except InvalidFormatError:
        return False
    return True


def diagnose(symbols: object) -> Optional[ParseFinding]:
    """Explain why ``symbols`` is rejected, or return None if it is valid."""
    try:
        _scan(symbols)
    except InvalidFormatError as exc:
        return ParseFinding(
            symbols=symbols if isinstance(symbols, str) else None,
            reason=RejectionReason(exc.reason),
            position=exc.position,
            message=str(exc),
            details=exc.details,
        )
    return None
