"""
Custom exception hierarchy for Roman numeral conversion.

Each exception type maps to one category of failure. They also derive from
the matching built-in (ValueError / ArithmeticError) so callers can catch
them without importing this package.
"""

from __future__ import annotations


class RomanNumeralError(Exception):
    """Base exception for all Roman numeral failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidValueError(RomanNumeralError, ValueError):
    """An integer outside the representable range [1, 3999]."""

    def __init__(self, value: object, details: dict | None = None):
        self.value = value
        super().__init__(
            "INVALID_VALUE",
            f"For input int: {value!r}",
            {"value": repr(value), **(details or {})},
        )


class InvalidFormatError(RomanNumeralError, ValueError):
    """A string that is not a Standard-form Roman numeral.

    Every rejection surfaces as this one type. ``details["reason"]`` names
    the rule that failed for callers that want to report it.
    """

    def __init__(self, symbols: object, reason: str, position: int | None = None):
        self.symbols = symbols
        self.reason = reason
        self.position = position
        message = "None" if symbols is None else f'For input string: "{symbols}"'
        details: dict = {"reason": reason}
        if position is not None:
            details["position"] = position
        super().__init__("INVALID_FORMAT", message, details)


class ArithmeticOverflowError(RomanNumeralError, ArithmeticError):
    """Valid operands produced a result outside [1, 3999]."""

    def __init__(self, operation: str, operands: tuple[int, ...], result: int):
        self.operation = operation
        self.result = result
        super().__init__(
            "ARITHMETIC_OVERFLOW",
            "RomanNumeral overflow",
            {"operation": operation, "operands": list(operands), "result": result},
        )
