#!/usr/bin/env python3
"""
Roman Numeral: Entry Point
==========================

Converts each argument and prints a report. Arguments made only of decimal digits
are formatted as numerals; anything else is parsed as a numeral.

Usage:
    python main.py                          # Built-in sample inputs
    python main.py 1994 MCMXCIV IIII 4000
    ROMAN_NUMERAL_LOG_LEVEL=DEBUG python main.py IC
"""

from __future__ import annotations

import logging
import os
import sys

from dotenv import load_dotenv

from roman_numeral.cache import cache_from_env
from roman_numeral.exceptions import RomanNumeralError
from roman_numeral.numeral import RomanNumeral
from roman_numeral.parser import diagnose

load_dotenv()


# ─── Sample Inputs, Some Bad on Purpose ─────────────────────────────

SAMPLE_INPUTS = [
    "1994",
    "MCMXCIV",
    "3999",
    "XLII",
    "IIII",
    "IC",
    "VX",
    "4000",
    "mcm",
]


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 60


# ─── Pretty Printer Helpers ─────────────────────────────────────────


def _print_accepted(item: str, numeral: RomanNumeral) -> None:
    if item.isdecimal():
        print(f"  {_GREEN}✔{_RESET} {item:>16} {_DIM}→{_RESET} {_BOLD}{numeral}{_RESET}")
    else:
        print(f"  {_GREEN}✔{_RESET} {item:>16} {_DIM}→{_RESET} {_BOLD}{numeral.value}{_RESET}")


def _print_rejected(item: str, exc: RomanNumeralError) -> None:
    print(f"  {_RED}✘{_RESET} {item:>16} {_DIM}→{_RESET} {_RED}[{exc.code}]{_RESET} {exc.message}")
    if not item.isdecimal():
        finding = diagnose(item)
        if finding is not None:
            where = "" if finding.position is None else f" at index {finding.position}"
            print(f"    {_DIM}reason: {finding.reason.value}{where}{_RESET}")


# ─── Main ────────────────────────────────────────────────────────────


def convert_all(items: list[str]) -> int:
    """Convert and print every item.

    Returns:
        0 if every item converted, 1 if any was rejected.
    """
    cache = cache_from_env()
    rejected = 0

    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  ROMAN NUMERAL CONVERSIONS{_RESET}")
    print(f"{'=' * _WIDTH}")

    for item in items:
        try:
            if item.isdecimal():
                numeral = RomanNumeral.of(int(item), cache=cache)
            else:
                numeral = RomanNumeral.parse(item, cache=cache)
        except RomanNumeralError as exc:
            rejected += 1
            _print_rejected(item, exc)
        else:
            _print_accepted(item, numeral)

    print(f"{'=' * _WIDTH}")
    if rejected:
        print(f"  {_RED}{_BOLD}{rejected} of {len(items)} input(s) rejected{_RESET}")
    else:
        print(f"  {_GREEN}{_BOLD}ALL INPUTS CONVERTED{_RESET}")
    print(f"{'=' * _WIDTH}\n")

    return 1 if rejected else 0


def main():
    """Convert argv items (or the samples) and exit non-zero on any rejection."""
    level = os.environ.get("ROMAN_NUMERAL_LOG_LEVEL")
    if level:
        logging.basicConfig(level=level.upper())

    items = sys.argv[1:] or SAMPLE_INPUTS
    sys.exit(convert_all(items))


if __name__ == "__main__":
    main()
