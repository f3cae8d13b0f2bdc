"""Pytest configuration: puts the project root on sys.path and shares fixtures."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))

from roman_numeral.cache import NumeralCache  # noqa: E402

# One canonical numeral per line, in increasing order starting at I
REFERENCE_PATH = Path(__file__).parent / "tests" / "references" / "expected_numerals.txt"


@pytest.fixture
def cache() -> NumeralCache:
    """A fresh, empty numeral cache for each test."""
    return NumeralCache()


@pytest.fixture(scope="session")
def reference_numerals() -> list[str]:
    """Canonical numerals for 1..3999; index i holds the numeral for i + 1."""
    with REFERENCE_PATH.open(encoding="utf-8") as f:
        numerals = [line.strip() for line in f if line.strip()]
    assert len(numerals) == 3999, f"Reference file has {len(numerals)} entries"
    return numerals
