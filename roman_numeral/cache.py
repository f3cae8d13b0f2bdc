"""
Optional value cache for RomanNumeral instances.

The cache is an explicit component: nothing in the package holds one
globally. Whoever wants caching creates a ``NumeralCache`` and passes it
with ``cache=`` to ``RomanNumeral.of`` / ``RomanNumeral.parse`` and the
arithmetic helpers.

It is populate-once, read-mostly:
  - Reads are plain dict lookups and take no lock.
  - Writes take a lock and never replace an existing entry, so two threads
    storing the same value converge on a single instance.

Caching only affects speed and instance identity, never results.
"""

from __future__ import annotations

import logging
import os
import threading
from typing import TYPE_CHECKING, Mapping, Optional

from .formatter import format_roman
from .symbols import MAX_VALUE, MIN_VALUE

if TYPE_CHECKING:
    from .numeral import RomanNumeral

logger = logging.getLogger(__name__)

CACHE_MODE_ENV = "ROMAN_NUMERAL_CACHE"
CACHE_MODES: frozenset[str] = frozenset({"off", "lazy", "eager"})


class NumeralCache:
    """Thread-safe lookup of numerals by value and values by symbols.

    Usage:
        cache = NumeralCache()
        five = RomanNumeral.of(5, cache=cache)
        assert RomanNumeral.parse("V", cache=cache) is five
    """

    __slots__ = ("_lock", "_numerals", "_values")

    def __init__(self) -> None:
        self._lock: threading.Lock = threading.Lock()
        self._numerals: dict[int, RomanNumeral] = {}
        self._values: dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._numerals)

    def __contains__(self, value: object) -> bool:
        return value in self._numerals

    def get(self, value: int) -> Optional[RomanNumeral]:
        """Cached numeral for ``value``, or None."""
        return self._numerals.get(value)

    def value_of(self, symbols: str) -> Optional[int]:
        """Cached value for a canonical string, or None."""
        return self._values.get(symbols)

    def store(self, numeral: RomanNumeral) -> RomanNumeral:
        """Insert ``numeral`` unless its value is already cached.

        Returns:
            The instance that is in the cache after the call, which is the
            previously stored one if another caller got there first.
        """
        with self._lock:
            existing = self._numerals.get(numeral.value)
            if existing is not None:
                return existing
            self._numerals[numeral.value] = numeral
            self._values[numeral.symbols] = numeral.value
            return numeral

    def preload(self) -> NumeralCache:
        """Eagerly cache every numeral from I to MMMCMXCIX."""
        from .numeral import RomanNumeral

        for value in range(MIN_VALUE, MAX_VALUE + 1):
            if value not in self._numerals:
                self.store(RomanNumeral(symbols=format_roman(value), value=value))

        logger.info("Preloaded %d numerals into cache", len(self))
        return self


def read_cache_mode(env: Mapping[str, str] | None = None) -> str:
    """Read ``ROMAN_NUMERAL_CACHE`` (default ``lazy``).

    Raises:
        ValueError: If the variable holds anything but off / lazy / eager.
    """
    env = os.environ if env is None else env
    mode = env.get(CACHE_MODE_ENV, "lazy").strip().lower()

    if mode not in CACHE_MODES:
        raise ValueError(
            f"{CACHE_MODE_ENV}={mode!r} is not one of {', '.join(sorted(CACHE_MODES))}"
        )
    return mode


def cache_from_env(env: Mapping[str, str] | None = None) -> Optional[NumeralCache]:
    """Build a cache according to ``ROMAN_NUMERAL_CACHE``.

    ``off`` → None, ``lazy`` → empty cache, ``eager`` → preloaded.
    """
    mode = read_cache_mode(env)

    if mode == "off":
        logger.info("%s=off, numerals will not be cached", CACHE_MODE_ENV)
        return None
    if mode == "eager":
        return NumeralCache().preload()
    return NumeralCache()
