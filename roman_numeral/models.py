"""
Pydantic models for parser diagnostics.

A rejected string is reported as a typed finding rather than free text, so
the reason survives serialization (API responses, logs, reports).
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


# ─── Rejection Reasons ──────────────────────────────────────────────


class RejectionReason(str, Enum):
    """Which rule a candidate string broke."""

    MISSING_INPUT = "MISSING_INPUT"  # None
    NOT_A_STRING = "NOT_A_STRING"
    EMPTY = "EMPTY"
    TOO_LONG = "TOO_LONG"  # Longer than any canonical form
    INVALID_CHARACTER = "INVALID_CHARACTER"  # Not one of I V X L C D M
    RUN_TOO_LONG = "RUN_TOO_LONG"  # e.g. "IIII", "VV"
    BAD_PLACEMENT = "BAD_PLACEMENT"  # e.g. "IIV", "IXC", "IL"


# ─── Parse Finding ──────────────────────────────────────────────────


class ParseFinding(BaseModel):
    """Why a candidate string is not a Standard-form numeral."""

    symbols: Optional[str] = None  # The rejected input, if it was a string
    reason: RejectionReason
    position: Optional[int] = None  # Index of the offending character
    message: str
    details: dict = Field(default_factory=dict)
