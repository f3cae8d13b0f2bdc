"""
Roman Numeral: FastAPI Server
=============================

RESTful API for converting, validating and calculating with Roman numerals.

Endpoints:
    GET  /numerals/{value}            Integer → numeral
    GET  /numerals/parse/{symbols}    Numeral → integer
    POST /validate                    Is a string a Standard-form numeral? Why not?
    POST /calculate                   Overflow-checked arithmetic on two numerals
    GET  /health                      Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    ROMAN_NUMERAL_CACHE=eager uvicorn api:app --host 0.0.0.0
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from enum import Enum
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from roman_numeral import __version__
from roman_numeral.arithmetic import BINARY_OPERATIONS, UNARY_OPERATIONS
from roman_numeral.cache import NumeralCache, cache_from_env, read_cache_mode
from roman_numeral.exceptions import RomanNumeralError
from roman_numeral.models import ParseFinding
from roman_numeral.numeral import RomanNumeral
from roman_numeral.parser import diagnose

load_dotenv()

logger = logging.getLogger(__name__)


# ─── Application Lifespan (build the numeral cache) ─────────────────


class _State:
    """What the app owns between startup and shutdown."""

    def __init__(self, cache: Optional[NumeralCache], cache_mode: str):
        self.cache = cache
        self.cache_mode = cache_mode


_state: _State | None = None


def build_state() -> _State:
    """Read ROMAN_NUMERAL_CACHE and build the cache it asks for."""
    mode = read_cache_mode()
    return _State(cache_from_env(), mode)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build (and optionally preload) the numeral cache on startup."""
    global _state  # noqa: PLW0603
    _state = build_state()
    logger.info("Roman numeral API started (cache=%s)", _state.cache_mode)
    yield
    _state = None
    logger.info("Roman numeral API stopped")


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Roman Numeral API",
    description=(
        "Strict Standard-form Roman numerals (I to MMMCMXCIX). "
        "Integer/numeral conversion, validation with rejection reasons, "
        "and overflow-checked arithmetic."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class NumeralOut(BaseModel):
    """A numeral and its integer value."""

    symbols: str
    value: int

    model_config = {"json_schema_extra": {"example": {
        "symbols": "MCMXCIV",
        "value": 1994,
    }}}


class ValidateRequest(BaseModel):
    """Request body for the /validate endpoint."""

    symbols: str = Field(
        ...,
        description="Candidate numeral, e.g. 'MCMXCIV'. Upper case only.",
        json_schema_extra={"example": "IIII"},
    )


class ValidateResponse(BaseModel):
    symbols: str
    is_valid: bool
    finding: Optional[ParseFinding] = None


class Operation(str, Enum):
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    MOD = "mod"
    POWER = "power"
    INCREMENT = "increment"
    DECREMENT = "decrement"


class CalculateRequest(BaseModel):
    """Request body for the /calculate endpoint.

    ``right`` is required for binary operations and ignored by
    ``increment`` / ``decrement``.
    """

    operation: Operation
    left: str = Field(..., json_schema_extra={"example": "MMM"})
    right: Optional[str] = Field(None, json_schema_extra={"example": "CMXCIX"})


class CalculateResponse(BaseModel):
    operation: Operation
    left: NumeralOut
    right: Optional[NumeralOut] = None
    result: NumeralOut


class HealthResponse(BaseModel):
    status: str
    version: str
    cache_mode: str
    cached_numerals: int


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_state() -> _State:
    if _state is None:
        raise HTTPException(status_code=503, detail="Numeral cache not initialised")
    return _state


def _reject(exc: RomanNumeralError) -> HTTPException:
    """Map a domain error to a 422 with its code, message and details."""
    return HTTPException(
        status_code=422,
        detail={"code": exc.code, "message": exc.message, "details": exc.details},
    )


def _to_out(numeral: RomanNumeral) -> NumeralOut:
    return NumeralOut(symbols=numeral.symbols, value=numeral.value)


# ─── Endpoints ───────────────────────────────────────────────────────


@app.get(
    "/numerals/{value}",
    summary="Convert an integer to a Roman numeral",
    tags=["Conversion"],
    responses={
        422: {"description": "Value outside [1, 3999]"},
        503: {"description": "Numeral cache not yet initialised"},
    },
)
def format_numeral(value: int) -> NumeralOut:
    """Return the canonical Standard-form numeral for `value`."""
    state = _get_state()
    try:
        numeral = RomanNumeral.of(value, cache=state.cache)
    except RomanNumeralError as exc:
        raise _reject(exc)
    return _to_out(numeral)


@app.get(
    "/numerals/parse/{symbols}",
    summary="Convert a Roman numeral to an integer",
    tags=["Conversion"],
    responses={
        422: {"description": "Not a Standard-form numeral"},
        503: {"description": "Numeral cache not yet initialised"},
    },
)
def parse_numeral(symbols: str) -> NumeralOut:
    """Parse a Standard-form numeral. Lower-case and non-standard forms are rejected."""
    state = _get_state()
    try:
        numeral = RomanNumeral.parse(symbols, cache=state.cache)
    except RomanNumeralError as exc:
        raise _reject(exc)
    return _to_out(numeral)


@app.post(
    "/validate",
    summary="Check whether a string is a Standard-form numeral",
    tags=["Validation"],
)
def validate_numeral(request: ValidateRequest) -> ValidateResponse:
    """Never fails on bad input; a rejected string comes back with a `finding`
    naming the broken rule and the position of the offending character."""
    finding = diagnose(request.symbols)
    return ValidateResponse(
        symbols=request.symbols,
        is_valid=finding is None,
        finding=finding,
    )


@app.post(
    "/calculate",
    summary="Overflow-checked arithmetic on Roman numerals",
    tags=["Arithmetic"],
    responses={
        422: {"description": "Invalid operand, missing right operand, or overflow"},
        503: {"description": "Numeral cache not yet initialised"},
    },
)
def calculate(request: CalculateRequest) -> CalculateResponse:
    """Apply `operation` to `left` (and `right`). Results outside
    I..MMMCMXCIX are rejected with `ARITHMETIC_OVERFLOW`."""
    state = _get_state()
    name = request.operation.value

    try:
        left = RomanNumeral.parse(request.left, cache=state.cache)

        if name in UNARY_OPERATIONS:
            result = UNARY_OPERATIONS[name](left, cache=state.cache)
            return CalculateResponse(
                operation=request.operation, left=_to_out(left), result=_to_out(result)
            )

        if request.right is None:
            raise HTTPException(
                status_code=422, detail=f"Operation '{name}' needs a right operand"
            )
        right = RomanNumeral.parse(request.right, cache=state.cache)
        result = BINARY_OPERATIONS[name](left, right, cache=state.cache)
    except RomanNumeralError as exc:
        raise _reject(exc)

    return CalculateResponse(
        operation=request.operation,
        left=_to_out(left),
        right=_to_out(right),
        result=_to_out(result),
    )


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Numeral cache not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and cache info."""
    state = _get_state()
    return HealthResponse(
        status="healthy",
        version=__version__,
        cache_mode=state.cache_mode,
        cached_numerals=len(state.cache) if state.cache is not None else 0,
    )
