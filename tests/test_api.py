"""
FastAPI endpoint tests for the Roman Numeral API.

Uses httpx + FastAPI TestClient; no real server needed.
"""

from __future__ import annotations

import api
import pytest
from api import app
from fastapi.testclient import TestClient

from roman_numeral.cache import NumeralCache

client = TestClient(app)


@pytest.fixture(scope="module", autouse=True)
def _warm_state() -> None:
    """Initialise app state once for all API tests (bypasses lifespan)."""
    api._state = api._State(NumeralCache(), "lazy")
    yield  # type: ignore[misc]
    api._state = None


class TestHealthEndpoint:
    def test_health_returns_200(self) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200

    def test_health_response_shape(self) -> None:
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
        assert data["cache_mode"] == "lazy"
        assert data["cached_numerals"] >= 0


class TestFormatEndpoint:
    def test_formats_value(self) -> None:
        resp = client.get("/numerals/1994")
        assert resp.status_code == 200
        assert resp.json() == {"symbols": "MCMXCIV", "value": 1994}

    def test_result_is_cached(self) -> None:
        client.get("/numerals/3888")
        assert api._state.cache.get(3888).symbols == "MMMDCCCLXXXVIII"

    @pytest.mark.parametrize("value", [0, 4000, -1])
    def test_out_of_range_is_422(self, value: int) -> None:
        resp = client.get(f"/numerals/{value}")
        assert resp.status_code == 422
        detail = resp.json()["detail"]
        assert detail["code"] == "INVALID_VALUE"
        assert detail["message"] == f"For input int: {value}"

    def test_non_integer_is_422(self) -> None:
        resp = client.get("/numerals/twelve")
        assert resp.status_code == 422


class TestParseEndpoint:
    def test_parses_numeral(self) -> None:
        resp = client.get("/numerals/parse/MMMCMXCIX")
        assert resp.status_code == 200
        assert resp.json() == {"symbols": "MMMCMXCIX", "value": 3999}

    def test_rejects_non_standard(self) -> None:
        resp = client.get("/numerals/parse/IIII")
        assert resp.status_code == 422
        detail = resp.json()["detail"]
        assert detail["code"] == "INVALID_FORMAT"
        assert detail["details"]["reason"] == "RUN_TOO_LONG"
        assert detail["details"]["position"] == 0

    def test_rejects_lower_case(self) -> None:
        resp = client.get("/numerals/parse/xiv")
        assert resp.status_code == 422
        assert resp.json()["detail"]["details"]["reason"] == "INVALID_CHARACTER"


class TestValidateEndpoint:
    def test_valid_numeral(self) -> None:
        resp = client.post("/validate", json={"symbols": "XLII"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["is_valid"] is True
        assert data["finding"] is None

    def test_invalid_numeral_has_finding(self) -> None:
        data = client.post("/validate", json={"symbols": "IC"}).json()
        assert data["is_valid"] is False
        assert data["finding"]["reason"] == "BAD_PLACEMENT"
        assert data["finding"]["position"] == 0

    def test_empty_string_is_invalid_not_an_error(self) -> None:
        resp = client.post("/validate", json={"symbols": ""})
        assert resp.status_code == 200
        assert resp.json()["finding"]["reason"] == "EMPTY"

    def test_missing_field_returns_422(self) -> None:
        resp = client.post("/validate", json={})
        assert resp.status_code == 422


class TestCalculateEndpoint:
    def test_add(self) -> None:
        resp = client.post(
            "/calculate", json={"operation": "add", "left": "MM", "right": "CMXCIX"}
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["result"] == {"symbols": "MMCMXCIX", "value": 2999}
        assert data["right"]["value"] == 999

    def test_power(self) -> None:
        data = client.post(
            "/calculate", json={"operation": "power", "left": "II", "right": "X"}
        ).json()
        assert data["result"]["symbols"] == "MXXIV"

    def test_increment_ignores_right(self) -> None:
        data = client.post(
            "/calculate", json={"operation": "increment", "left": "XIII"}
        ).json()
        assert data["result"]["symbols"] == "XIV"
        assert data["right"] is None

    def test_overflow_is_422(self) -> None:
        resp = client.post(
            "/calculate",
            json={"operation": "add", "left": "MMMCMXCIX", "right": "I"},
        )
        assert resp.status_code == 422
        detail = resp.json()["detail"]
        assert detail["code"] == "ARITHMETIC_OVERFLOW"
        assert detail["details"]["result"] == 4000

    def test_decrement_below_one_is_422(self) -> None:
        resp = client.post("/calculate", json={"operation": "decrement", "left": "I"})
        assert resp.status_code == 422

    def test_invalid_operand_is_422(self) -> None:
        resp = client.post(
            "/calculate", json={"operation": "add", "left": "VV", "right": "I"}
        )
        assert resp.status_code == 422
        assert resp.json()["detail"]["code"] == "INVALID_FORMAT"

    def test_missing_right_operand_is_422(self) -> None:
        resp = client.post("/calculate", json={"operation": "multiply", "left": "X"})
        assert resp.status_code == 422
        assert "right operand" in resp.json()["detail"]

    def test_unknown_operation_is_422(self) -> None:
        resp = client.post(
            "/calculate", json={"operation": "sqrt", "left": "IV", "right": "I"}
        )
        assert resp.status_code == 422


class TestStateLifecycle:
    def test_uninitialised_state_returns_503(self) -> None:
        saved = api._state
        api._state = None
        try:
            assert client.get("/health").status_code == 503
            assert client.get("/numerals/5").status_code == 503
        finally:
            api._state = saved

    def test_build_state_reads_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ROMAN_NUMERAL_CACHE", "eager")
        state = api.build_state()
        assert state.cache_mode == "eager"
        assert len(state.cache) == 3999

    def test_build_state_cache_off(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ROMAN_NUMERAL_CACHE", "off")
        state = api.build_state()
        assert state.cache is None
        assert state.cache_mode == "off"
