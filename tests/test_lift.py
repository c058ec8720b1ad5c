"""Unit tests for lift helpers."""

from __future__ import annotations

import json

import pytest
from kungfu import Error, Ok

from outcomes import Failure, Success, error_detail_with
from outcomes import lift as L


class TestUp:
    """Lifting plain values."""

    @pytest.mark.unit
    def test_pure_attaches_producer(self):
        result = L.pure(41, producer=lambda e: "caught")

        assert result == Success(41)
        assert result.safe_map(lambda n: n // 0) == Failure("caught")

    @pytest.mark.unit
    def test_fail(self):
        assert L.fail("boo") == Failure("boo")
        assert L.fail_with("boo") == Failure.with_message("boo")

    @pytest.mark.unit
    def test_optional(self):
        assert L.optional(3, error=lambda: "missing") == Success(3)
        assert L.optional(None, error=lambda: "missing") == Failure("missing")

    @pytest.mark.unit
    def test_from_result(self):
        assert L.from_result(Ok(1)) == Success(1)
        assert L.from_result(Error("boo")) == Failure("boo")

    @pytest.mark.unit
    def test_round_trip_through_standard_result(self):
        assert L.from_result(Success(1).to_standard_result()) == Success(1)


class TestCatching:
    """Bridging exception-based code."""

    @pytest.mark.unit
    def test_catching_success_keeps_chain_safe(self):
        result = L.catching(lambda: json.loads('{"a": 1}'))

        assert result == Success({"a": 1})
        assert result.safe_map(lambda d: d["missing"]) == Failure(error_detail_with("'missing'"))

    @pytest.mark.unit
    def test_catching_failure(self):
        result = L.catching(lambda: int("http"), on_error=lambda e: type(e).__name__)

        assert result == Failure("ValueError")

    @pytest.mark.unit
    def test_catching_result(self):
        assert L.catching_result(lambda: Success(1)) == Success(1)
        assert L.catching_result(lambda: 1 // 0) == Failure(error_detail_with("integer division or modulo by zero"))

    @pytest.mark.unit
    def test_lifted(self):
        @L.lifted()
        def parse_port(raw: str) -> int:
            return int(raw)

        assert parse_port("8080") == Success(8080)
        assert parse_port("http").is_failure()
        assert parse_port.__name__ == "parse_port"

    @pytest.mark.unit
    def test_base_exceptions_propagate(self):
        def interrupt() -> int:
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            L.catching(interrupt)
