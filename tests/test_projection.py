"""Unit tests for FailureProjection."""

from __future__ import annotations

import pytest
from kungfu import Error, Ok

from outcomes import (
    ErrorDetail,
    Failure,
    FailureError,
    FailureProjection,
    Success,
    empty_error_detail,
    error_detail_with,
)


class TestFailureSide:
    """Combinators operate on the error of a Failure."""

    @pytest.mark.unit
    def test_projection_wraps_result(self):
        failure = Failure.with_message("boo")

        assert failure.projection() == FailureProjection(failure)
        assert failure.projection().result is failure

    @pytest.mark.unit
    def test_foreach_runs_on_failure_only(self):
        seen: list[object] = []
        Failure("boo").projection().foreach(seen.append)
        Success("yay").projection().foreach(seen.append)

        assert seen == ["boo"]

    @pytest.mark.unit
    def test_get_or_else(self):
        assert Failure.with_message("boo").projection().get_or_else(empty_error_detail) == error_detail_with("boo")
        assert Success("yay").projection().get_or_else(lambda: "fallback") == "fallback"

    @pytest.mark.unit
    def test_or_else(self):
        failure = Failure("boo")

        assert failure.projection().or_else(lambda: Failure("other")) is failure
        assert Success("yay").projection().or_else(lambda: Failure("other")) == Failure("other")

    @pytest.mark.unit
    def test_contains_forall_exists(self):
        failure = Failure("boo")
        success = Success("boo")

        assert failure.projection().contains("boo")
        assert not success.projection().contains("boo")
        assert failure.projection().forall(lambda e: e == "boo")
        assert success.projection().forall(lambda e: False)
        assert failure.projection().exists(lambda e: e.startswith("b"))
        assert not success.projection().exists(lambda e: True)

    @pytest.mark.unit
    def test_contains_deep(self):
        failure = Failure.with_message("first").add("warning", "careful")

        assert failure.projection().contains_deep(("warning", "careful"))
        assert not failure.projection().contains_deep(("info", "careful"))
        assert not Success(1).projection().contains_deep(("error", "first"))


class TestTransforms:
    """map / flat_map on the failure side."""

    @pytest.mark.unit
    def test_map_transforms_error(self):
        assert Failure("boo").projection().map(str.upper) == Failure("BOO")
        assert Success(3).projection().map(str.upper) == Success(3)

    @pytest.mark.unit
    def test_flat_map_converts_failure_type(self):
        converted = Failure(KeyError("BOO")).projection().flat_map(
            lambda e: Failure.with_message(e.args[0])
        )

        assert converted == Failure.with_message("BOO")

    @pytest.mark.unit
    def test_flat_map_can_recover(self):
        assert Failure("boo").projection().flat_map(lambda e: Success(len(e))) == Success(3)

    @pytest.mark.unit
    def test_success_passes_through_without_producer(self):
        result = Success(3, producer=lambda e: "x").projection().map(str.upper)

        assert result == Success(3)
        assert result.producer is None


class TestConversions:
    """to_optional / to_standard_result mirrored."""

    @pytest.mark.unit
    def test_to_optional(self):
        assert Failure("boo").projection().to_optional() == "boo"
        assert Success(3).projection().to_optional() is None

    @pytest.mark.unit
    def test_to_standard_result(self):
        match Failure(ErrorDetail.of(("error", "boo"))).projection().to_standard_result():
            case Ok(detail):
                assert detail == (("error", "boo"),)
            case _:
                pytest.fail("expected Ok")

        match Success(3).projection().to_standard_result():
            case Error(exc):
                assert isinstance(exc, FailureError)
                assert str(exc) == "3"
            case _:
                pytest.fail("expected Error")
