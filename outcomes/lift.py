"""
Lifting values into Result.

Functions for turning plain values, optionals, standard results and
exception-based code into Success / Failure.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import wraps
from typing import Never, ParamSpec

from kungfu import Error, Ok
from kungfu import Result as StdResult

from ._types import FailureProducer
from .detail import ErrorDetail, error_detail_with, from_exception
from .result import Failure, Result, Success

P = ParamSpec("P")

log = logging.getLogger(__name__)


def pure[T, E](value: T, *, producer: FailureProducer[E] | None = None) -> Result[T, E]:
    """
    Lift pure value into Success.

    **When to use:** Starting a chain from a plain value. Pass `producer` to
    make every following combinator chain safe.

    Example:
        L.pure(41, producer=lambda e: str(e)).safe_map(lambda n: n + 1)  # Success(42)
    """
    return Success(value, producer)


def fail[E](error: E) -> Result[Never, E]:
    """
    Create Failure. Dual of pure().

    Example:
        L.fail(NotFound(42))  # Failure(NotFound(42))
    """
    return Failure(error)


def fail_with(message: str) -> Result[Never, ErrorDetail]:
    """
    Failure holding a single "error" entry.

    **Grammar:** `L.fail_with("boom")` reads as "fail with message"
    """
    return Failure(error_detail_with(message))


def optional[T, E](
    value: T | None,
    *,
    error: Callable[[], E],
) -> Result[T, E]:
    """
    Convert Optional to Result. None becomes Failure(error()).

    **When to use:** Lookups that return None when nothing was found.

    Example:
        L.optional(users.get(42), error=lambda: NotFound(42))

    NOTE: error is a thunk to avoid building the error when value is present.
    """
    if value is None:
        return Failure(error())
    return Success(value)


def from_result[T, E](
    value: StdResult[T, E],
    *,
    producer: FailureProducer[E] | None = None,
) -> Result[T, E]:
    """
    Convert a standard (kungfu) Result: Ok -> Success, Error -> Failure.

    Example:
        L.from_result(Ok(1))  # Success(1)
    """
    match value:
        case Ok(v):
            return Success(v, producer)
        case Error(e):
            return Failure(e)
    raise TypeError(f"Expected Ok or Error, got {type(value).__name__}")


def catching[T, E](
    thunk: Callable[[], T],
    *,
    on_error: FailureProducer[E] = from_exception,  # type: ignore[assignment]
) -> Result[T, E]:
    """
    Execute thunk, catch exceptions and convert to Failure.

    **When to use:** Bridge between exception-based code and Result chains.

    Example:
        import json

        L.catching(lambda: json.loads(raw))
        # Success(dict) or Failure(ErrorDetail([Entry("error", "Expecting value: ...")]))

    NOTE: Catches all Exception subclasses. The returned Success carries
          `on_error`, so the chain stays safe.
    """
    try:
        return Success(thunk(), on_error)
    except Exception as exc:
        log.debug("catching: %s converted into a failure", type(exc).__name__)
        return Failure(on_error(exc))


def catching_result[T, E](
    thunk: Callable[[], Result[T, E]],
    *,
    on_error: FailureProducer[E] = from_exception,  # type: ignore[assignment]
) -> Result[T, E]:
    """
    Execute thunk already returning Result, catch exceptions and convert to Failure.

    Example:
        L.catching_result(lambda: repository.load(42))
    """
    try:
        return thunk()
    except Exception as exc:
        log.debug("catching_result: %s converted into a failure", type(exc).__name__)
        return Failure(on_error(exc))


def lifted[T, E, **P](
    on_error: FailureProducer[E] = from_exception,  # type: ignore[assignment]
) -> Callable[[Callable[P, T]], Callable[P, Result[T, E]]]:
    """
    Decorator for exception-raising functions to return Result instead.

    Example:
        @L.lifted()
        def parse_port(raw: str) -> int:
            return int(raw)

        parse_port("8080")  # Success(8080)
        parse_port("http")  # Failure(ErrorDetail([Entry("error", "invalid literal ...")]))

    **Grammar:** `@L.lifted()` reads as "lifted function"
    """

    def decorator(func: Callable[P, T]) -> Callable[P, Result[T, E]]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, E]:
            return catching(lambda: func(*args, **kwargs), on_error=on_error)

        return wrapper

    return decorator


__all__ = (
    "pure",
    "fail",
    "fail_with",
    "optional",
    "from_result",
    "catching",
    "catching_result",
    "lifted",
)
