"""
FailureProjection
=================

Failure-biased view over a Result: the same combinators as Result, applied to
the error, while a Success passes through untouched.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from kungfu import Error, Ok
from kungfu import Result as StdResult

from ._errors import FailureError
from ._types import Effect, Predicate, Supplier
from .result import Failure, Result, Success


@dataclass(frozen=True, slots=True)
class FailureProjection[S, F]:
    """
    Projection of `result` onto its failure side.

    Example:
        Failure.with_message("boo").projection().get_or_else(empty_error_detail)
        # ErrorDetail([Entry("error", "boo")])
    """

    result: Result[S, F]

    def foreach(self, effect: Effect[F], /) -> None:
        """Run `effect` on the error. Unsafe."""
        match self.result:
            case Failure(error):
                effect(error)
            case Success():
                pass

    def get_or_else(self, default: Supplier[F], /) -> F:
        match self.result:
            case Failure(error):
                return error
            case Success():
                return default()

    def or_else(self, alternative: Supplier[Result[S, F]], /) -> Result[S, F]:
        match self.result:
            case Failure() as failure:
                return failure
            case Success():
                return alternative()

    def contains(self, elem: F, /) -> bool:
        match self.result:
            case Failure(error):
                return error == elem
            case Success():
                return False

    def contains_deep(self, entry: tuple[str, str], /) -> bool:
        """True when the error is a sequence of pairs holding `entry`."""
        match self.result:
            case Failure(error):
                return entry in error  # type: ignore[operator]
            case Success():
                return False

    def forall(self, predicate: Predicate[F], /) -> bool:
        match self.result:
            case Failure(error):
                return predicate(error)
            case Success():
                return True

    def exists(self, predicate: Predicate[F], /) -> bool:
        match self.result:
            case Failure(error):
                return predicate(error)
            case Success():
                return False

    def flat_map[F1](self, fn: Callable[[F], Result[S, F1]], /) -> Result[S, F1]:
        """
        Feed the error to `fn`. Unsafe.

        A Success is rebuilt without its producer: the failure type changes.
        """
        match self.result:
            case Failure(error):
                return fn(error)
            case Success(value):
                return Success(value)

    def map[F1](self, fn: Callable[[F], F1], /) -> Result[S, F1]:
        """Transform the error. Unsafe."""
        match self.result:
            case Failure(error):
                return Failure(fn(error))
            case Success(value):
                return Success(value)

    def to_optional(self) -> F | None:
        match self.result:
            case Failure(error):
                return error
            case Success():
                return None

    def to_standard_result(self) -> StdResult[F, FailureError]:
        match self.result:
            case Failure(error):
                return Ok(error)
            case Success(value):
                return Error(FailureError(value))


__all__ = ("FailureProjection",)
