"""
Result - success-biased outcome
===============================

Closed union of two variants:
- Success(value): the operation produced a value
- Failure(error): the operation failed with an error descriptor

Combinators operate on the success side and pass a failure through unchanged.
For the failure side use `projection()`.

Every combinator exists in two modes:
- unsafe (`map`, `fold`, ...): exceptions from the supplied function propagate
- safe (`safe_map`, `safe_fold`, ...): exceptions become a Failure via a
  failure producer

A Success may carry a failure producer. Combinators that keep the failure type
pass it along, so a chain started with a producer stays safe without
repeating it. `swap()` changes the failure type and drops it.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable
from dataclasses import dataclass, field

from kungfu import Error, Ok
from kungfu import Result as StdResult

from ._errors import FailureError, NotAResultError
from ._types import Effect, FailureProducer, Predicate, Supplier
from .detail import ErrorDetail, error_detail_with, from_exception

if typing.TYPE_CHECKING:
    from .projection import FailureProjection

log = logging.getLogger(__name__)


# ============================================================================
# Exception boundary
# ============================================================================


def _guard[S, F](
    thunk: Callable[[], Result[S, F]],
    producer: FailureProducer[F],
) -> Result[S, F]:
    try:
        return thunk()
    except Exception as exc:
        log.debug("Converted %s into a failure: %s", type(exc).__name__, exc)
        return Failure(producer(exc))


def _rechain[S, F](result: Result[S, F], producer: FailureProducer[F]) -> Result[S, F]:
    match result:
        case Success(value, None):
            return Success(value, producer)
        case _:
            return result


# ============================================================================
# Variants
# ============================================================================


@dataclass(frozen=True, slots=True)
class Success[S, F]:
    """
    Successful outcome holding `value`.

    `producer` is excluded from equality, hashing and repr:
    Success(1, producer=p) == Success(1).
    """

    value: S
    producer: FailureProducer[F] | None = field(default=None, compare=False, repr=False)

    def _resolve(self, producer: FailureProducer[F] | None) -> FailureProducer[F] | None:
        return producer if producer is not None else self.producer

    def _resolve_or_default(self, producer: FailureProducer[F] | None) -> FailureProducer[F]:
        resolved = self._resolve(producer)
        if resolved is None:
            return typing.cast("FailureProducer[F]", from_exception)
        return resolved

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def fold[C](self, on_success: Callable[[S], C], on_failure: Callable[[F], C], /) -> C:
        """
        Apply `on_success` to the value and return its result.

        Unsafe: an exception raised by `on_success` propagates.

        Example:
            Success("yay!").fold(str.upper, lambda e: "boo")  # "YAY!"
        """
        return on_success(self.value)

    def safe_fold[C](
        self,
        on_success: Callable[[S], C],
        on_failure: Callable[[F], C],
        /,
        producer: FailureProducer[F] | None = None,
    ) -> Result[C, F]:
        """
        Fold inside an exception boundary.

        Uses `producer`, else the attached producer. With neither there is no
        boundary: the folded value is wrapped in a Success and exceptions
        propagate.
        """
        resolved = self._resolve(producer)
        if resolved is None:
            return Success(self.fold(on_success, on_failure))
        return _guard(lambda: Success(self.fold(on_success, on_failure), resolved), resolved)

    def swap(self, producer: FailureProducer[S] | None = None) -> Result[F, S]:
        """Success(v) -> Failure(v). The attached producer is dropped."""
        return Failure(self.value)

    def foreach(self, effect: Effect[S], /) -> None:
        """Run `effect` on the value. Unsafe."""
        effect(self.value)

    def safe_foreach(
        self,
        effect: Effect[S],
        /,
        producer: FailureProducer[F] | None = None,
    ) -> Result[None, F]:
        """Run `effect` on the value; Success(None), or a Failure if it raised."""
        resolved = self._resolve_or_default(producer)

        def run() -> Result[None, F]:
            effect(self.value)
            return Success(None, resolved)

        return _guard(run, resolved)

    def get_or_else(self, default: Supplier[S], /) -> S:
        return self.value

    def or_else(self, alternative: Supplier[Result[S, F]], /) -> Result[S, F]:
        return self

    def contains(self, elem: S, /) -> bool:
        return self.value == elem

    def forall(self, predicate: Predicate[S], /) -> bool:
        return predicate(self.value)

    def safe_forall(
        self,
        predicate: Predicate[S],
        /,
        producer: FailureProducer[F] | None = None,
    ) -> Result[bool, F]:
        resolved = self._resolve_or_default(producer)
        return _guard(lambda: Success(predicate(self.value), resolved), resolved)

    def exists(self, predicate: Predicate[S], /) -> bool:
        return predicate(self.value)

    def safe_exists(
        self,
        predicate: Predicate[S],
        /,
        producer: FailureProducer[F] | None = None,
    ) -> Result[bool, F]:
        resolved = self._resolve_or_default(producer)
        return _guard(lambda: Success(predicate(self.value), resolved), resolved)

    def flat_map[S1](self, fn: Callable[[S], Result[S1, F]], /) -> Result[S1, F]:
        """
        Monadic bind: return `fn(value)` as is. Unsafe.

        Example:
            Success(2).flat_map(lambda n: Success(n * 2) if n < 3 else Failure.with_message("big"))
        """
        return fn(self.value)

    def safe_flat_map[S1](
        self,
        fn: Callable[[S], Result[S1, F]],
        /,
        producer: FailureProducer[F] | None = None,
    ) -> Result[S1, F]:
        """
        Bind inside an exception boundary.

        A Success returned by `fn` without a producer gets the resolved one,
        keeping the chain safe.
        """
        resolved = self._resolve_or_default(producer)
        return _guard(lambda: _rechain(fn(self.value), resolved), resolved)

    def flatten[S1](self: Success[Result[S1, F], F]) -> Result[S1, F]:
        """
        Success(Success(x)) -> Success(x).

        Raises NotAResultError when the value is not a Result.
        """
        match self.value:
            case Success() | Failure() as inner:
                return inner
            case other:
                raise NotAResultError(other)

    def map[S1](self, fn: Callable[[S], S1], /) -> Result[S1, F]:
        """
        Transform the value, keeping the attached producer. Unsafe.

        Example:
            Success("yay!").map(str.upper).get_or_else(lambda: "boo")  # "YAY!"
        """
        return Success(fn(self.value), self.producer)

    def safe_map[S1](
        self,
        fn: Callable[[S], S1],
        /,
        producer: FailureProducer[F] | None = None,
    ) -> Result[S1, F]:
        """
        Transform the value inside an exception boundary.

        Without any producer an exception becomes an ErrorDetail failure
        holding its message.
        """
        resolved = self._resolve_or_default(producer)
        return _guard(lambda: Success(fn(self.value), resolved), resolved)

    def to_optional(self) -> S | None:
        return self.value

    def to_standard_result(self) -> StdResult[S, FailureError]:
        return Ok(self.value)

    def projection(self) -> FailureProjection[S, F]:
        from .projection import FailureProjection

        return FailureProjection(self)


@dataclass(frozen=True, slots=True)
class Failure[S, F]:
    """
    Failed outcome holding `error`.

    Never carries a producer: the error is already resolved.
    """

    error: F

    @staticmethod
    def with_message[T](message: str) -> Failure[T, ErrorDetail]:
        """
        Sugar for Failure(error_detail_with(message)).

        Example:
            Failure.with_message("BOO").error  # ErrorDetail([Entry("error", "BOO")])
        """
        return Failure(error_detail_with(message))

    def add(self: Failure[S, ErrorDetail], category: str, message: str, /) -> Failure[S, ErrorDetail]:
        """
        New Failure with the pair appended to its ErrorDetail.

        Example:
            Failure.with_message("first").add("warning", "w").add("info", "i")
        """
        detail = self.error if isinstance(self.error, ErrorDetail) else ErrorDetail(self.error)
        return Failure(detail.add(category, message))

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def fold[C](self, on_success: Callable[[S], C], on_failure: Callable[[F], C], /) -> C:
        """Apply `on_failure` to the error and return its result. Unsafe."""
        return on_failure(self.error)

    def safe_fold[C](
        self,
        on_success: Callable[[S], C],
        on_failure: Callable[[F], C],
        /,
        producer: FailureProducer[F] | None = None,
    ) -> Result[C, F]:
        """Fold inside an exception boundary when `producer` is given."""
        if producer is None:
            return Success(self.fold(on_success, on_failure))
        return _guard(lambda: Success(self.fold(on_success, on_failure), producer), producer)

    def swap(self, producer: FailureProducer[S] | None = None) -> Result[F, S]:
        """Failure(e) -> Success(e), carrying `producer` if supplied."""
        return Success(self.error, producer)

    def foreach(self, effect: Effect[S], /) -> None:
        return None

    def safe_foreach(
        self,
        effect: Effect[S],
        /,
        producer: FailureProducer[F] | None = None,
    ) -> Result[None, F]:
        return Success(None)

    def get_or_else(self, default: Supplier[S], /) -> S:
        return default()

    def or_else(self, alternative: Supplier[Result[S, F]], /) -> Result[S, F]:
        return alternative()

    def contains(self, elem: S, /) -> bool:
        return False

    def forall(self, predicate: Predicate[S], /) -> bool:
        return True

    def safe_forall(
        self,
        predicate: Predicate[S],
        /,
        producer: FailureProducer[F] | None = None,
    ) -> Result[bool, F]:
        return Success(True)

    def exists(self, predicate: Predicate[S], /) -> bool:
        return False

    def safe_exists(
        self,
        predicate: Predicate[S],
        /,
        producer: FailureProducer[F] | None = None,
    ) -> Result[bool, F]:
        return Success(False)

    def flat_map[S1](self, fn: Callable[[S], Result[S1, F]], /) -> Result[S1, F]:
        return Failure(self.error)

    def safe_flat_map[S1](
        self,
        fn: Callable[[S], Result[S1, F]],
        /,
        producer: FailureProducer[F] | None = None,
    ) -> Result[S1, F]:
        return Failure(self.error)

    def flatten[S1](self) -> Result[S1, F]:
        """Passes through; the error is not inspected."""
        return Failure(self.error)

    def map[S1](self, fn: Callable[[S], S1], /) -> Result[S1, F]:
        return Failure(self.error)

    def safe_map[S1](
        self,
        fn: Callable[[S], S1],
        /,
        producer: FailureProducer[F] | None = None,
    ) -> Result[S1, F]:
        return Failure(self.error)

    def to_optional(self) -> S | None:
        return None

    def to_standard_result(self) -> StdResult[S, FailureError]:
        return Error(FailureError(self.error))

    def projection(self) -> FailureProjection[S, F]:
        from .projection import FailureProjection

        return FailureProjection(self)


# ============================================================================
# Type aliases
# ============================================================================

type Result[S, F] = Success[S, F] | Failure[S, F]

# StringResult = Result whose failures carry ErrorDetail
type StringResult[S] = Result[S, ErrorDetail]

__all__ = (
    "Failure",
    "Result",
    "StringResult",
    "Success",
)
