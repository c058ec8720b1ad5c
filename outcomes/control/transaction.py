"""
Transaction combinator
======================

Commit / rollback sequencing around a bounded operation, for handles whose
transaction boundaries the caller may own.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from .._helpers import message_of
from .._types import Predicate
from ..constants import NO_MESSAGE
from ..detail import ErrorDetail, error_detail_with
from ..result import Failure, StringResult, Success

log = logging.getLogger(__name__)


def _stage(result: StringResult[object] | None) -> str:
    if result is None:
        return "run"
    return "commit" if result.is_success() else "rollback"


def _recovered_detail(exc: Exception, result: StringResult[object] | None) -> ErrorDetail:
    # exception message first, then whatever the bounded operation reported
    detail = error_detail_with(message_of(exc, NO_MESSAGE))
    match result:
        case Failure(error):
            return detail.combine(error)
        case _:
            return detail


def transaction[S, S1](
    handle_result: StringResult[S],
    *,
    is_transactional: Predicate[S],
    bounded: Callable[[], StringResult[S1]],
    commit: Callable[[S], StringResult[bool]],
    rollback: Callable[[S], StringResult[bool]],
) -> StringResult[S1]:
    """
    Run `bounded` against a transaction handle: commit on success, rollback on failure.

    - Failed `handle_result`: returned as a new Failure, nothing runs.
    - `is_transactional(handle)` False: the bounded result is returned as is,
      the caller does not own the transaction.
    - Otherwise commit (Success) or rollback (Failure); the bounded result is
      returned unless commit / rollback failed, in which case their Failure is.

    Any exception from `bounded`, `is_transactional`, `commit` or `rollback`
    triggers a recovery rollback. The returned Failure lists the exception
    message first, followed by the bounded operation's own entries. If the
    recovery rollback raises too, a single entry describes both.

    Example:
        transaction(
            L.pure(connection),
            is_transactional=lambda c: not c.autocommit,
            bounded=lambda: insert_rows(connection, rows),
            commit=lambda c: L.catching(c.commit),
            rollback=lambda c: L.catching(c.rollback),
        )
    """
    match handle_result:
        case Failure(error):
            return Failure(error)
        case Success(handle):
            pass

    result: StringResult[S1] | None = None
    try:
        result = bounded()
        if not is_transactional(handle):
            return result
        outcome = result
        if outcome.is_success():
            log.debug("Committing transaction for %r", handle)
            return commit(handle).flat_map(lambda _: outcome)
        log.debug("Rolling back transaction for %r", handle)
        return rollback(handle).flat_map(lambda _: outcome)
    except Exception as exc:
        stage = _stage(result)
        log.warning(
            "Exception thrown when attempting to %s the transaction, rolling back: %s",
            stage,
            exc,
        )
        try:
            return rollback(handle).flat_map(lambda _: Failure(_recovered_detail(exc, result)))
        except Exception as again:
            log.error("Recovery rollback failed after %s: %s", stage, again)
            return Failure(
                error_detail_with(
                    f"Exception thrown when attempting to {stage} the transaction, "
                    f"and then again on the final rollback: {message_of(again, NO_MESSAGE)}"
                )
            )


__all__ = ("transaction",)
