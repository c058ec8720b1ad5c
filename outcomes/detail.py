"""
ErrorDetail - ordered failure annotations
=========================================

Structured failure payload: an ordered sequence of (category, message) pairs.
The first entry is usually the primary "error", later entries annotate it.
"""

from __future__ import annotations

import typing
from collections.abc import Iterable

from ._helpers import message_of
from .constants import ERROR_CATEGORY


class Entry(typing.NamedTuple):
    """Single (category, message) pair."""

    category: str
    message: str


class ErrorDetail(tuple[Entry, ...]):
    """
    Immutable accumulator of failure entries.

    Tuple of `Entry` with monoidal operations:
    - empty: no entries (just ErrorDetail())
    - combine: concatenation, order preserved

    Every operation returns a new ErrorDetail; the receiver is never touched.
    Compares equal to a plain tuple of pairs with the same contents.
    """

    __slots__ = ()

    def __new__(cls, entries: Iterable[tuple[str, str]] = (), /) -> ErrorDetail:
        return super().__new__(cls, (Entry(*entry) for entry in entries))

    @staticmethod
    def of(*entries: tuple[str, str]) -> ErrorDetail:
        """
        Create detail from pairs.

        Example:
            ErrorDetail.of(("error", "boom"), ("info", "while saving"))
        """
        return ErrorDetail(entries)

    @staticmethod
    def with_message(message: str, category: str = ERROR_CATEGORY) -> ErrorDetail:
        """Single-entry detail, tagged "error" unless told otherwise."""
        return ErrorDetail(((category, message),))

    def add(self, category: str, message: str, /) -> ErrorDetail:
        """
        Append single pair.

        Example:
            error_detail_with("first").add("warning", "w")
            # ErrorDetail((Entry("error", "first"), Entry("warning", "w")))
        """
        return ErrorDetail((*self, (category, message)))

    def combine(self, other: Iterable[tuple[str, str]], /) -> ErrorDetail:
        """Concatenate two details: receiver's entries first."""
        return ErrorDetail((*self, *other))

    def messages(self, category: str | None = None) -> list[str]:
        """Messages in order, optionally only those of one category."""
        return [entry.message for entry in self if category is None or entry.category == category]

    def __add__(self, other: Iterable[tuple[str, str]], /) -> ErrorDetail:  # type: ignore[override]
        return self.combine(other)

    def __repr__(self) -> str:
        return f"ErrorDetail({list(self)!r})"


def empty_error_detail() -> ErrorDetail:
    """The empty detail."""
    return ErrorDetail()


def error_detail_with(message: str, category: str = ERROR_CATEGORY) -> ErrorDetail:
    """Single-entry detail tagged "error"."""
    return ErrorDetail.with_message(message, category)


def from_exception(exc: Exception | None) -> ErrorDetail:
    """
    Default failure producer for ErrorDetail failures.

    Used by the safe combinators when no producer was supplied:
    the exception message becomes a single "error" entry.
    """
    return ErrorDetail.with_message(message_of(exc))


__all__ = (
    "Entry",
    "ErrorDetail",
    "empty_error_detail",
    "error_detail_with",
    "from_exception",
)
