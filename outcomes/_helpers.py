"""Internal helpers for outcomes.

Common functions used across multiple modules.
These are not part of the public API."""

from __future__ import annotations


def message_of(exc: BaseException | None, default: str = "") -> str:
    """
    Message carried by an exception.

    Falls back to `default` when there is no exception or it was raised
    without arguments.
    """
    if exc is None:
        return default
    message = str(exc)
    return message if message else default


__all__ = (
    "message_of",
)
