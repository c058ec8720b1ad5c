from __future__ import annotations

import typing


class NotAResultError(TypeError):
    """flatten() was called on a Success that does not hold a Result."""

    value: typing.Any

    def __init__(self, value: typing.Any) -> None:
        self.value = value
        super().__init__(f"Cannot flatten a Success holding {type(value).__name__}: {value!r}")


class FailureError(Exception):
    """Synthetic exception carrying a failure value into a standard Result."""

    error: typing.Any

    def __init__(self, error: typing.Any) -> None:
        self.error = error
        super().__init__(str(error))


__all__ = ("FailureError", "NotAResultError")
