"""
Core type definitions for outcomes.

Aliases for the caller-supplied callables that combinators accept.
"""

from __future__ import annotations

from collections.abc import Callable

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Supplier = zero-arg callable producing a value on demand
type Supplier[T] = Callable[[], T]

# Effect = function called for its side effect only, return value discarded
type Effect[T] = Callable[[T], object]

# FailureProducer = converts a caught exception into a failure value
# NOTE: attached to a Success it keeps a chain of combinators "safe".
type FailureProducer[F] = Callable[[Exception | None], F]

__all__ = (
    "Predicate",
    "Supplier",
    "Effect",
    "FailureProducer",
)
