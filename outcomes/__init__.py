"""
Success-biased Result type for composing fallible operations.

Success / Failure with a combinator algebra (fold, map, flat_map, flatten,
swap, projection), safe variants that turn exceptions into failures, and a
transaction combinator for commit / rollback sequencing.

Architecture:
- Unsafe combinators (no prefix) let exceptions propagate
- Safe combinators (safe_* prefix) convert exceptions via a failure producer
- projection() flips the bias onto the failure side
"""

import logging

# Core types
from ._types import Effect, FailureProducer, Predicate, Supplier

# Result
from .result import Failure, Result, StringResult, Success
from .projection import FailureProjection

# Error detail
from .detail import (
    Entry,
    ErrorDetail,
    empty_error_detail,
    error_detail_with,
    from_exception,
)

# Lift helpers
from . import lift
from .lift import (
    catching,
    catching_result,
    fail,
    fail_with,
    from_result,
    lifted,
    optional,
    pure,
)

# Control flow
from .control import transaction

# Errors
from ._errors import FailureError, NotAResultError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = (
    # Types
    "Effect",
    "FailureProducer",
    "Predicate",
    "Supplier",
    # Result
    "Failure",
    "FailureProjection",
    "Result",
    "StringResult",
    "Success",
    # Error detail
    "Entry",
    "ErrorDetail",
    "empty_error_detail",
    "error_detail_with",
    "from_exception",
    # Lift module (namespace import)
    "lift",
    # Lift functions (direct import)
    "catching",
    "catching_result",
    "fail",
    "fail_with",
    "from_result",
    "lifted",
    "optional",
    "pure",
    # Control
    "transaction",
    # Errors
    "FailureError",
    "NotAResultError",
)
