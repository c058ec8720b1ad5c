"""Pytest configuration and fixtures.

Provides a transaction handle test double for the transaction combinator.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from outcomes import Failure, StringResult, Success

# =============================================================================
# Test Doubles
# =============================================================================


@dataclass
class FakeConnection:
    """Transaction handle test double.

    Records commit / rollback calls and can be told to fail or raise on
    either of them.
    """

    transactional: bool = True
    commit_fails: bool = False
    commit_raises: bool = False
    rollback_fails: bool = False
    rollback_raises: bool = False
    calls: list[str] = field(default_factory=list)

    def commit(self, _: FakeConnection) -> StringResult[bool]:
        self.calls.append("commit")
        if self.commit_raises:
            raise RuntimeError("commit exploded")
        if self.commit_fails:
            return Failure.with_message("commit refused")
        return Success(True)

    def rollback(self, _: FakeConnection) -> StringResult[bool]:
        self.calls.append("rollback")
        if self.rollback_raises:
            raise RuntimeError("rollback exploded")
        if self.rollback_fails:
            return Failure.with_message("rollback refused")
        return Success(True)

    def is_transactional(self, _: FakeConnection) -> bool:
        return self.transactional


@pytest.fixture
def connection() -> FakeConnection:
    return FakeConnection()
