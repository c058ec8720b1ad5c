from __future__ import annotations

from dataclasses import dataclass, field

from outcomes import Failure, StringResult, Success, lift as L, transaction


@dataclass
class FakeSession:
    """Simulates a database session owning its transaction boundaries."""

    autocommit: bool = False
    rows: list[str] = field(default_factory=list)
    staged: list[str] = field(default_factory=list)

    def commit(self) -> bool:
        self.rows.extend(self.staged)
        self.staged.clear()
        return True

    def rollback(self) -> bool:
        self.staged.clear()
        return True


def insert(session: FakeSession, names: list[str]) -> StringResult[int]:
    for name in names:
        if not name:
            return Failure.with_message("empty name").add("info", f"after {len(session.staged)} rows")
        session.staged.append(name)
    return Success(len(names))


def run(session: FakeSession, names: list[str]) -> StringResult[int]:
    return transaction(
        L.pure(session),
        is_transactional=lambda s: not s.autocommit,
        bounded=lambda: insert(session, names),
        commit=lambda s: L.catching(s.commit),
        rollback=lambda s: L.catching(s.rollback),
    )


def main() -> None:
    print("02_transaction: commit on success, rollback on failure")

    session = FakeSession()
    print(run(session, ["ada", "grace"]), session.rows)
    print(run(session, ["linus", ""]), session.rows)


if __name__ == "__main__":
    main()
