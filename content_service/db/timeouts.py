"""
Statement deadlines bound to a session's current transaction.

PostgreSQL enforces the limit server side through ``SET LOCAL
statement_timeout``; SQLite gets a progress handler that interrupts the
running statement once the deadline has passed. Either way the aborted
statement surfaces as a SQLAlchemy ``OperationalError``.
"""
from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import text
from sqlalchemy.orm import Session

# Number of SQLite VM instructions between deadline checks.
_SQLITE_PROGRESS_STEPS = 1000


@contextmanager
def statement_deadline(db: Session, seconds: float) -> Iterator[None]:
    """Abort any statement issued on ``db`` inside the block after ``seconds``."""
    connection = db.connection()
    dialect = connection.dialect.name

    if dialect == "postgresql":
        # 0 would disable the limit instead of expiring at once
        millis = max(1, int(seconds * 1000))
        connection.execute(text(f"SET LOCAL statement_timeout = {millis}"))
        yield
        return

    if dialect == "sqlite":
        raw = connection.connection.driver_connection
        deadline = time.monotonic() + seconds

        def _expired() -> int:
            return 1 if time.monotonic() >= deadline else 0

        raw.set_progress_handler(_expired, _SQLITE_PROGRESS_STEPS)
        try:
            yield
        finally:
            raw.set_progress_handler(None, _SQLITE_PROGRESS_STEPS)
        return

    # Other dialects run without a server-side limit
    yield
