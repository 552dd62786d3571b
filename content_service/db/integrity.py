"""Helpers for classifying DB-API integrity errors across dialects."""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError

# SQLSTATE for unique_violation
_PG_UNIQUE_VIOLATION = "23505"


def is_unique_violation(exc: IntegrityError) -> bool:
    orig = getattr(exc, "orig", None)
    if orig is None:
        return False
    # psycopg2 exposes pgcode, psycopg 3 exposes sqlstate
    code = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if code is not None:
        return code == _PG_UNIQUE_VIOLATION
    message = str(orig)
    return "UNIQUE constraint failed" in message or "PRIMARY KEY constraint failed" in message
