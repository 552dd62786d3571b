"""
Domain error kinds raised by the storage layer.

Three semantic kinds reach callers: not-found, already-exists and internal
(everything else). Only the repositories translate database errors into
these classes.
"""
from __future__ import annotations

from typing import Optional


class StorageError(Exception):
    """Internal storage failure (connection loss, bad statement, interrupted query)."""

    kind = "internal"

    def __init__(self, op: str, message: Optional[str] = None):
        self.op = op
        self.message = message or self.default_message()
        super().__init__(f"{op}: {self.message}")

    def default_message(self) -> str:
        return "storage failure"


class NotFoundError(StorageError):
    kind = "not_found"

    def default_message(self) -> str:
        return "not found"


class AlreadyExistsError(StorageError):
    kind = "already_exists"

    def default_message(self) -> str:
        return "already exists"


class UserNotFoundError(NotFoundError):
    def default_message(self) -> str:
        return "user not found"


class UserExistsError(AlreadyExistsError):
    def default_message(self) -> str:
        return "user already exists"


class AppNotFoundError(NotFoundError):
    def default_message(self) -> str:
        return "app not found"


class IdentityMissingError(Exception):
    """A handler that needs an identity ran without one being resolved."""
