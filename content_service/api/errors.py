"""
Mapping of domain error kinds to HTTP responses.

Two presets exist: ``typed`` keeps the distinction between not-found,
conflict and internal failures; ``legacy`` collapses every kind into 500
for clients written against the old behaviour.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Dict, Iterator, Mapping

from fastapi import FastAPI, status
from starlette.requests import Request
from starlette.responses import PlainTextResponse

from content_service.errors import (
    AlreadyExistsError,
    IdentityMissingError,
    NotFoundError,
    StorageError,
)

logger = logging.getLogger("content_service.api")

ERROR_STATUS_MAPS: Dict[str, Mapping[str, int]] = {
    "typed": {
        NotFoundError.kind: status.HTTP_404_NOT_FOUND,
        AlreadyExistsError.kind: status.HTTP_409_CONFLICT,
        StorageError.kind: status.HTTP_500_INTERNAL_SERVER_ERROR,
    },
    "legacy": {
        NotFoundError.kind: status.HTTP_500_INTERNAL_SERVER_ERROR,
        AlreadyExistsError.kind: status.HTTP_500_INTERNAL_SERVER_ERROR,
        StorageError.kind: status.HTTP_500_INTERNAL_SERVER_ERROR,
    },
}


class HandlerError(Exception):
    """A storage error tagged with the handler that observed it."""

    def __init__(self, op: str, error: StorageError):
        self.op = op
        self.error = error
        super().__init__(f"{op}: {error}")


def status_for(error: StorageError, mode: str) -> int:
    mapping = ERROR_STATUS_MAPS[mode]
    return mapping.get(error.kind, status.HTTP_500_INTERNAL_SERVER_ERROR)


def install_error_handlers(app: FastAPI, mode: str) -> None:
    if mode not in ERROR_STATUS_MAPS:
        raise ValueError(f"unknown error status mode: {mode}")

    @app.exception_handler(HandlerError)
    async def _handler_error(request: Request, exc: HandlerError):
        code = status_for(exc.error, mode)
        if code >= 500:
            logger.error("%s %s -> %s: %s", request.method, request.url.path, code, exc)
        else:
            logger.info("%s %s -> %s: %s", request.method, request.url.path, code, exc)
        return PlainTextResponse(str(exc), status_code=code)

    @app.exception_handler(IdentityMissingError)
    async def _identity_missing(request: Request, exc: IdentityMissingError):
        logger.error("%s %s invoked without identity", request.method, request.url.path)
        return PlainTextResponse(str(exc), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


@contextmanager
def handler_op(op: str) -> Iterator[None]:
    """Tag storage errors raised inside the block with the handler name."""
    try:
        yield
    except StorageError as e:
        raise HandlerError(op, e) from e
