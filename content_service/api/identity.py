"""
Request-scoped caller identity.

An upstream verifier authenticates the caller and forwards the numeric user
id in a trusted header. The middleware turns that header into a typed
`Identity` on ``request.state``; handlers read it back through
`get_current_identity`. A handler that runs without an identity is a wiring
defect, reported as a server error rather than a client error.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from content_service.config import DEFAULT_USER_ID_HEADER
from content_service.errors import IdentityMissingError

logger = logging.getLogger("content_service.identity")

_INT64_MAX = 2**63 - 1


@dataclass(frozen=True)
class Identity:
    user_id: int

    def __post_init__(self):
        if isinstance(self.user_id, bool) or not isinstance(self.user_id, int):
            raise TypeError(f"user_id must be int, got {type(self.user_id).__name__}")
        if not 0 < self.user_id <= _INT64_MAX:
            raise ValueError(f"user_id out of range: {self.user_id}")


def parse_user_id_header(value: Optional[str]) -> Optional[Identity]:
    if value is None:
        return None
    try:
        return Identity(int(value.strip()))
    except (TypeError, ValueError):
        return None


class IdentityHeaderMiddleware(BaseHTTPMiddleware):
    """Trust the upstream verifier's user id header and attach an Identity."""

    def __init__(self, app, header_name: str = DEFAULT_USER_ID_HEADER):
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(self, request: Request, call_next):
        raw = request.headers.get(self.header_name)
        identity = parse_user_id_header(raw)
        if raw is not None and identity is None:
            logger.warning("ignoring malformed %s header", self.header_name)
        if identity is not None:
            request.state.identity = identity
        return await call_next(request)


def get_current_identity(request: Request) -> Identity:
    identity = getattr(request.state, "identity", None)
    if not isinstance(identity, Identity):
        raise IdentityMissingError("UID not found in context")
    return identity
