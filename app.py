"""
App assembly entry point.

Re-exports the FastAPI `app` from `content_service.api.main` for ASGI servers
(`uvicorn app:app`).
"""

from content_service.api.main import app  # noqa: F401
