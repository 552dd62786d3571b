"""
API dependency helpers.

Exposes the per-app settings and profile source, and re-exports the session
and identity dependencies so routers import them from one place.
"""
import random

from fastapi import Request

from content_service.api.identity import Identity, get_current_identity
from content_service.config import Settings, get_settings
from content_service.db.database import get_db
from content_service.utils.profiles import get_profile_rng

__all__ = ["Identity", "get_current_identity", "get_db", "get_app_settings", "get_profile_source"]


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was built with, falling back to the process defaults."""
    settings = getattr(request.app.state, "settings", None)
    if isinstance(settings, Settings):
        return settings
    return get_settings()


def get_profile_source(request: Request) -> random.Random:
    """Random source for profile presets, created once per app."""
    source = getattr(request.app.state, "profile_rng", None)
    if isinstance(source, random.Random):
        return source
    return get_profile_rng()
