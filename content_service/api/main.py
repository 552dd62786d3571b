"""
FastAPI app assembly: logging, middleware, error mapping and router wiring.
"""
import logging
import random
from typing import Optional

from fastapi import FastAPI

from content_service.api.catalog import personalized_router, shared_router
from content_service.api.errors import install_error_handlers
from content_service.api.identity import IdentityHeaderMiddleware
from content_service.api.users import router as users_router
from content_service.config import VARIANT_PERSONALIZED, Settings, get_settings

logger = logging.getLogger(__name__)


def configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(level=level)
    logging.getLogger("content_service").setLevel(level)


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Content Access Service",
        description="Per-user access to curated content catalogs plus account lifecycle.",
        version="1.0.0",
    )
    app.state.settings = settings
    app.state.profile_rng = random.Random(settings.profile_seed)

    app.add_middleware(IdentityHeaderMiddleware, header_name=settings.user_id_header)
    install_error_handlers(app, settings.error_status_mode)

    @app.get("/health", tags=["meta"])
    def health():
        return {"status": "ok", "variant": settings.catalog_variant}

    app.include_router(users_router)
    if settings.catalog_variant == VARIANT_PERSONALIZED:
        app.include_router(personalized_router)
    else:
        app.include_router(shared_router)

    logger.info(
        "app_startup: variant=%s error_status_mode=%s log_level=%s",
        settings.catalog_variant, settings.error_status_mode, settings.log_level,
    )
    return app


app = create_application()
