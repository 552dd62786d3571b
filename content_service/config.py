"""Runtime settings sourced from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal, Optional, cast

CatalogVariant = Literal["personalized", "shared"]
ErrorStatusMode = Literal["typed", "legacy"]

VARIANT_PERSONALIZED: CatalogVariant = "personalized"
VARIANT_SHARED: CatalogVariant = "shared"
ALL_VARIANTS = (VARIANT_PERSONALIZED, VARIANT_SHARED)

ERROR_MODES = ("typed", "legacy")

DEFAULT_USER_ID_HEADER = "X-Auth-Request-User-Id"


@dataclass(frozen=True)
class Settings:
    catalog_variant: CatalogVariant = VARIANT_PERSONALIZED
    error_status_mode: ErrorStatusMode = "typed"
    profile_seed: Optional[int] = None
    log_level: str = "INFO"
    user_id_header: str = DEFAULT_USER_ID_HEADER


def _choice(env_var: str, default: str, allowed: tuple[str, ...]) -> str:
    raw = os.getenv(env_var)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value not in allowed:
        raise ValueError(f"{env_var} must be one of {list(allowed)}, got {raw!r}")
    return value


def _optional_int(env_var: str) -> Optional[int]:
    raw = os.getenv(env_var)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{env_var} must be an integer, got {raw!r}") from None


def load_settings() -> Settings:
    """Build a fresh Settings instance from the current environment."""
    return Settings(
        catalog_variant=cast(CatalogVariant, _choice("CATALOG_VARIANT", VARIANT_PERSONALIZED, ALL_VARIANTS)),
        error_status_mode=cast(ErrorStatusMode, _choice("ERROR_STATUS_MODE", "typed", ERROR_MODES)),
        profile_seed=_optional_int("PROFILE_SEED"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        user_id_header=os.getenv("USER_ID_HEADER", DEFAULT_USER_ID_HEADER),
    )


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    """Return the cached settings for this process."""
    return load_settings()


def refresh_settings_cache() -> None:
    """Invalidate cached settings (useful for tests)."""
    get_settings.cache_clear()
