import pytest

from content_service.config import get_settings, load_settings, refresh_settings_cache

_ENV_VARS = ("CATALOG_VARIANT", "ERROR_STATUS_MODE", "PROFILE_SEED", "LOG_LEVEL", "USER_ID_HEADER")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Clear env + cached values for each test to avoid cross-contamination."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    refresh_settings_cache()
    yield
    refresh_settings_cache()


def test_defaults():
    settings = load_settings()
    assert settings.catalog_variant == "personalized"
    assert settings.error_status_mode == "typed"
    assert settings.profile_seed is None
    assert settings.log_level == "INFO"
    assert settings.user_id_header == "X-Auth-Request-User-Id"


def test_values_from_environment(monkeypatch):
    monkeypatch.setenv("CATALOG_VARIANT", " Shared ")
    monkeypatch.setenv("ERROR_STATUS_MODE", "legacy")
    monkeypatch.setenv("PROFILE_SEED", "42")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("USER_ID_HEADER", "X-User")

    settings = load_settings()

    assert settings.catalog_variant == "shared"
    assert settings.error_status_mode == "legacy"
    assert settings.profile_seed == 42
    assert settings.log_level == "DEBUG"
    assert settings.user_id_header == "X-User"


@pytest.mark.parametrize(
    "env_name,value",
    [("CATALOG_VARIANT", "per-user"), ("ERROR_STATUS_MODE", "strict"), ("PROFILE_SEED", "abc")],
)
def test_invalid_values_raise(monkeypatch, env_name, value):
    monkeypatch.setenv(env_name, value)
    with pytest.raises(ValueError, match=env_name):
        load_settings()


def test_get_settings_is_cached_until_refresh(monkeypatch):
    first = get_settings()
    monkeypatch.setenv("CATALOG_VARIANT", "shared")
    assert get_settings() is first

    refresh_settings_cache()
    assert get_settings().catalog_variant == "shared"
