import os

# Make content_service.db.database fall back to in-memory SQLite on import
os.environ.setdefault("PYTEST_RUNNING", "1")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from content_service.api.main import create_application
from content_service.config import Settings, refresh_settings_cache
from content_service.db import models
from content_service.db.database import get_db
from content_service.db.engine import build_engine
from content_service.utils.profiles import get_profile_rng
from tests.catalog_data import CATALOG_ROWS

USER_ID_HEADER = "X-Auth-Request-User-Id"


@pytest.fixture(autouse=True)
def _reset_cached_config():
    refresh_settings_cache()
    get_profile_rng.cache_clear()
    yield
    refresh_settings_cache()
    get_profile_rng.cache_clear()


@pytest.fixture
def engine(tmp_path):
    eng = build_engine(f"sqlite:///{tmp_path / 'content.db'}")
    models.Base.metadata.create_all(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture
def SessionTest(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture
def db_session(SessionTest):
    session = SessionTest()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def catalog(SessionTest):
    """Populate every catalog table; returns {model: [ids]}."""
    ids = {}
    with SessionTest() as session:
        for model, rows in CATALOG_ROWS.items():
            items = [model(**row) for row in rows]
            session.add_all(items)
            session.flush()
            ids[model] = [item.id for item in items]
        session.commit()
    return ids


@pytest.fixture
def count_rows(SessionTest):
    """Count rows in a fresh session so no transaction is left open."""

    def _count(model, **filters):
        with SessionTest() as session:
            q = session.query(model)
            for attr, value in filters.items():
                q = q.filter(getattr(model, attr) == value)
            return q.count()

    return _count


@pytest.fixture
def make_client(SessionTest):
    def _make(**overrides):
        app = create_application(Settings(**overrides))

        def _override_get_db():
            db = SessionTest()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = _override_get_db
        return TestClient(app)

    return _make


@pytest.fixture
def as_user():
    def _headers(user_id):
        return {USER_ID_HEADER: str(user_id)}

    return _headers
