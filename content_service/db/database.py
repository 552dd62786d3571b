"""
Database engine and session management.

Builds the SQLAlchemy engine from environment configuration with an
in-memory SQLite fallback under pytest and exposes the FastAPI session
dependency.
"""
import os
import sys

from sqlalchemy.orm import sessionmaker

from content_service.db import models
from content_service.db.engine import build_engine


def _is_pytest_runtime() -> bool:
    """Best-effort detection that we're executing under pytest."""
    if os.getenv("PYTEST_RUNNING") == "1":
        return True
    if "PYTEST_CURRENT_TEST" in os.environ:
        return True
    return "pytest" in sys.modules


def get_database_url() -> str:
    # If DATABASE_URL is explicitly set, use it
    if os.getenv("DATABASE_URL"):
        return os.environ["DATABASE_URL"]

    # Otherwise, generate from individual components (all must be set)
    db_user = os.getenv("POSTGRES_USER")
    db_password = os.getenv("POSTGRES_PASSWORD")
    db_host = os.getenv("POSTGRES_HOST")
    db_port = os.getenv("POSTGRES_PORT")
    db_name = os.getenv("POSTGRES_DB")

    if all([db_user, db_password, db_host, db_port, db_name]):
        return f"postgresql://{db_user}:{db_password}@{db_host}:{db_port}/{db_name}"

    if _is_pytest_runtime():
        return "sqlite+pysqlite:///:memory:"

    missing = [
        name
        for name, value in (
            ("POSTGRES_USER", db_user),
            ("POSTGRES_PASSWORD", db_password),
            ("POSTGRES_HOST", db_host),
            ("POSTGRES_PORT", db_port),
            ("POSTGRES_DB", db_name),
        )
        if not value
    ]
    raise ValueError(f"Missing required database environment variables: {', '.join(missing)}")


DATABASE_URL = get_database_url()

engine = build_engine(DATABASE_URL)

if DATABASE_URL.startswith("sqlite") and ":memory:" in DATABASE_URL:
    models.Base.metadata.create_all(bind=engine)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    """Dependency to get a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
