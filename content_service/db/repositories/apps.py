"""
App credential lookup.

The apps table holds a single OAuth client record; there is no write path.
"""
from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from content_service.db import models, schemas
from content_service.errors import AppNotFoundError, StorageError


def get_app(db: Session) -> schemas.App:
    op = "apps.get_app"
    try:
        app = db.query(models.App).order_by(models.App.id).first()
    except SQLAlchemyError as e:
        raise StorageError(op, str(e)) from e
    if app is None:
        raise AppNotFoundError(op)
    return schemas.App.model_validate(app)
