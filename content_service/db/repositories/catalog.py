"""
Catalog read functions.

Scoped readers join a catalog with its junction table and return only the
items visible to one user. Shared readers return the whole catalog to every
caller. No ordering is applied; callers must not rely on row order.
"""
from __future__ import annotations

import logging
from typing import List, Type, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from content_service.db import models, schemas
from content_service.db.timeouts import statement_deadline
from content_service.errors import StorageError

logger = logging.getLogger("content_service.catalog")

COURSES_TIMEOUT_SECONDS = 10

ItemT = TypeVar("ItemT", bound=schemas.CatalogItem)


def _scoped(
    db: Session,
    op: str,
    catalog: Type[models.Base],
    junction: Type[models.Base],
    item_column,
    user_id: int,
    schema: Type[ItemT],
) -> List[ItemT]:
    try:
        rows = (
            db.query(catalog)
            .join(junction, catalog.id == item_column)
            .filter(junction.user_id == user_id)
            .all()
        )
    except SQLAlchemyError as e:
        logger.warning("%s failed: %s", op, e)
        raise StorageError(op, str(e)) from e
    return [schema.model_validate(row) for row in rows]


def _shared(db: Session, op: str, catalog: Type[models.Base], schema: Type[ItemT]) -> List[ItemT]:
    try:
        rows = db.query(catalog).all()
    except SQLAlchemyError as e:
        logger.warning("%s failed: %s", op, e)
        raise StorageError(op, str(e)) from e
    return [schema.model_validate(row) for row in rows]


def list_authors(db: Session, user_id: int) -> List[schemas.Author]:
    return _scoped(
        db, "catalog.list_authors", models.Author, models.UserAuthor,
        models.UserAuthor.author_id, user_id, schemas.Author,
    )


def list_articles(db: Session, user_id: int) -> List[schemas.Article]:
    return _scoped(
        db, "catalog.list_articles", models.Article, models.UserArticle,
        models.UserArticle.article_id, user_id, schemas.Article,
    )


def list_poets(db: Session, user_id: int) -> List[schemas.Poet]:
    return _scoped(
        db, "catalog.list_poets", models.Poet, models.UserPoet,
        models.UserPoet.poet_id, user_id, schemas.Poet,
    )


def list_courses(db: Session, timeout: float = COURSES_TIMEOUT_SECONDS) -> List[schemas.Course]:
    """List every course, aborting the query if it runs past ``timeout`` seconds."""
    op = "catalog.list_courses"
    try:
        with statement_deadline(db, timeout):
            return _shared(db, op, models.Course, schemas.Course)
    except SQLAlchemyError as e:
        # Raised while installing the deadline
        raise StorageError(op, str(e)) from e


def list_feeds(db: Session) -> List[schemas.Feed]:
    return _shared(db, "catalog.list_feeds", models.Feed, schemas.Feed)


def list_shared_articles(db: Session) -> List[schemas.Article]:
    return _shared(db, "catalog.list_shared_articles", models.Article, schemas.Article)
