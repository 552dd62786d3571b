"""
User repository functions.

Account creation (with catalog seeding), lookups by email and id, and
deletion of a user together with every association row that references it.
"""
from __future__ import annotations

import logging
import random
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from content_service.config import VARIANT_PERSONALIZED, CatalogVariant, get_settings
from content_service.db import models, schemas
from content_service.db.integrity import is_unique_violation
from content_service.db.repositories.seeding import SEEDED_CATALOGS, seed_user_catalogs
from content_service.errors import StorageError, UserExistsError, UserNotFoundError
from content_service.utils.profiles import DEFAULT_PROFILE, choose_profile

logger = logging.getLogger("content_service.users")


def save_user(
    db: Session,
    email: str,
    pass_hash: bytes,
    *,
    variant: Optional[CatalogVariant] = None,
    rng: Optional[random.Random] = None,
) -> int:
    """Create a user and return its id.

    In the personalized variant the user gets a random profile preset and
    visibility into every catalog item, all in one transaction.
    """
    op = "users.save_user"
    variant = variant or get_settings().catalog_variant
    personalized = variant == VARIANT_PERSONALIZED
    profile = choose_profile(rng) if personalized else DEFAULT_PROFILE

    user = models.User(email=email, pass_hash=pass_hash, name=profile.name, image=profile.image)
    try:
        db.add(user)
        try:
            db.flush()
        except IntegrityError as e:
            if is_unique_violation(e):
                raise UserExistsError(op) from e
            raise
        user_id = user.id
        counts = seed_user_catalogs(db, user_id) if personalized else {}
        db.commit()
    except UserExistsError:
        db.rollback()
        logger.info("save_user rejected: email already registered")
        raise
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("save_user failed: %s", e)
        raise StorageError(op, str(e)) from e
    except Exception:
        db.rollback()
        raise

    logger.info("user_created id=%s variant=%s seeded=%s", user_id, variant, counts)
    return user_id


def get_user_by_email(db: Session, email: str) -> schemas.User:
    op = "users.get_user_by_email"
    try:
        user = db.query(models.User).filter(models.User.email == email).first()
    except SQLAlchemyError as e:
        raise StorageError(op, str(e)) from e
    if user is None:
        raise UserNotFoundError(op)
    return schemas.User.model_validate(user)


def get_user_profile(db: Session, user_id: int) -> schemas.UserProfile:
    op = "users.get_user_profile"
    try:
        row = db.query(models.User.name, models.User.image).filter(models.User.id == user_id).first()
    except SQLAlchemyError as e:
        raise StorageError(op, str(e)) from e
    if row is None:
        raise UserNotFoundError(op)
    return schemas.UserProfile(name=row.name, image=row.image)


def delete_user(db: Session, user_id: int) -> None:
    """Delete the user and every junction row that references it.

    Either all rows go or none do. Deleting an unknown id succeeds without
    touching anything.
    """
    op = "users.delete_user"
    try:
        removed = {}
        for entry in SEEDED_CATALOGS:
            removed[entry.kind] = (
                db.query(entry.junction)
                .filter(entry.junction.user_id == user_id)
                .delete(synchronize_session=False)
            )
        removed["users"] = (
            db.query(models.User)
            .filter(models.User.id == user_id)
            .delete(synchronize_session=False)
        )
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("delete_user failed id=%s: %s", user_id, e)
        raise StorageError(op, str(e)) from e
    except Exception:
        db.rollback()
        raise
    logger.info("user_deleted id=%s removed=%s", user_id, removed)
