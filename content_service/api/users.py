"""
Users API endpoints.

Signup, the caller's own profile, and account deletion.
"""
import random

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from content_service.api.deps import (
    Identity,
    get_app_settings,
    get_current_identity,
    get_db,
    get_profile_source,
)
from content_service.api.errors import handler_op
from content_service.config import Settings
from content_service.db import schemas
from content_service.db.repositories import users as user_repo
from content_service.utils.passwords import hash_password

router = APIRouter(tags=["users"])


@router.post("/users", response_model=schemas.UserCreated, status_code=status.HTTP_201_CREATED)
def create_user(
    payload: schemas.UserCreate,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
    rng: random.Random = Depends(get_profile_source),
):
    with handler_op("api.create_user"):
        user_id = user_repo.save_user(
            db,
            payload.email.strip(),
            hash_password(payload.password),
            variant=settings.catalog_variant,
            rng=rng,
        )
    return schemas.UserCreated(id=user_id)


@router.get("/user", response_model=schemas.UserProfile)
def get_user(
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    with handler_op("api.get_user"):
        return user_repo.get_user_profile(db, identity.user_id)


@router.delete("/user", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    with handler_op("api.delete_user"):
        user_repo.delete_user(db, identity.user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
