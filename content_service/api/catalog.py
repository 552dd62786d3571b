"""
Catalog API endpoints.

The personalized router serves each caller only the items seeded for them;
the shared router serves the whole catalog to everyone, identity or not.
An app mounts exactly one of the two.
"""
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from content_service.api.deps import Identity, get_current_identity, get_db
from content_service.api.errors import handler_op
from content_service.db import schemas
from content_service.db.repositories import catalog as catalog_repo

personalized_router = APIRouter(tags=["catalog"])
shared_router = APIRouter(tags=["catalog"])


@personalized_router.get("/authors", response_model=List[schemas.Author])
def list_authors(
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    with handler_op("api.list_authors"):
        return catalog_repo.list_authors(db, identity.user_id)


@personalized_router.get("/articles", response_model=List[schemas.Article])
def list_articles(
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    with handler_op("api.list_articles"):
        return catalog_repo.list_articles(db, identity.user_id)


@personalized_router.get("/poets", response_model=List[schemas.Poet])
def list_poets(
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    with handler_op("api.list_poets"):
        return catalog_repo.list_poets(db, identity.user_id)


@shared_router.get("/courses", response_model=List[schemas.Course])
def list_courses(db: Session = Depends(get_db)):
    with handler_op("api.list_courses"):
        return catalog_repo.list_courses(db)


@shared_router.get("/feeds", response_model=List[schemas.Feed])
def list_feeds(db: Session = Depends(get_db)):
    with handler_op("api.list_feeds"):
        return catalog_repo.list_feeds(db)


@shared_router.get("/articles", response_model=List[schemas.Article])
def list_shared_articles(db: Session = Depends(get_db)):
    with handler_op("api.list_shared_articles"):
        return catalog_repo.list_shared_articles(db)
