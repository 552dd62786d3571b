"""
Content catalog seeding.

Gives a new user visibility into every item that exists in the seeded
catalogs at signup time. Items added later are not back-filled.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Type

from sqlalchemy.orm import Session

from content_service.db import models

logger = logging.getLogger("content_service.seeding")


@dataclass(frozen=True)
class SeededCatalog:
    kind: str
    catalog: Type[models.Base]
    junction: Type[models.Base]
    item_attr: str


SEEDED_CATALOGS: List[SeededCatalog] = [
    SeededCatalog("authors", models.Author, models.UserAuthor, "author_id"),
    SeededCatalog("articles", models.Article, models.UserArticle, "article_id"),
    SeededCatalog("poets", models.Poet, models.UserPoet, "poet_id"),
]


def catalog_ids(db: Session, catalog: Type[models.Base]) -> List[int]:
    return [item_id for (item_id,) in db.query(catalog.id).all()]


def seed_user_catalogs(db: Session, user_id: int) -> Dict[str, int]:
    """Add one junction row per catalog item for ``user_id``.

    Flushes but never commits; the caller owns the transaction and must roll
    back on any exception so the user is never left partially seeded.
    Returns the number of rows added per catalog kind.
    """
    counts: Dict[str, int] = {}
    for entry in SEEDED_CATALOGS:
        ids = catalog_ids(db, entry.catalog)
        db.add_all(entry.junction(user_id=user_id, **{entry.item_attr: item_id}) for item_id in ids)
        counts[entry.kind] = len(ids)
    db.flush()
    logger.debug("seeded user=%s counts=%s", user_id, counts)
    return counts
