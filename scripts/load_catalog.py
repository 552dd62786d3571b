#!/usr/bin/env python3
"""
Catalog Loader

Loads admin-curated catalog items from a JSON file into the catalog tables.
The file maps a catalog table name to a list of items:

    {
      "author": [{"name": "...", "image": "..."}],
      "article": [{"name": "...", "image": "...", "description": "..."}]
    }

All catalogs in the file are inserted in one transaction. Users and
per-user junction tables are never touched, so existing accounts do not
gain visibility into the new items.

Reads the database URL from --database-url, else DATABASE_URL.

Usage:
  python scripts/load_catalog.py catalog.json [--database-url URL] [--json]
"""
from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from content_service.db import models
from content_service.db.engine import build_engine

logger = logging.getLogger("content_service.load_catalog")

CATALOG_MODELS = {
    "author": models.Author,
    "article": models.Article,
    "poet": models.Poet,
    "course": models.Course,
    "feed": models.Feed,
}


def _validate_items(catalog: str, items: Any) -> List[Dict[str, Any]]:
    if not isinstance(items, list):
        raise ValueError(f"{catalog}: expected a list of items")
    model = CATALOG_MODELS[catalog]
    allowed = {"name", "image", "description"} if hasattr(model, "description") else {"name", "image"}
    cleaned = []
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            raise ValueError(f"{catalog}[{index}]: expected an object")
        unknown = set(item) - allowed
        if unknown:
            raise ValueError(f"{catalog}[{index}]: unknown fields {sorted(unknown)}")
        if not item.get("name") or not item.get("image"):
            raise ValueError(f"{catalog}[{index}]: name and image are required")
        # null leaves the column default in place
        cleaned.append({key: str(value) for key, value in item.items() if value is not None})
    return cleaned


def parse_catalog_file(payload: Dict[str, Any]) -> Dict[str, List[Dict[str, Any]]]:
    unknown = set(payload) - set(CATALOG_MODELS)
    if unknown:
        raise ValueError(f"unknown catalogs: {sorted(unknown)}")
    return {catalog: _validate_items(catalog, items) for catalog, items in payload.items()}


def load_catalogs(db: Session, catalogs: Dict[str, List[Dict[str, Any]]]) -> Dict[str, int]:
    """Insert every item and commit once; roll back everything on failure."""
    counts: Dict[str, int] = {}
    try:
        for catalog, items in catalogs.items():
            model = CATALOG_MODELS[catalog]
            db.add_all(model(**item) for item in items)
            counts[catalog] = len(items)
        db.commit()
    except Exception:
        db.rollback()
        raise
    return counts


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Load curated catalog items from JSON")
    parser.add_argument("path", type=Path, help="JSON file mapping catalog name to items")
    parser.add_argument("--database-url", default=None, help="Overrides DATABASE_URL")
    parser.add_argument("--json", action="store_true", help="Print counts as JSON")
    args = parser.parse_args(argv)

    logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())

    url = args.database_url or os.getenv("DATABASE_URL")
    if not url:
        parser.error("a database URL is required (--database-url or DATABASE_URL)")

    catalogs = parse_catalog_file(json.loads(args.path.read_text(encoding="utf-8")))
    engine = build_engine(url)
    try:
        with Session(engine) as db:
            counts = load_catalogs(db, catalogs)
    finally:
        engine.dispose()

    logger.info("catalog_loaded counts=%s", counts)
    if args.json:
        print(json.dumps(counts, sort_keys=True))
    else:
        for catalog, count in sorted(counts.items()):
            print(f"{catalog}: {count}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
