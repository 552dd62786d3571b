"""
SQLAlchemy models, split per domain and re-exported here.
"""

from .base import Base, IdType  # re-export

from .users import User, App
from .catalog import Author, Article, Poet, Course, Feed
from .associations import UserAuthor, UserArticle, UserPoet

__all__ = [
    # base
    "Base",
    "IdType",
    # accounts
    "User",
    "App",
    # catalogs
    "Author",
    "Article",
    "Poet",
    "Course",
    "Feed",
    # junctions
    "UserAuthor",
    "UserArticle",
    "UserPoet",
]
