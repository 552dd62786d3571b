"""
Pydantic schemas for payloads and the records returned by repositories.
"""

from .users import UserCreate, UserCreated, UserProfile, User
from .apps import App
from .catalog import (
    CatalogItem,
    DescribedCatalogItem,
    Author,
    Poet,
    Article,
    Course,
    Feed,
)

__all__ = [
    "UserCreate",
    "UserCreated",
    "UserProfile",
    "User",
    "App",
    "CatalogItem",
    "DescribedCatalogItem",
    "Author",
    "Poet",
    "Article",
    "Course",
    "Feed",
]
