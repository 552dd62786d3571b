"""
Curated content catalogs.

Rows are loaded out of band (see scripts/load_catalog.py); the service
never creates or mutates them.
"""
from sqlalchemy import Column, String, Text

from .base import Base, IdType


class Author(Base):
    __tablename__ = 'author'
    id = Column(IdType, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    image = Column(String, nullable=False)


class Article(Base):
    __tablename__ = 'article'
    id = Column(IdType, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    image = Column(String, nullable=False)
    description = Column(Text, nullable=False, default='')


class Poet(Base):
    __tablename__ = 'poet'
    id = Column(IdType, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    image = Column(String, nullable=False)


class Course(Base):
    __tablename__ = 'course'
    id = Column(IdType, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    image = Column(String, nullable=False)
    description = Column(Text, nullable=False, default='')


class Feed(Base):
    __tablename__ = 'feed'
    id = Column(IdType, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    image = Column(String, nullable=False)
    description = Column(Text, nullable=False, default='')
