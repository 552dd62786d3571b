"""
Per-user visibility junction tables.

The (userId, <catalog>Id) pair is the primary key, so a user can see a
catalog item at most once.
"""
from sqlalchemy import Column, ForeignKey, Index

from .base import Base, IdType


class UserAuthor(Base):
    __tablename__ = 'authors'
    user_id = Column('userId', IdType, ForeignKey('users.id'), primary_key=True)
    author_id = Column('authorId', IdType, ForeignKey('author.id'), primary_key=True)

    __table_args__ = (
        Index('idx_authors_author_id', 'authorId'),
    )


class UserArticle(Base):
    __tablename__ = 'articles'
    user_id = Column('userId', IdType, ForeignKey('users.id'), primary_key=True)
    article_id = Column('articleId', IdType, ForeignKey('article.id'), primary_key=True)

    __table_args__ = (
        Index('idx_articles_article_id', 'articleId'),
    )


class UserPoet(Base):
    __tablename__ = 'poets'
    user_id = Column('userId', IdType, ForeignKey('users.id'), primary_key=True)
    poet_id = Column('poetId', IdType, ForeignKey('poet.id'), primary_key=True)

    __table_args__ = (
        Index('idx_poets_poet_id', 'poetId'),
    )
