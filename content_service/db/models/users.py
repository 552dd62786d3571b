from sqlalchemy import Column, Index, Integer, LargeBinary, String

from .base import Base, IdType


class User(Base):
    __tablename__ = 'users'
    id = Column(IdType, primary_key=True, autoincrement=True)
    email = Column(String, nullable=False, unique=True)
    pass_hash = Column(LargeBinary, nullable=False)
    name = Column(String, nullable=False)
    image = Column(String, nullable=False)

    __table_args__ = (
        Index('idx_users_email', 'email'),
    )


class App(Base):
    """OAuth client credentials; the service only ever reads the first row."""

    __tablename__ = 'apps'
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False, unique=True)
    secret = Column(String, nullable=False, unique=True)
