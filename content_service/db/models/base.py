"""
Shared SQLAlchemy base and column helpers.
"""
from sqlalchemy import BigInteger, Integer
from sqlalchemy.orm import declarative_base

# 64-bit ids on PostgreSQL; SQLite only autoincrements a plain INTEGER primary key.
IdType = BigInteger().with_variant(Integer(), "sqlite")


Base = declarative_base()
