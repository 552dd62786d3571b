"""
Password hashing for account signup.

Argon2id via argon2-cffi; the encoded hash is stored as bytes in
``users.pass_hash``.
"""
from __future__ import annotations

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError
from argon2.low_level import Type

_hasher = PasswordHasher(time_cost=2, memory_cost=102400, parallelism=8, hash_len=32, type=Type.ID)


def hash_password(password: str) -> bytes:
    return _hasher.hash(password).encode("ascii")


def verify_password(password: str, pass_hash: bytes) -> bool:
    if not password or not pass_hash:
        return False
    try:
        return _hasher.verify(pass_hash.decode("ascii"), password)
    except (VerificationError, InvalidHashError, UnicodeDecodeError):
        return False
