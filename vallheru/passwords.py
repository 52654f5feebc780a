"""Password hashing and verification with bcrypt."""

from __future__ import annotations

import bcrypt

DEFAULT_COST = 12
INVALID_HASH = "invalid password"
_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:_MAX_BYTES]


def hash_password(password: str) -> str:
    """Hash ``password`` with bcrypt; return ``"invalid password"`` if it cannot be hashed."""
    try:
        hashed = bcrypt.hashpw(_encode(password), bcrypt.gensalt(DEFAULT_COST))
    except ValueError:
        return INVALID_HASH
    return hashed.decode("ascii")


def is_valid_password(password: str, hashed: str) -> bool:
    """Return whether ``password`` matches the bcrypt ``hashed`` value."""
    try:
        return bcrypt.checkpw(_encode(password), hashed.encode("ascii"))
    except (ValueError, UnicodeEncodeError):
        return False