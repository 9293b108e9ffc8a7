"""Password hashing helpers."""
from __future__ import annotations

import bcrypt

from classhub.core.settings import settings

# bcrypt only reads the first 72 bytes of its input.
MAX_PASSWORD_BYTES = 72


def hash_password(plain_password: str) -> str:
    """Return a bcrypt hash of ``plain_password`` using the configured work factor."""
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    hashed = bcrypt.hashpw(plain_password.encode("utf-8"), salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    """Check ``plain_password`` against a value produced by :func:`hash_password`."""
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash.
        return False
