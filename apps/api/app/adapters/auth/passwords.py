"""bcrypt credential hashing."""

from __future__ import annotations

import secrets
from functools import lru_cache

import bcrypt

from app.adapters.auth.base import AuthenticationFailed, PasswordHasher

# bcrypt only reads the first 72 bytes of its input
BCRYPT_MAX_PASSWORD_BYTES = 72


class PasswordTooLong(ValueError):
    """Raised when a password exceeds the bcrypt input limit."""


@lru_cache(maxsize=8)
def _placeholder_digest(rounds: int) -> str:
    unguessable = secrets.token_urlsafe(32).encode("ascii")
    return bcrypt.hashpw(unguessable, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


class BcryptPasswordHasher(PasswordHasher):
    """Salted, adaptive-cost password hashing backed by ``bcrypt``."""

    def __init__(self, rounds: int = 12) -> None:
        self._rounds = rounds

    def hash(self, password: str) -> str:
        encoded = password.encode("utf-8")
        if len(encoded) > BCRYPT_MAX_PASSWORD_BYTES:
            raise PasswordTooLong(f"Password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes")
        return bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=self._rounds)).decode("utf-8")

    def verify(self, password: str, digest: str) -> None:
        try:
            matched = bcrypt.checkpw(password.encode("utf-8"), digest.encode("utf-8"))
        except ValueError as exc:
            # malformed digest or over-long password
            raise AuthenticationFailed("Password does not match") from exc
        if not matched:
            raise AuthenticationFailed("Password does not match")

    def placeholder_digest(self) -> str:
        return _placeholder_digest(self._rounds)


__all__ = ["BCRYPT_MAX_PASSWORD_BYTES", "BcryptPasswordHasher", "PasswordTooLong"]
