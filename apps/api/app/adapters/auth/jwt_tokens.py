"""HMAC-signed JWT identity tokens."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from uuid import UUID

import jwt

from app.adapters.auth.base import (
    InvalidSubjectFormat,
    MalformedToken,
    MissingSubject,
    SignatureInvalid,
    TokenExpired,
    TokenService,
    UnsupportedAlgorithm,
)

MAX_TOKEN_TTL = timedelta(hours=1)
SIGNING_ALGORITHM = "HS256"
ACCEPTED_ALGORITHMS = ("HS256", "HS384", "HS512")


def _utc_now() -> datetime:
    return datetime.now(UTC)


def clamp_ttl(ttl: timedelta | int | float | None) -> timedelta:
    """Clamp a requested lifetime into ``(0, 1 hour]``.

    Missing, non-positive and over-long requests all fall back to one hour.
    Plain numbers are read as seconds.
    """
    if ttl is None:
        return MAX_TOKEN_TTL
    if not isinstance(ttl, timedelta):
        if not 0 < ttl <= MAX_TOKEN_TTL.total_seconds():
            return MAX_TOKEN_TTL
        ttl = timedelta(seconds=ttl)
    if ttl <= timedelta(0) or ttl > MAX_TOKEN_TTL:
        return MAX_TOKEN_TTL
    return ttl


class JwtTokenService(TokenService):
    """Signs tokens with a process-wide secret and verifies them with the same secret.

    Only the HMAC family is accepted on validation. Tokens declaring any other
    algorithm (``none``, RSA, EC) are rejected before their signature is looked
    at, which blocks algorithm-substitution forgeries.

    The ``iss`` claim is written for downstream consumers but not checked by
    ``validate``; a token is trusted on signature, expiry and subject alone.
    """

    def __init__(
        self,
        secret: str,
        *,
        issuer: str = "chirpy",
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        if not secret:
            raise ValueError("JwtTokenService requires a non-empty secret")
        self._secret = secret
        self._issuer = issuer
        self._clock = clock

    def issue(self, subject: UUID, ttl: timedelta | int | None = None) -> str:
        issued_at = self._clock().astimezone(UTC).replace(microsecond=0)
        claims = {
            "iss": self._issuer,
            "sub": str(subject),
            "iat": issued_at,
            "exp": issued_at + clamp_ttl(ttl),
        }
        return jwt.encode(claims, self._secret, algorithm=SIGNING_ALGORITHM)

    def validate(self, token: str) -> UUID:
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=list(ACCEPTED_ALGORITHMS),
                # expiry is checked against the injected clock below
                options={
                    "verify_exp": False,
                    "verify_iat": False,
                    "verify_nbf": False,
                    "verify_sub": False,
                    "require": ["exp", "iat"],
                },
            )
        except jwt.InvalidAlgorithmError as exc:
            raise UnsupportedAlgorithm("Token signing algorithm is not accepted") from exc
        except jwt.InvalidSignatureError as exc:
            raise SignatureInvalid("Token signature does not verify") from exc
        except jwt.InvalidTokenError as exc:
            raise MalformedToken("Token is not a well-formed JWT") from exc

        expires_at = claims["exp"]
        if isinstance(expires_at, bool) or not isinstance(expires_at, (int, float)):
            raise MalformedToken("Token expiry claim is not a timestamp")
        if self._clock().timestamp() >= expires_at:
            raise TokenExpired("Token has expired")

        subject = claims.get("sub")
        if not subject:
            raise MissingSubject("Token has no subject claim")
        if not isinstance(subject, str):
            raise InvalidSubjectFormat("Token subject is not a string")
        try:
            return UUID(subject)
        except ValueError as exc:
            raise InvalidSubjectFormat("Token subject is not a UUID") from exc


__all__ = [
    "ACCEPTED_ALGORITHMS",
    "JwtTokenService",
    "MAX_TOKEN_TTL",
    "SIGNING_ALGORITHM",
    "clamp_ttl",
]
