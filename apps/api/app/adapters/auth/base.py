"""Authentication failure kinds and provider interfaces."""

from abc import ABC, abstractmethod
from datetime import timedelta
from uuid import UUID


class AuthVerificationError(Exception):
    """Raised when a caller's identity cannot be established.

    Every subclass collapses to the same generic 401 at the HTTP boundary;
    the concrete class only feeds logs and tests.
    """


class MissingAuthorization(AuthVerificationError):
    """No ``Authorization`` header was supplied."""


class MalformedScheme(AuthVerificationError):
    """The ``Authorization`` header does not use the ``Bearer`` scheme."""


class AuthenticationFailed(AuthVerificationError):
    """A password did not match its stored credential hash."""


class TokenError(AuthVerificationError):
    """Base class for identity token rejections."""


class MalformedToken(TokenError):
    pass


class SignatureInvalid(TokenError):
    pass


class UnsupportedAlgorithm(TokenError):
    pass


class TokenExpired(TokenError):
    pass


class MissingSubject(TokenError):
    pass


class InvalidSubjectFormat(TokenError):
    pass


class TokenService(ABC):
    """Issues and validates signed identity tokens."""

    @abstractmethod
    def issue(self, subject: UUID, ttl: timedelta | int | None = None) -> str:
        """Return a signed token asserting ``subject`` for the clamped ``ttl``."""

    @abstractmethod
    def validate(self, token: str) -> UUID:
        """Verify ``token`` and return its subject, or raise a ``TokenError``."""


class PasswordHasher(ABC):
    """One-way password hashing with compare-only verification."""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Return a salted digest of ``password``."""

    @abstractmethod
    def verify(self, password: str, digest: str) -> None:
        """Raise ``AuthenticationFailed`` unless ``password`` matches ``digest``."""

    @abstractmethod
    def placeholder_digest(self) -> str:
        """Return a digest at the working cost that no real password matches.

        Verifying against it costs the same as a real comparison, so a login for
        an unknown account takes as long as one with a wrong password.
        """


__all__ = [
    "AuthVerificationError",
    "AuthenticationFailed",
    "InvalidSubjectFormat",
    "MalformedScheme",
    "MalformedToken",
    "MissingAuthorization",
    "MissingSubject",
    "PasswordHasher",
    "SignatureInvalid",
    "TokenError",
    "TokenExpired",
    "TokenService",
    "UnsupportedAlgorithm",
]
