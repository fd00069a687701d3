"""Auth adapters: credential hashing, identity tokens and bearer extraction."""

from .base import (
    AuthVerificationError,
    AuthenticationFailed,
    InvalidSubjectFormat,
    MalformedScheme,
    MalformedToken,
    MissingAuthorization,
    MissingSubject,
    PasswordHasher,
    SignatureInvalid,
    TokenError,
    TokenExpired,
    TokenService,
    UnsupportedAlgorithm,
)
from .bearer import extract_bearer_token
from .jwt_tokens import JwtTokenService, clamp_ttl
from .passwords import BcryptPasswordHasher, PasswordTooLong

__all__ = [
    "AuthVerificationError",
    "AuthenticationFailed",
    "BcryptPasswordHasher",
    "InvalidSubjectFormat",
    "JwtTokenService",
    "MalformedScheme",
    "MalformedToken",
    "MissingAuthorization",
    "MissingSubject",
    "PasswordHasher",
    "PasswordTooLong",
    "SignatureInvalid",
    "TokenError",
    "TokenExpired",
    "TokenService",
    "UnsupportedAlgorithm",
    "clamp_ttl",
    "extract_bearer_token",
]
