"""Bearer token extraction from request headers."""

from collections.abc import Mapping

from app.adapters.auth.base import MalformedScheme, MissingAuthorization

AUTHORIZATION_HEADER = "Authorization"
BEARER_PREFIX = "Bearer "


def extract_bearer_token(headers: Mapping[str, str]) -> str:
    """Return the raw credential following ``Bearer `` in the Authorization header.

    The scheme match is exact and case-sensitive. The remainder is returned
    unmodified, including any extra whitespace.
    """
    value = headers.get(AUTHORIZATION_HEADER)
    if value is None:
        # starlette's Headers is case-insensitive, plain dicts are not
        value = headers.get(AUTHORIZATION_HEADER.lower())
    if not value:
        raise MissingAuthorization("Authorization header is missing")
    if not value.startswith(BEARER_PREFIX):
        raise MalformedScheme("Authorization header does not use the Bearer scheme")
    return value[len(BEARER_PREFIX):]


__all__ = ["AUTHORIZATION_HEADER", "BEARER_PREFIX", "extract_bearer_token"]
