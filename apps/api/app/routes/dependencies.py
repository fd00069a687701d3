"""Dependency wiring for routes."""

from __future__ import annotations

import logging
from typing import Annotated
from uuid import uuid4

from fastapi import Depends, Request

from app.adapters.auth import (
    AuthVerificationError,
    BcryptPasswordHasher,
    JwtTokenService,
    PasswordHasher,
    TokenService,
    extract_bearer_token,
)
from app.core.config import Settings, get_settings
from app.core.logging_safety import reason_for, safe_log_identifier
from app.repositories.memory import InMemoryStore
from app.schemas.auth import AuthPrincipal
from app.services.admin import AdminService, HitCounter
from app.services.auth import AuthService
from app.services.chirps import ChirpService
from app.services.users import UserService

logger = logging.getLogger(__name__)


def _request_correlation_id(request: Request) -> str:
    existing = getattr(request.state, "correlation_id", None)
    if isinstance(existing, str) and existing:
        return existing

    correlation_id = request.headers.get("X-Correlation-Id") or f"req-{uuid4()}"
    request.state.correlation_id = correlation_id
    return correlation_id


def get_token_service(settings: Annotated[Settings, Depends(get_settings)]) -> TokenService:
    return JwtTokenService(settings.jwt_secret, issuer=settings.token_issuer)


def get_password_hasher(settings: Annotated[Settings, Depends(get_settings)]) -> PasswordHasher:
    return BcryptPasswordHasher(rounds=settings.bcrypt_rounds)


async def get_authenticated_principal(
    request: Request,
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> AuthPrincipal:
    """Extract and validate the bearer token, then attach the principal to the request."""
    safe_correlation_id = safe_log_identifier(_request_correlation_id(request), prefix="cid")
    try:
        token = extract_bearer_token(request.headers)
        user_id = tokens.validate(token)
    except AuthVerificationError as exc:
        logger.warning(
            "auth.rejected correlation_id=%s method=%s path=%s reason=%s",
            safe_correlation_id,
            request.method,
            request.url.path,
            reason_for(exc),
        )
        raise

    logger.info(
        "auth.accepted correlation_id=%s method=%s path=%s principal_id=%s",
        safe_correlation_id,
        request.method,
        request.url.path,
        safe_log_identifier(user_id, prefix="uid"),
    )
    principal = AuthPrincipal(user_id=user_id)
    request.state.auth_principal = principal
    return principal


def get_store(request: Request) -> InMemoryStore:
    return request.app.state.store


def get_hit_counter(request: Request) -> HitCounter:
    return request.app.state.hit_counter


def get_user_service(
    store: Annotated[InMemoryStore, Depends(get_store)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
) -> UserService:
    return UserService(store, hasher)


def get_auth_service(
    store: Annotated[InMemoryStore, Depends(get_store)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> AuthService:
    return AuthService(store, hasher, tokens)


def get_chirp_service(store: Annotated[InMemoryStore, Depends(get_store)]) -> ChirpService:
    return ChirpService(store)


def get_admin_service(
    store: Annotated[InMemoryStore, Depends(get_store)],
    counter: Annotated[HitCounter, Depends(get_hit_counter)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> AdminService:
    return AdminService(store, counter, settings.platform)
