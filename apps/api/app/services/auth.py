"""Login service: credential check and token issuance."""

import logging

from app.adapters.auth import AuthenticationFailed, PasswordHasher, TokenService, clamp_ttl
from app.core.logging_safety import reason_for, safe_log_identifier
from app.errors import StorageError
from app.repositories.memory import InMemoryStore
from app.schemas.auth import LoginRequest, LoginResponse

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, store: InMemoryStore, hasher: PasswordHasher, tokens: TokenService) -> None:
        self._store = store
        self._hasher = hasher
        self._tokens = tokens

    def login(self, request: LoginRequest) -> LoginResponse:
        """Verify credentials and issue a token.

        Unknown email, storage lookup failure and wrong password all raise the
        same ``AuthenticationFailed`` so the response never reveals which one
        happened.
        """
        ttl = clamp_ttl(request.expires_in_seconds)
        safe_email = safe_log_identifier(request.email, prefix="email")

        try:
            record = self._store.get_user_by_email(request.email)
        except StorageError as exc:
            self._spend_verification(request.password)
            logger.warning("login.rejected email=%s reason=%s", safe_email, reason_for(exc))
            raise AuthenticationFailed("Incorrect email or password") from exc
        if record is None:
            self._spend_verification(request.password)
            logger.warning("login.rejected email=%s reason=unknown_email", safe_email)
            raise AuthenticationFailed("Incorrect email or password")

        try:
            self._hasher.verify(request.password, record.hashed_password)
        except AuthenticationFailed:
            logger.warning("login.rejected email=%s reason=password_mismatch", safe_email)
            raise

        token = self._tokens.issue(record.id, ttl)
        logger.info(
            "login.accepted user_id=%s ttl_seconds=%d",
            safe_log_identifier(record.id, prefix="uid"),
            int(ttl.total_seconds()),
        )
        return LoginResponse(
            id=record.id,
            created_at=record.created_at,
            updated_at=record.updated_at,
            email=record.email,
            token=token,
        )

    def _spend_verification(self, password: str) -> None:
        # keeps unknown-account logins as slow as wrong-password ones
        try:
            self._hasher.verify(password, self._hasher.placeholder_digest())
        except AuthenticationFailed:
            pass
