"""User registration service."""

import logging

from app.adapters.auth import PasswordHasher, PasswordTooLong
from app.core.logging_safety import safe_log_identifier
from app.errors import BadRequestError
from app.repositories.memory import InMemoryStore, UserRecord
from app.schemas.user import User

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, store: InMemoryStore, hasher: PasswordHasher) -> None:
        self._store = store
        self._hasher = hasher

    def register(self, *, email: str, password: str) -> User:
        if not password:
            raise BadRequestError("password is required")
        try:
            hashed_password = self._hasher.hash(password)
        except PasswordTooLong as exc:
            raise BadRequestError(str(exc)) from exc

        record = self._store.create_user(email=email, hashed_password=hashed_password)
        logger.info("user.registered user_id=%s", safe_log_identifier(record.id, prefix="uid"))
        return self.to_user(record)

    @staticmethod
    def to_user(record: UserRecord) -> User:
        return User(
            id=record.id,
            created_at=record.created_at,
            updated_at=record.updated_at,
            email=record.email,
        )
