"""Chirp service layer."""

import logging
from uuid import UUID

from app.core.logging_safety import safe_log_identifier
from app.domain.moderation import MAX_CHIRP_LENGTH, exceeds_length_limit, moderate
from app.errors import ForbiddenError, NotFoundError, StorageError, ValidationFailedError
from app.repositories.memory import ChirpRecord, InMemoryStore
from app.schemas.chirp import Chirp, CreateChirpRequest

logger = logging.getLogger(__name__)


class ChirpService:
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def create_chirp(self, *, owner_id: UUID, payload: CreateChirpRequest) -> Chirp:
        """Validate, moderate and persist a chirp owned by ``owner_id``.

        ``owner_id`` must come from a verified token. The length limit applies
        to the body as submitted, before any words are masked.
        """
        if exceeds_length_limit(payload.body):
            raise ValidationFailedError(
                "Chirp is too long",
                code="CHIRP_TOO_LONG",
                status_code=413,
                details={"max_length": MAX_CHIRP_LENGTH, "length": len(payload.body)},
            )

        cleaned = moderate(payload.body)
        safe_owner = safe_log_identifier(owner_id, prefix="uid")
        try:
            record = self._store.create_chirp(body=cleaned, user_id=owner_id)
        except StorageError:
            logger.exception("chirp.persist_failed owner_id=%s", safe_owner)
            raise

        logger.info("chirp.created chirp_id=%s owner_id=%s", record.id, safe_owner)
        return self._to_chirp(record)

    def list_chirps(self) -> list[Chirp]:
        return [self._to_chirp(record) for record in self._store.list_chirps()]

    def get_chirp(self, *, chirp_id: UUID) -> Chirp:
        record = self._store.get_chirp(chirp_id)
        if record is None:
            raise NotFoundError("Resource not found")
        return self._to_chirp(record)

    def delete_chirp(self, *, owner_id: UUID, chirp_id: UUID) -> None:
        record = self._store.get_chirp(chirp_id)
        if record is None:
            raise NotFoundError("Resource not found")
        if record.user_id != owner_id:
            raise ForbiddenError("Only the author can delete this chirp")
        self._store.delete_chirp(chirp_id)

    @staticmethod
    def _to_chirp(record: ChirpRecord) -> Chirp:
        return Chirp(
            id=record.id,
            created_at=record.created_at,
            updated_at=record.updated_at,
            body=record.body,
            user_id=record.user_id,
        )
