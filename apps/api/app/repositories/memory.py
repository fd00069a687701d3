"""In-memory repositories used by the API and tests."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4

from app.errors import ConflictError, StorageError


@dataclass(slots=True)
class UserRecord:
    id: UUID
    email: str
    hashed_password: str
    created_at: datetime
    updated_at: datetime


@dataclass(slots=True)
class ChirpRecord:
    id: UUID
    body: str
    user_id: UUID
    created_at: datetime
    updated_at: datetime


@dataclass(slots=True)
class InMemoryStore:
    """Simple, deterministic persistence layer for users and chirps.

    Synchronous handlers run in a worker thread pool, so every access goes
    through ``_lock``.
    """

    users: dict[UUID, UserRecord] = field(default_factory=dict)
    chirps: dict[UUID, ChirpRecord] = field(default_factory=dict)
    user_write_count: int = 0
    chirp_write_count: int = 0
    chirp_write_failure_message: str | None = None
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def create_user(self, email: str, hashed_password: str) -> UserRecord:
        with self._lock:
            if any(record.email == email for record in self.users.values()):
                raise ConflictError("Email is already registered")
            now = datetime.now(UTC)
            user = UserRecord(
                id=uuid4(),
                email=email,
                hashed_password=hashed_password,
                created_at=now,
                updated_at=now,
            )
            self.users[user.id] = user
            self.user_write_count += 1
            return user

    def get_user(self, user_id: UUID) -> UserRecord | None:
        with self._lock:
            return self.users.get(user_id)

    def get_user_by_email(self, email: str) -> UserRecord | None:
        with self._lock:
            for record in self.users.values():
                if record.email == email:
                    return record
            return None

    def create_chirp(self, body: str, user_id: UUID) -> ChirpRecord:
        with self._lock:
            if self.chirp_write_failure_message is not None:
                raise StorageError("Failed to save chirp") from RuntimeError(self.chirp_write_failure_message)
            now = datetime.now(UTC)
            chirp = ChirpRecord(
                id=uuid4(),
                body=body,
                user_id=user_id,
                created_at=now,
                updated_at=now,
            )
            self.chirps[chirp.id] = chirp
            self.chirp_write_count += 1
            return chirp

    def get_chirp(self, chirp_id: UUID) -> ChirpRecord | None:
        with self._lock:
            return self.chirps.get(chirp_id)

    def list_chirps(self) -> list[ChirpRecord]:
        with self._lock:
            chirps = list(self.chirps.values())
        chirps.sort(key=lambda record: record.created_at)
        return chirps

    def delete_chirp(self, chirp_id: UUID) -> bool:
        with self._lock:
            removed = self.chirps.pop(chirp_id, None)
            if removed is not None:
                self.chirp_write_count += 1
            return removed is not None

    def reset(self) -> None:
        with self._lock:
            self.users.clear()
            self.chirps.clear()
