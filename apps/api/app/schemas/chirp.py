"""Chirp API schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class CreateChirpRequest(BaseModel):
    """Inbound chirp payload.

    Carries no owner field. Unknown keys such as ``user_id`` are dropped while
    decoding; ownership is attached from the verified token.
    """

    model_config = ConfigDict(extra="ignore")

    body: str


class Chirp(BaseModel):
    id: UUID
    created_at: datetime
    updated_at: datetime
    body: str
    user_id: UUID
