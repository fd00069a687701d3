"""Authentication schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class AuthPrincipal(BaseModel):
    """Caller identity taken from a verified token; the only trusted source of ownership."""

    user_id: UUID


class LoginRequest(BaseModel):
    email: str
    password: str
    expires_in_seconds: int | None = Field(default=None)


class LoginResponse(BaseModel):
    id: UUID
    created_at: datetime
    updated_at: datetime
    email: str
    token: str
