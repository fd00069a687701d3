"""User API schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class CreateUserRequest(BaseModel):
    email: str = Field(min_length=1)
    password: str


class User(BaseModel):
    id: UUID
    created_at: datetime
    updated_at: datetime
    email: str
