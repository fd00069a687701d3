"""Application configuration."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables."""

    jwt_secret: str = Field(min_length=1)
    token_issuer: str = "chirpy"
    bcrypt_rounds: int = Field(default=12, ge=4, le=31)
    platform: Literal["dev", "prod"] = "prod"
    static_dir: str | None = None

    model_config = SettingsConfigDict(
        env_prefix="CHIRPY_",
        env_file=".env",
        extra="ignore",
        frozen=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
