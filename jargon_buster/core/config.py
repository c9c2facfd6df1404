"""
Jargon Buster Core Configuration

This module manages all application configuration using Pydantic Settings.
Environment variables are loaded from .env file.
"""

import json
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"

    api_prefix: str = "/api/v1"

    # Database
    database_url: str = Field(default="sqlite+aiosqlite:///./jargon_buster.db")
    db_echo: bool = False
    db_pool_size: int = 5
    db_max_overflow: int = 10

    # Security
    jwt_secret_key: str = Field(min_length=32)
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60

    # Public key clients send as the `apikey` header. Unset disables the check.
    public_api_key: Optional[str] = None

    # External APIs
    gemini_api_key: Optional[str] = None
    gemini_model: str = "gemini-1.5-flash-latest"
    gemini_api_url: str = "https://generativelanguage.googleapis.com/v1beta"

    # CORS, comma separated or a JSON list
    cors_origins: str = "*"

    @field_validator("jwt_secret_key")
    @classmethod
    def validate_jwt_secret(cls, v: str) -> str:
        """Ensure JWT secret is strong enough"""
        if len(v) < 32:
            raise ValueError("JWT_SECRET_KEY must be at least 32 characters long")
        return v

    @property
    def cors_origin_list(self) -> list[str]:
        """Parse CORS origins from a comma separated or JSON string"""
        v = self.cors_origins.strip()
        if v.startswith("["):
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                return [v]
        return [i.strip() for i in v.split(",") if i.strip()] or ["*"]

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Uses lru_cache for singleton pattern.
    """
    return Settings()


# Export singleton instance
settings = get_settings()
