"""
Client Configuration

Where the client finds the backend. No defaults: both values must come from
the environment (JARGON_STORE_URL, JARGON_STORE_PUBLIC_KEY) or a .env file.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="JARGON_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    store_url: str
    store_public_key: str
