"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    form_service_base_url: str
    mock_service_base_url: str
    form_config_table: str = "form_configs"
    session_table: str = "session_store"
    form_config_cache_ttl_seconds: int = 300
    mock_service_timeout_seconds: float = 10
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def normalize_base_url(raw: str) -> str:
    """Strip trailing slashes so paths can be appended with a single '/'."""
    return raw.strip().rstrip("/")
