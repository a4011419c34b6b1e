"""Application configuration."""

import os
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    admin_token: str
    relay_url: str | None = None
    site_url: str = "http://localhost:8000"
    image_provider: Literal["gemini", "openai"] = "gemini"
    google_api_key: str | None = None
    gemini_model: str = "gemini-2.5-flash-image"
    openai_api_key: str | None = None
    openai_image_model: str = "gpt-image-1"
    storage_bucket: str = "generations"
    signed_url_ttl_seconds: int = 3600
    gallery_limit: int = 20
    relay_timeout_seconds: float = 30.0
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def normalize_base_url(raw: str | None) -> str | None:
    """Strip whitespace and a trailing slash from a base URL."""
    if raw is None:
        return None
    cleaned = raw.strip().rstrip("/")
    return cleaned or None
