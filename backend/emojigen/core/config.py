"""Configuration management using pydantic-settings."""
from functools import lru_cache
from typing import Literal, Optional

from pydantic import AnyHttpUrl, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PROXY_URL = "https://your-vercel-app.vercel.app/api/gemini-generate-emoji"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Remote generation proxy
    generation_proxy_url: AnyHttpUrl = Field(default=DEFAULT_PROXY_URL, validate_default=True)
    request_timeout_seconds: float = Field(default=60.0, gt=0)
    generation_provider: str = "Google Cloud Platform (Gemini API)"

    # Batch submission
    batch_window_size: int = Field(default=3, ge=1)
    max_batch_size: int = Field(default=20, ge=1)

    # Prompt validation
    prompt_rules: Literal["strict", "extended"] = "strict"
    prompt_min_length: Optional[int] = Field(default=None, ge=1)
    prompt_max_length: Optional[int] = Field(default=None, ge=1)

    # Application settings
    app_name: str = "emojigen"
    default_user_id: str = "anonymous"

    # Server settings
    backend_host: str = "localhost"
    backend_port: int = 8000
    frontend_port: int = 8081


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
