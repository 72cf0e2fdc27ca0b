"""Application configuration using Pydantic Settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # System Configuration
    debug: bool = False

    # Session Configuration
    ready_timeout_seconds: float | None = None  # None waits for the provider indefinitely

    # Login Form Configuration
    min_password_length: int = 6
    login_success_delay_seconds: float = 0.5

    # PostHog Configuration
    posthog_api_key: str | None = None
    posthog_host: str = "https://app.posthog.com"


settings = Settings()
