from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Kept quiet by default so the CLI output is only what the commands print
    log_level: str = "WARNING"

    # Annotation provider: google_vision | mock
    annotator_provider: str = "google_vision"

    # Google Cloud Vision (credentials come from GOOGLE_APPLICATION_CREDENTIALS)
    vision_api_endpoint: str | None = None
    vision_timeout_seconds: float | None = None

    # Lottery extraction strategy: log_only | pattern | joined
    lotto_strategy: str = "log_only"


settings = Settings()
