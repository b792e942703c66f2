"""Application configuration."""

import os
from pathlib import Path
from zoneinfo import ZoneInfo

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    tracker_data_dir: Path = Path("data")
    workout_data_dir: Path | None = None
    backup_dir: Path | None = None
    max_backups: int = Field(default=5, ge=1)
    tracker_timezone: str | None = None
    api_prefix: str = "/api"
    host: str = "127.0.0.1"
    port: int = 3001
    cors_origins: str = "*"
    openai_api_key: str | None = None
    openai_model: str = "gpt-5.2"
    openai_reasoning_effort: str | None = None
    openai_store: bool = False
    perplexity_api_key: str | None = None
    perplexity_base_url: str = "https://api.perplexity.ai"
    perplexity_model: str = "sonar"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def food_dir(self) -> Path:
        return self.tracker_data_dir / "food"

    @property
    def workout_dir(self) -> Path:
        return self.workout_data_dir or self.tracker_data_dir / "workout"

    @property
    def timezone(self) -> ZoneInfo | None:
        """Bucketing timezone; None means the server's local timezone."""
        if not self.tracker_timezone:
            return None
        return ZoneInfo(self.tracker_timezone)


def parse_cors_origins(raw: str | None) -> list[str]:
    """Parse allowed CORS origins from env."""
    if raw is None:
        return ["*"]
    cleaned = raw.strip()
    if cleaned in {"", "*"}:
        return ["*"]
    return [origin.strip() for origin in cleaned.split(",") if origin.strip()]
