"""Application configuration using pydantic-settings."""

from enum import StrEnum
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from pitchscan.exceptions import ConfigurationError


class RenderMode(StrEnum):
    """How to fetch the target page."""

    STATIC = "static"  # httpx only
    RENDERED = "rendered"  # Playwright only


class ReportLanguage(StrEnum):
    """Language of the generated report copy."""

    NB = "nb"
    EN = "en"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    env: Literal["development", "production", "test"] = "development"
    log_level: str = "INFO"

    # Target
    target_url: str | None = None

    # Fetching
    render_mode: RenderMode = RenderMode.RENDERED
    user_agent: str = "Mozilla/5.0 (compatible; PitchscanBot/0.1)"
    fetch_timeout: float = 30.0  # seconds, plain HTTP
    render_timeout_ms: int = 60000  # Playwright navigation cap
    max_redirects: int = 5

    # Report
    report_path: Path = Path("SALGS-RAPPORT.txt")
    report_language: ReportLanguage = ReportLanguage.NB

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.env == "production"

    def require_target_url(self) -> str:
        """Return the target URL or fail if it was never configured."""
        if not self.target_url or not self.target_url.strip():
            raise ConfigurationError("TARGET_URL is missing", setting="TARGET_URL")
        return self.target_url.strip()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
