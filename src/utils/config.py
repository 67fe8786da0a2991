"""
Configuration management using pydantic-settings.

Loads settings from environment variables (prefix ``FNOL_``) and .env files.
"""

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FNOL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Routing Configuration
    fast_track_threshold: float = Field(
        default=25000.0,
        gt=0,
        description="Claims with an estimated damage strictly below this amount are fast-tracked",
    )
    suspicious_keywords: List[str] = Field(
        default=["fraud", "staged", "inconsistent"],
        description="Lower-case words in the accident description that flag a claim for investigation",
    )

    # Output Configuration
    output_indent: int = Field(default=2, ge=0, description="Indent width of the rendered report")

    # Logging
    log_level: str = Field(default="INFO", description="Root log level for the CLI")

    @property
    def fast_track_reason(self) -> str:
        """Reasoning text attached to fast-tracked claims, showing the threshold unrounded."""
        threshold = self.fast_track_threshold
        amount = int(threshold) if threshold.is_integer() else threshold
        return f"Estimated damage under ${amount:,}."


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses LRU cache to avoid re-reading environment on every call.
    """
    return Settings()
