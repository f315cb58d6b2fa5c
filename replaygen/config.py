"""Configuration management for replaygen."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .codegen.models import OutputFormat


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="REPLAYGEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Codegen
    default_format: OutputFormat = Field(
        OutputFormat.TEST,
        description="Output format when --format is not given"
    )

    # Logging
    log_level: str = Field("WARNING", description="Log level (DEBUG, INFO, WARNING, ERROR)")
    log_json: bool = Field(False, description="Render logs as JSON")


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
