"""Application configuration loaded from the environment and an optional .env file."""
import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings.

    ``database_url`` has no default: it carries the store's endpoint, credentials
    and database name, and the application refuses to start without it.
    Example: DATABASE_URL=postgresql+asyncpg://user:secret@db:5432/clients
    """

    # Application metadata
    app_name: str = "Client Registry API"
    app_version: str = "1.0.0"
    log_level: str = "INFO"

    # Database
    database_url: str = Field(..., description="SQLAlchemy async URL of the client store")
    database_echo: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("database_url")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject an empty or whitespace-only database URL."""
        if not v or not v.strip():
            raise ValueError("database_url must be configured")
        return v.strip()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

