"""12-factor configuration adapter using environment variables."""

from datetime import date, datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=3001, description="Port to bind the server to")
    reload: bool = Field(default=False, description="Enable auto-reload for development")
    cors_allow_origins: list[str] = Field(
        default=["*"],
        description="Origins allowed to call the API (JSON list in the environment)",
    )

    # Dataset configuration
    data_file: str = Field(
        default="processed_train_schedule.json",
        description="Path to the pre-built schedule dataset (JSON), re-read on every request",
    )
    timezone: str = Field(
        default="Europe/Paris",
        description="Timezone used to determine today's date (IANA timezone name)",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Root logging level")

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate timezone is a known IANA timezone name."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"timezone must be a valid IANA timezone name, got {v!r}") from e
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard logging levels."""
        if v.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return v.upper()

    def today(self) -> date:
        """Return the current date in the configured timezone."""
        return datetime.now(ZoneInfo(self.timezone)).date()
