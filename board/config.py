"""Application configuration."""

from typing import Literal

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseModel):
    """MongoDB configuration."""

    url: str = "mongodb://localhost:27017"
    name: str = "board"

    # Fail fast when the server is unreachable instead of hanging requests
    server_selection_timeout_ms: int = 5000


class SweeperSettings(BaseModel):
    """Stale topic deactivation configuration."""

    enabled: bool = True

    # Job fires every hour at this minute, in this timezone
    minute: int = 0
    timezone: str = "Asia/Tokyo"

    # One/fork topics without an update for this long are deactivated
    inactivity_hours: int = 24


class FieldRule(BaseModel):
    """Regex a field must fully match, with the message shown on failure."""

    regex: str
    message: str


class ProfileSettings(BaseModel):
    """Profile field validation rules."""

    name: FieldRule = FieldRule(
        regex=r"^.{1,50}$",
        message="Name must be 1-50 characters",
    )
    text: FieldRule = FieldRule(
        regex=r"^[\s\S]{1,3000}$",
        message="Text must be 1-3000 characters",
    )
    sn: FieldRule = FieldRule(
        regex=r"^[a-zA-Z0-9_]{3,20}$",
        message="Screen name must be 3-20 characters of letters, digits or underscores",
    )


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Nested values can be overridden with double-underscore environment
    variables, e.g. ``DATABASE__URL`` or ``SWEEPER__INACTIVITY_HOURS``.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    database: DatabaseSettings = DatabaseSettings()
    sweeper: SweeperSettings = SweeperSettings()
    profile: ProfileSettings = ProfileSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
