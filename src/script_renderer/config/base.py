"""Base configuration settings."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}
_LOG_FORMATS = {"console", "json"}


class FontSettings(BaseSettings):
    """Font asset settings.

    Values are read from ``SCRIPT_RENDERER_*`` environment variables or a
    local ``.env`` file. Style resolution depends only on these, so a bad
    logging variable cannot break it.
    """

    model_config = SettingsConfigDict(
        env_prefix="SCRIPT_RENDERER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Namespace under which the bundled font assets are registered
    font_package: str = "script_renderer"


class Settings(FontSettings):
    """Application settings."""

    # Application
    app_name: str = "Script Renderer"
    app_version: str = "0.1.0"
    environment: str = "development"
    debug: bool = False

    # Logging
    log_level: str = "INFO"
    log_format: str = "console"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the log level name."""
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return level

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Check the log renderer name."""
        fmt = v.lower()
        if fmt not in _LOG_FORMATS:
            raise ValueError(f"log_format must be one of {sorted(_LOG_FORMATS)}")
        return fmt
