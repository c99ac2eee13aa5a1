"""Logging configuration models for shardsplit."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

VALID_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


def _validate_level(v: str, what: str) -> str:
    if v.upper() not in VALID_LEVELS:
        raise ValueError(
            f"Invalid {what} '{v}'. Must be one of: {', '.join(sorted(VALID_LEVELS))}"
        )
    return v.upper()


class FileLoggingConfig(BaseModel):
    """Configuration for file-based logging."""

    enabled: bool = Field(default=False, description="Enable file logging")
    path: str = Field(default="shardsplit.log", description="Path to log file")
    level: str = Field(default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR)")
    rotation: str = Field(default="10 MB", description="Log rotation size (e.g., '10 MB', '1 week')")
    retention: str = Field(default="1 week", description="Log retention period (e.g., '1 week', '30 days')")
    format: str = Field(
        default="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        description="Log message format",
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate logging level."""
        return _validate_level(v, "log level")

    @field_validator("path")
    @classmethod
    def validate_path(cls, v: str) -> str:
        """Validate log file path."""
        if not v.strip():
            raise ValueError("Log file path cannot be empty")
        try:
            Path(v)
        except Exception as e:
            raise ValueError(f"Invalid log file path '{v}': {e}")
        return v


class LoggingConfig(BaseModel):
    """Top-level logging configuration."""

    file: FileLoggingConfig = Field(default_factory=FileLoggingConfig)
    console_level: str = Field(default="WARNING", description="Console logging level (DEBUG, INFO, WARNING, ERROR)")

    @field_validator("console_level")
    @classmethod
    def validate_console_level(cls, v: str) -> str:
        """Validate console logging level."""
        return _validate_level(v, "console log level")

    def is_enabled(self) -> bool:
        """Check if file logging is enabled."""
        return self.file.enabled
