"""
Logging Configuration.
"""

from datetime import datetime
from enum import Enum

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(str, Enum):
    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    FATAL = "FATAL"


class LogMode(str, Enum):
    DATE = "date"
    LEVEL = "level"


class LoggingSettings(BaseSettings):
    """Log destination configuration."""

    model_config = SettingsConfigDict(
        env_prefix="HL_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    mode: LogMode = Field(default=LogMode.DATE, description="Destination mode (date, level)")
    path: str = Field(default="logs", description="Root log directory")
    name: str = Field(default="hooklog", description="Log file name stem")
    date: str | None = Field(default=None, description="Log sub-directory; defaults to the start time")
    date_format: str = Field(default="%Y-%m-%d %H-%M-%S", description="strftime format for the default date")
    level: LogLevel = Field(default=LogLevel.INFO, description="Minimum level dispatched to hooks")
    report_caller: bool = Field(default=True, description="Capture file name and line of the call-site")
    capture_stdlib: bool = Field(default=True, description="Route stdlib logging through the hooks")
    console_tag: str | None = Field(default=None, description="Console line prefix; defaults to name")
    console_timestamp_format: str = Field(
        default="%Y-%m-%d %H:%M:%S",
        description="Timestamp format for console and file lines",
    )

    @field_validator("name")
    @classmethod
    def _validate_name(cls, value: str) -> str:
        if not value or "/" in value or "\\" in value:
            raise ValueError("name must be a non-empty file name stem")
        return value

    @property
    def resolved_date(self) -> str:
        return self.date or datetime.now().strftime(self.date_format)
