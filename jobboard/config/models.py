"""Configuration schema models using Pydantic."""

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    KEY_VALUE = "key-value"


class SiteConfig(BaseModel):
    """Text shown in the page header."""

    title: str = Field("Developer Jobs", min_length=1, description="Page heading")
    tagline: str = Field("Find your dream job", description="Line under the heading")

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        stripped = v.strip()
        if not stripped:
            raise ValueError("title cannot be empty or whitespace-only")
        return stripped


class ServerConfig(BaseModel):
    """HTTP server settings for the built-in server."""

    host: str = Field("127.0.0.1", min_length=1, description="Interface to bind")
    port: int = Field(8000, ge=1, le=65535, description="TCP port to listen on")
    debug: bool = Field(False, description="Enable Flask debug mode")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Log level")
    format: LogFormat = Field(
        LogFormat.KEY_VALUE, description="Log output format (json or key-value)"
    )

    model_config = {"use_enum_values": True}


class AppConfig(BaseModel):
    """Root configuration object for the Job Board.

    Every section has defaults, so an empty mapping is a valid configuration.
    """

    site: SiteConfig = Field(default_factory=SiteConfig, description="Page header text")
    server: ServerConfig = Field(default_factory=ServerConfig, description="HTTP server")
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    model_config = {"extra": "forbid"}
