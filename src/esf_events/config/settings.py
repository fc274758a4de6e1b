"""Application settings."""

import enum
import typing as t

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(enum.StrEnum):
    """Runtime environment for the application."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(enum.StrEnum):
    """Log levels understood by loguru."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseSettings):
    """Settings used to bootstrap the app.

    Values come from keyword arguments first, then ``ESF_*`` environment
    variables, then the defaults below.
    """

    model_config = SettingsConfigDict(env_prefix="ESF_", frozen=True)

    environment: Environment = Field(
        default=Environment.PRODUCTION, description="Runtime environment"
    )
    log_level: LogLevel = Field(default=LogLevel.INFO, description="Minimum log level")
    max_listeners: int = Field(
        default=20,
        ge=0,
        description="Per-channel listener count that triggers a leak warning (0 disables)",
    )


def build_settings(**overrides: t.Any) -> Settings:
    """Build Settings, ignoring overrides that are None.

    CLI options default to None when the user did not pass them; dropping
    those lets environment variables and defaults apply.
    """
    return Settings(**{k: v for k, v in overrides.items() if v is not None})
