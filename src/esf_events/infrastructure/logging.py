"""Logging setup built on loguru.

Call ``setup_logging(settings)`` (or ``configure_logger``) once at startup.
Modules obtain loggers with ``get_logger(__name__)``; if nothing has been
configured yet, defaults are applied on first use.
"""

import sys
import typing as t

from loguru import logger

from ..config.settings import Environment, LogLevel, Settings

if t.TYPE_CHECKING:
    import loguru

_DEVELOPMENT_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[logger_name]}</cyan> - <level>{message}</level>"
)
_PLAIN_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[logger_name]} - {message}"

_configured = False


def configure_logger(
    level: LogLevel | str = LogLevel.INFO,
    environment: Environment = Environment.PRODUCTION,
) -> None:
    """Replace all loguru sinks with one stderr sink for the environment.

    Development gets a colorized human format, production emits JSON lines
    and testing uses a plain uncolored format.
    """
    global _configured

    logger.remove()
    logger.configure(extra={"logger_name": "esf_events"})

    level_name = str(level)
    if environment == Environment.PRODUCTION:
        logger.add(sys.stderr, level=level_name, serialize=True)
    elif environment == Environment.DEVELOPMENT:
        logger.add(sys.stderr, level=level_name, format=_DEVELOPMENT_FORMAT, colorize=True)
    else:
        logger.add(sys.stderr, level=level_name, format=_PLAIN_FORMAT, colorize=False)

    _configured = True


def setup_logging(settings: Settings) -> None:
    """Configure logging from application settings."""
    configure_logger(level=settings.log_level, environment=settings.environment)


def get_logger(name: str) -> "loguru.Logger":
    """Get a logger bound to ``name``, configuring defaults if needed."""
    if not _configured:
        configure_logger()
    return logger.bind(logger_name=name)


def is_configured() -> bool:
    """Whether logging has been configured since the last reset."""
    return _configured


def reset_logging() -> None:
    """Remove all sinks and forget the configuration (used by tests)."""
    global _configured

    logger.remove()
    _configured = False
