"""
Configuration management for the client.

Settings are read from the environment (``ANYPARSER_*``) once, when a client
is built, and handed to the option resolver as plain defaults.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from pydantic import ConfigDict
from pydantic_settings import BaseSettings

from .constants import FALLBACK_API_URL
from .exceptions import InvalidUrlError
from .validators import URLValidator


class Settings(BaseSettings):
    model_config = ConfigDict(env_file=".env", env_prefix="ANYPARSER_", extra="ignore")

    api_url: str = FALLBACK_API_URL
    api_key: Optional[str] = None
    timeout: int = 30
    log_level: str = "INFO"
    debug: bool = False


def get_settings() -> Settings:
    return Settings()


@dataclass(frozen=True)
class DefaultOptions:
    """Option values used wherever the caller leaves a field unset."""

    api_url: str = FALLBACK_API_URL
    api_key: Optional[str] = None
    format: str = "json"
    model: str = "text"
    encoding: str = "utf-8"
    image: bool = True
    table: bool = True


LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Settings) -> None:
    """Apply the debug flag and log level from settings to the client loggers.

    A stream handler is only attached when the application has not set up
    logging itself.
    """
    level = logging.DEBUG if settings.debug else getattr(
        logging, settings.log_level.upper(), logging.INFO
    )

    package_logger = logging.getLogger("anyparser")
    package_logger.setLevel(level)

    if not package_logger.handlers and not logging.getLogger().handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name."""
    return logging.getLogger(f"anyparser.{name}")


logger = get_logger("config")


def load_api_url(value: Optional[str]) -> str:
    """Validate the configured API URL, falling back when it is unusable."""
    try:
        return URLValidator.validate_url(value or FALLBACK_API_URL)
    except InvalidUrlError:
        logger.error("Invalid API URL %s", value)

    logger.debug("Defaulting to %s", FALLBACK_API_URL)
    return URLValidator.validate_url(FALLBACK_API_URL)


def load_defaults(settings: Optional[Settings] = None) -> DefaultOptions:
    """Build the default options from settings, once per client."""
    settings = settings or get_settings()
    return DefaultOptions(
        api_url=load_api_url(settings.api_url),
        api_key=settings.api_key,
    )
