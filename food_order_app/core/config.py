"""
Application Configuration Module

Centralizes all configuration using environment variables with Pydantic Settings.
Every setting has a default that reproduces the stock console behavior, so the
application runs with an empty environment. Overrides use the ``FOOD_ORDER_``
prefix, e.g. ``FOOD_ORDER_DEBUG=true`` or ``FOOD_ORDER_LOG_DIRECTORY=logs``.

Also owns the logging session: the package logger writes to a daily rolling
file and echoes to the console for the lifetime of one run.

Usage:
    from food_order_app.core.config import get_settings, logging_session

    settings = get_settings()
    with logging_session(settings) as logger:
        logger.info("...")

Author: Khalil_Bannouri
Version: 1.0.0
"""

import logging
import sys
from contextlib import contextmanager
from enum import Enum
from functools import lru_cache
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Iterator, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_LOGGER = "food_order_app"

LOG_FORMAT = "%(asctime)s │ %(levelname)-8s │ %(name)-25s │ %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class PaymentProvider(str, Enum):
    """
    Available payment providers.

    Attributes:
        SIMULATED: Deducts the amount from a balance entered by the user
    """
    SIMULATED = "simulated"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_name: Display name used in startup logs
        app_version: Application version
        debug: Enable verbose (DEBUG level) logging

        # Logging
        log_directory: Directory holding the rolling log file
        log_filename: Base name of the rolling log file
        log_backup_count: Number of rotated daily files to keep
        log_to_console: Echo log records to stdout

        # Business Configuration
        currency_symbol: Symbol appended to formatted amounts
        payment_provider: Which payment service to use
    """

    model_config = SettingsConfigDict(
        env_prefix="FOOD_ORDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # APPLICATION
    # ==========================================================================

    app_name: str = Field(
        default="Food Order App",
        description="Application display name"
    )
    app_version: str = Field(
        default="1.0.0",
        description="Application version"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode with verbose logging"
    )

    # ==========================================================================
    # LOGGING
    # ==========================================================================

    log_directory: str = Field(
        default=".",
        description="Directory for the rolling log file"
    )
    log_filename: str = Field(
        default="food_order_app.log",
        description="Log file name (rotated daily)"
    )
    log_backup_count: int = Field(
        default=7,
        ge=0,
        description="Rotated log files to keep (0 keeps all)"
    )
    log_to_console: bool = Field(
        default=True,
        description="Echo log records to the console"
    )

    # ==========================================================================
    # BUSINESS CONFIGURATION
    # ==========================================================================

    currency_symbol: str = Field(
        default="₴",
        description="Currency symbol for amounts shown to the user"
    )
    payment_provider: PaymentProvider = Field(
        default=PaymentProvider.SIMULATED,
        description="Payment service implementation"
    )

    # ==========================================================================
    # VALIDATORS
    # ==========================================================================

    @field_validator("payment_provider", mode="before")
    @classmethod
    def validate_payment_provider(cls, v: str) -> PaymentProvider:
        """Convert string to PaymentProvider enum."""
        if isinstance(v, PaymentProvider):
            return v
        try:
            return PaymentProvider(v.lower())
        except ValueError:
            valid = [p.value for p in PaymentProvider]
            raise ValueError(f"Invalid payment_provider. Must be one of: {valid}")

    # ==========================================================================
    # COMPUTED PROPERTIES
    # ==========================================================================

    @property
    def log_file_path(self) -> Path:
        """Full path of the active log file."""
        return Path(self.log_directory) / self.log_filename

    @property
    def log_level(self) -> int:
        """Logging level derived from debug mode."""
        return logging.DEBUG if self.debug else logging.INFO


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached application settings.

    Returns:
        Settings: Configured application settings

    Example:
        >>> settings = get_settings()
        >>> print(settings.payment_provider)
        PaymentProvider.SIMULATED
    """
    return Settings()


def reset_settings() -> None:
    """Clear the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()


# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

@contextmanager
def logging_session(settings: Optional[Settings] = None) -> Iterator[logging.Logger]:
    """
    Configure package logging for the duration of one run.

    Installs a daily rolling file handler (and a stdout handler when
    ``log_to_console`` is set) on the package logger. On exit, whether the
    body returned or raised, every handler is flushed, detached and closed
    and the logger level is restored.

    Args:
        settings: Settings to use (defaults to get_settings())

    Yields:
        The configured package logger
    """
    settings = settings or get_settings()
    logger = logging.getLogger(PACKAGE_LOGGER)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    log_path = settings.log_file_path
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handlers: list[logging.Handler] = [
        TimedRotatingFileHandler(
            log_path,
            when="midnight",
            backupCount=settings.log_backup_count,
            encoding="utf-8",
        )
    ]
    if settings.log_to_console:
        handlers.append(logging.StreamHandler(sys.stdout))

    previous_level = logger.level
    logger.setLevel(settings.log_level)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    try:
        yield logger
    finally:
        for handler in handlers:
            handler.flush()
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(previous_level)
