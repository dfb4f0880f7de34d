"""
Logging Configuration
=====================
Logging setup using loguru.

Features:
- Human-readable logs for development
- Structured JSON logging otherwise
- botocore / aioboto3 standard logging forwarded to loguru

The SDK never configures logging on import; applications call
setup_logging() themselves if they want these sinks.
"""

import sys
import logging
from typing import Optional

from loguru import logger

from cf_r2_sdk.core.config import Settings, get_settings


# Third-party loggers whose records are forwarded into loguru
INTERCEPTED_LOGGERS = ("botocore", "aiobotocore", "aioboto3")


class InterceptHandler(logging.Handler):
    """
    Intercept standard logging messages and redirect to loguru.

    botocore and aiobotocore log through the standard library; this
    keeps their output in the same format as the SDK's own.
    """

    def emit(self, record: logging.LogRecord) -> None:
        # Get corresponding Loguru level if it exists
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where the logged message originated
        frame, depth = logging.currentframe(), 2
        while frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def resolve_level(settings: Settings) -> str:
    """
    Pick the log level for the given settings

    LOG_LEVEL wins when set, otherwise DEBUG toggles between DEBUG and INFO.
    """
    if settings.LOG_LEVEL:
        return settings.LOG_LEVEL.upper()
    return "DEBUG" if settings.DEBUG else "INFO"


def setup_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure logging for applications using the SDK

    Sets up:
    - Console logging (stdout)
    - JSON formatting outside development
    - Interception of botocore / aioboto3 standard library logging
    """
    settings = settings or get_settings()
    level = resolve_level(settings)

    # Remove default loguru handler
    logger.remove()

    if settings.is_development:
        # Development: Human-readable format
        log_format = (
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        )
        logger.add(
            sys.stdout,
            format=log_format,
            level=level,
            colorize=True,
            backtrace=True,
            diagnose=True,
        )
    else:
        # Production: JSON format for log aggregation
        logger.add(
            sys.stdout,
            format="{message}",
            level=level,
            serialize=True,
            backtrace=False,
            diagnose=False,
        )

    for name in INTERCEPTED_LOGGERS:
        logging.getLogger(name).handlers = [InterceptHandler()]
        # botocore is very chatty at DEBUG
        logging.getLogger(name).setLevel(logging.WARNING)

    logger.info(f"Logging configured for {settings.ENVIRONMENT} environment")


def get_logger(name: Optional[str] = None):
    """
    Get a logger instance

    Args:
        name: Optional logger name for context

    Returns:
        logger: loguru logger
    """
    if name:
        return logger.bind(logger_name=name)
    return logger
