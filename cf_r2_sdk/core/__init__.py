"""
Core
====
Settings, logging and the error taxonomy shared by the SDK.
"""

from cf_r2_sdk.core.config import Settings, get_settings
from cf_r2_sdk.core.exceptions import (
    R2Error,
    MissingFieldError,
    InvalidFieldError,
    OperationError,
)
from cf_r2_sdk.core.logging_config import setup_logging, get_logger

__all__ = [
    "Settings",
    "get_settings",
    "R2Error",
    "MissingFieldError",
    "InvalidFieldError",
    "OperationError",
    "setup_logging",
    "get_logger",
]
