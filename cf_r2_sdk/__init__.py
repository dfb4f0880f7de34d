"""
Cloudflare R2 SDK
=================
Upload, download, delete and list objects in a Cloudflare R2 bucket.

Usage:
    from cf_r2_sdk import Builder
    from cf_r2_sdk.core import get_settings

    operator = Builder.from_settings(get_settings()).create_client()
    await operator.upload_binary("text.txt", "text/plain", b"Hello, World!")
"""

from cf_r2_sdk.core.exceptions import (
    R2Error,
    MissingFieldError,
    InvalidFieldError,
    OperationError,
)
from cf_r2_sdk.models.object import ObjectInfo
from cf_r2_sdk.storage.builder import Builder
from cf_r2_sdk.storage.operator import Operator

__version__ = "1.0.0"

__all__ = [
    "Builder",
    "Operator",
    "ObjectInfo",
    "R2Error",
    "MissingFieldError",
    "InvalidFieldError",
    "OperationError",
]
