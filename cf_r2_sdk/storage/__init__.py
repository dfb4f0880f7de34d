"""
Storage Services
================
Builder and Operator for Cloudflare R2.
"""

from cf_r2_sdk.storage.builder import Builder, DEFAULT_REGION
from cf_r2_sdk.storage.operator import (
    Operator,
    DEFAULT_CACHE_CONTROL,
    LIST_OBJECTS_MAX_KEYS,
)

__all__ = [
    "Builder",
    "Operator",
    "DEFAULT_REGION",
    "DEFAULT_CACHE_CONTROL",
    "LIST_OBJECTS_MAX_KEYS",
]
