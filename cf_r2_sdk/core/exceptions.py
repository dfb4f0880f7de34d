"""
Custom Exceptions
=================
Error taxonomy for the R2 SDK.

Building a client raises MissingFieldError (or InvalidFieldError for an
unusable endpoint); storage calls raise OperationError.
"""

from typing import Iterable, Optional


NOT_FOUND_CODES = frozenset({"404", "NoSuchKey", "NotFound"})


class R2Error(Exception):
    """Base exception for the R2 SDK"""
    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class MissingFieldError(R2Error):
    """A required configuration field was not supplied"""
    def __init__(self, field: str, missing: Optional[Iterable[str]] = None):
        self.field = field
        self.missing = list(missing) if missing is not None else [field]
        super().__init__(detail=f"Missing required field: {field}")


class InvalidFieldError(R2Error):
    """A configuration field was supplied but cannot be used"""
    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(detail=f"Invalid value for field {field}: {reason}")


class OperationError(R2Error):
    """
    A storage operation failed.

    Wraps the transport or storage failure (or the local file read failure
    for upload_file). The original exception is kept as __cause__.
    """
    def __init__(
        self,
        operation: str,
        detail: str,
        key: Optional[str] = None,
        error_code: Optional[str] = None,
    ):
        self.operation = operation
        self.key = key
        self.error_code = error_code
        if key is not None:
            message = f"{operation} failed for key '{key}': {detail}"
        else:
            message = f"{operation} failed: {detail}"
        super().__init__(detail=message)

    @property
    def is_not_found(self) -> bool:
        """True when the store reported the object as missing"""
        return self.error_code in NOT_FOUND_CODES
