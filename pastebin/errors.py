"""
Error taxonomy for Pastebin Lite.

Every failure a request can hit maps to one of these classes, and each class
carries the HTTP status it is reported with.
"""
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Reasons creation input can be rejected."""

    INVALID_CONTENT = "INVALID_CONTENT"
    MISSING_EXPIRY = "MISSING_EXPIRY"
    INVALID_TTL = "INVALID_TTL"
    INVALID_EXPIRY = "INVALID_EXPIRY"
    EXPIRY_NOT_FUTURE = "EXPIRY_NOT_FUTURE"
    INVALID_MAX_VIEWS = "INVALID_MAX_VIEWS"


class PastebinError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(PastebinError):
    """Creation input broke one of the validation rules."""

    status_code = 400

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind


class NotFoundError(PastebinError):
    status_code = 404


class GoneError(PastebinError):
    """The record exists but has expired or used up its views."""

    status_code = 410


class InternalError(PastebinError):
    status_code = 500


class StoreError(Exception):
    """Raised by the record store when the backing database fails."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause
