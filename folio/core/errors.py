"""Error taxonomy shared by services and endpoints."""
from enum import Enum

from fastapi import status


class ValidationCode(str, Enum):
    """Failure kinds reported by the acceptability gate (never raised)."""

    EMPTY_CONTENT = "EmptyContent"
    TOO_LONG = "TooLong"
    SPAM_HEURISTIC_FAILED = "SpamHeuristicFailed"
    PROHIBITED_WORD = "ProhibitedWord"
    INVALID_IDENTITY = "InvalidIdentity"


class FolioError(Exception):
    """Base error converted to a JSON response by the app-level handler."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFound(FolioError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Tweet not found"


class Unauthorized(FolioError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"


class Forbidden(FolioError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"


class StorageUnavailable(FolioError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_message = "Storage unavailable"


class Conflict(FolioError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflict"


class BadRequest(FolioError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Bad request"


class InvalidContent(BadRequest):
    """Gate rejection surfaced to the client with the gate's message."""

    default_message = "Invalid content"

    def __init__(self, message: str | None = None, code: ValidationCode | None = None):
        super().__init__(message)
        self.code = code
