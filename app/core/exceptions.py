"""Application exceptions.

HTTP-facing errors subclass ``HTTPException`` so routers and services can
raise them directly; ``app.main`` renders them in the response envelope.
Transport failures of the cache and the artist store are plain exceptions
caught at the service boundary.
"""
from fastapi import HTTPException, status


class AppException(HTTPException):
    """Base class for errors surfaced to API clients."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Internal server error"

    def __init__(self, detail: str | None = None):
        super().__init__(status_code=self.status_code, detail=detail or self.default_detail)


class BadRequestException(AppException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Bad request"


class ValidationException(BadRequestException):
    """Raised when a profile patch has no allow-listed fields."""

    default_detail = "No valid fields to update"


class NotFoundException(AppException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found"


class ServiceUnavailableException(AppException):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = "Service temporarily unavailable"


class CacheUnavailableError(Exception):
    """The profile cache could not be read."""


class StoreUnavailableError(Exception):
    """The authoritative artist store failed or timed out."""
