# src/errors.py
from typing import Dict, Optional

from fastapi import HTTPException, status


class ApiError(HTTPException):
    """Base class for errors that map directly onto an HTTP status."""
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str, headers: Optional[Dict[str, str]] = None):
        super().__init__(status_code=self.status_code, detail=detail, headers=headers)


class Unauthenticated(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, detail: str = "Unauthorized"):
        super().__init__(detail, headers={"WWW-Authenticate": "Bearer"})


class Forbidden(ApiError):
    status_code = status.HTTP_403_FORBIDDEN


class NotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND


class InvalidInput(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST


class Conflict(ApiError):
    status_code = status.HTTP_409_CONFLICT


class UpstreamError(ApiError):
    """Raised when the backing store fails in the middle of an aggregation."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
