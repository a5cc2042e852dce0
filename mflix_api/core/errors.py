# Error taxonomy shared by services and mapped to HTTP by the server
# mflix_api/core/errors.py

from typing import Optional

from fastapi import status


class ApiError(Exception):
    """Base class for errors that surface to the caller as an envelope."""
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, error: Optional[str] = None):
        self.message = message
        self.error = error
        super().__init__(message)

class InvalidArgumentError(ApiError):
    """Malformed identifier or missing required field."""
    status_code = status.HTTP_400_BAD_REQUEST

class AlreadyExistsError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST

class UnauthorizedError(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED

class NotFoundError(ApiError):
    status_code = status.HTTP_404_NOT_FOUND

class InternalError(ApiError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = "Internal Server Error", error: Optional[str] = "An internal error occurred."):
        super().__init__(message, error)
