"""Error taxonomy for CRMPro.

Every error raised by the auth and contact flows derives from CRMProError and
carries the HTTP status the API boundary should answer with.
"""

from typing import Optional

from fastapi import status


class CRMProError(Exception):
    """Base error with a client-safe message and an HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def with_status(self, status_code: int) -> "CRMProError":
        """Return the same error re-targeted to a different HTTP status."""
        self.status_code = status_code
        return self


class ValidationError(CRMProError):
    """Required fields are missing."""
    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(CRMProError):
    """A user with the same email already exists."""
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(CRMProError):
    status_code = status.HTTP_404_NOT_FOUND


class InvalidCredentials(CRMProError):
    status_code = status.HTTP_400_BAD_REQUEST


class InvalidToken(CRMProError):
    """Verification token does not match any user."""
    status_code = status.HTTP_400_BAD_REQUEST


class Unauthorized(CRMProError):
    """Session token is missing, malformed or expired."""
    status_code = status.HTTP_401_UNAUTHORIZED
