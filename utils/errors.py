"""
Forum error kinds.

Every error the forum raises on purpose derives from ``ForumError`` and
carries the HTTP status it is rendered with.  Anything else reaching the
HTTP layer is treated as an internal failure.
"""

from __future__ import annotations

from fastapi import status


class ForumError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInput(ForumError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Missing fields"


class Conflict(ForumError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Username already exists"


class InvalidCredentials(ForumError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Wrong password"


class Unauthenticated(ForumError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"


class Forbidden(ForumError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"


class NotFound(ForumError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not Found"


class InternalError(ForumError):
    pass


class UnknownUser(ForumError):
    """Login for a username that was never registered."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "User not found"
