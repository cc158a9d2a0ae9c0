"""Error taxonomy for the User Service.

Repository code translates low-level SQLAlchemy failures into these types so
that services and the console never have to inspect driver exceptions.
"""

from typing import Optional


class UserServiceError(Exception):
    """Base class for all User Service errors."""


class ValidationError(UserServiceError, ValueError):
    """Raised when input fails a static rule, before any storage access."""


class DuplicateEmailError(UserServiceError, ValueError):
    """Raised when an email is already taken by another user."""

    def __init__(self, email: str, message: Optional[str] = None):
        self.email = email
        super().__init__(message or f"User with email {email} already exists")


class UserNotFoundError(UserServiceError, LookupError):
    """Raised when an operation requires a user that does not exist."""

    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__(f"User with ID {user_id} not found")


class StorageError(UserServiceError):
    """Raised when the store fails mid-operation (after rollback)."""


class ConstraintViolationError(StorageError):
    """Raised when the store rejects a write on an integrity constraint."""


__all__ = [
    "UserServiceError",
    "ValidationError",
    "DuplicateEmailError",
    "UserNotFoundError",
    "StorageError",
    "ConstraintViolationError",
]
