"""Field rules shared by user creation and update."""

import re
from typing import Optional

from user_service.core.exceptions import ValidationError
from user_service.models.user import MAX_EMAIL_LENGTH, MAX_NAME_LENGTH

# Business rules constants
EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9+_.-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")
MIN_AGE = 0
MAX_AGE = 150


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_user_id(user_id: Optional[int]) -> None:
    """Reject missing or non-positive ids."""
    if user_id is None or not _is_int(user_id) or user_id <= 0:
        raise ValidationError("User ID must be positive")


def validate_name(name: Optional[str]) -> None:
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Name cannot be empty")
    if len(name) > MAX_NAME_LENGTH:
        raise ValidationError(f"Name cannot exceed {MAX_NAME_LENGTH} characters")


def validate_email(email: Optional[str]) -> None:
    if not isinstance(email, str) or not email.strip():
        raise ValidationError("Email cannot be empty")
    if not EMAIL_PATTERN.fullmatch(email):
        raise ValidationError("Invalid email format")
    if len(email) > MAX_EMAIL_LENGTH:
        raise ValidationError(f"Email cannot exceed {MAX_EMAIL_LENGTH} characters")


def validate_age(age: Optional[int]) -> None:
    if age is None:
        return
    if not _is_int(age) or age < MIN_AGE or age > MAX_AGE:
        raise ValidationError(f"Age must be between {MIN_AGE} and {MAX_AGE}")


def validate_user_data(
    name: Optional[str], email: Optional[str], age: Optional[int]
) -> None:
    """
    Validate user fields in a fixed order: name, email, age.

    The first failing rule is raised; later fields are not checked.

    Raises:
        ValidationError: If any field breaks its rule
    """
    validate_name(name)
    validate_email(email)
    validate_age(age)
