"""User service for business logic."""

from typing import List, Optional

from user_service.core.exceptions import (
    ConstraintViolationError,
    DuplicateEmailError,
    UserNotFoundError,
    ValidationError,
)
from user_service.core.logging import get_logger
from user_service.models.user import User
from user_service.repositories.user_repo import UserRepo
from user_service.services.validation import validate_user_data, validate_user_id

logger = get_logger(__name__)


class UserService:
    """User service for business logic.

    Validates input, enforces email uniqueness and existence preconditions,
    and calls ``UserRepo`` once per mutation. Email collisions surface as
    ``DuplicateEmailError`` whether the pre-check or the store caught them.
    """

    def __init__(self, user_repo: UserRepo):
        """Initialize the user service."""
        self.user_repo = user_repo

    def create_user(self, name: str, email: str, age: Optional[int] = None) -> User:
        """Create a new user."""
        logger.debug(f"Creating user: name={name}, email={email}, age={age}")

        validate_user_data(name, email, age)

        if self.user_repo.exists_by_email(email):
            logger.warning(f"Attempt to create user with existing email: {email}")
            raise DuplicateEmailError(email)

        try:
            user = self.user_repo.create(User(name=name, email=email, age=age))
        except ConstraintViolationError as e:
            # Another writer took the email between the check and the insert
            logger.warning(f"Email taken during create: {email}")
            raise DuplicateEmailError(email) from e

        logger.info(f"Created user {user.id}")
        return user

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        """Get a user by ID."""
        try:
            validate_user_id(user_id)
        except ValidationError:
            logger.warning(f"Invalid user ID: {user_id}")
            raise
        return self.user_repo.find_by_id(user_id)

    def get_user_by_email(self, email: str) -> Optional[User]:
        """Get a user by email."""
        if not isinstance(email, str) or not email.strip():
            logger.warning("Empty email provided")
            raise ValidationError("Email cannot be empty")
        return self.user_repo.find_by_email(email)

    def get_all_users(self) -> List[User]:
        """Get all users ordered by ID."""
        return self.user_repo.find_all()

    def update_user(
        self, user_id: int, name: str, email: str, age: Optional[int] = None
    ) -> User:
        """Replace a user's name, email and age."""
        logger.debug(
            f"Updating user: id={user_id}, name={name}, email={email}, age={age}"
        )

        validate_user_id(user_id)

        # Existence is checked before the new values are validated
        existing = self.user_repo.find_by_id(user_id)
        if existing is None:
            raise UserNotFoundError(user_id)

        validate_user_data(name, email, age)

        if existing.email != email and self.user_repo.exists_by_email(email):
            logger.warning(f"Attempt to update user with existing email: {email}")
            raise DuplicateEmailError(email)

        existing.name = name
        existing.email = email
        existing.age = age

        try:
            updated = self.user_repo.update(existing)
        except ConstraintViolationError as e:
            logger.warning(f"Email taken during update: {email}")
            raise DuplicateEmailError(email) from e

        logger.info(f"Updated user {updated.id}")
        return updated

    def delete_user(self, user_id: int) -> bool:
        """Delete a user. Returns ``False`` if it did not exist."""
        try:
            validate_user_id(user_id)
        except ValidationError:
            logger.warning(f"Invalid user ID for deletion: {user_id}")
            raise

        deleted = self.user_repo.delete(user_id)
        if not deleted:
            logger.warning(f"User not found for deletion: {user_id}")
        return deleted
