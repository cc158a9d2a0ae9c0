"""User repository."""

from typing import List, Optional, cast

from sqlalchemy import func
from sqlalchemy.orm import Session

from user_service.core.exceptions import UserNotFoundError
from user_service.core.logging import get_logger
from user_service.models.user import User
from user_service.repositories.base_repo import BaseRepo

logger = get_logger(__name__)


class UserRepo(BaseRepo):
    """User repository.

    Every method opens, commits (or rolls back) and closes its own
    transaction. Reads return ``None`` for absent records; ``find_all`` and
    ``exists_by_email`` degrade to an empty list and ``False`` when the store
    fails.
    """

    def _create_implementation(self, session: Session, user: User) -> User:
        """Implementation of user creation."""
        logger.debug(f"Creating user with email: {user.email}")
        session.add(user)
        session.flush()  # Generate ID without committing

        logger.info(f"Created user: {user.id} ({user.email})")
        return user

    def create(self, user: User) -> User:
        """Insert a new user and return it with ``id`` and ``created_at`` set."""
        return cast(
            User,
            self._execute_with_session(
                lambda session: self._create_implementation(session, user),
                operation_name="create",
            ),
        )

    def _find_by_id_implementation(
        self, session: Session, user_id: int
    ) -> Optional[User]:
        """Implementation of user retrieval."""
        user = session.get(User, user_id)
        logger.debug(f"Find by id {user_id}: {'found' if user else 'not found'}")
        return user

    def find_by_id(self, user_id: int) -> Optional[User]:
        """Get a user by id."""
        return cast(
            Optional[User],
            self._execute_with_session(
                lambda session: self._find_by_id_implementation(session, user_id),
                operation_name="find_by_id",
            ),
        )

    def _find_by_email_implementation(
        self, session: Session, email: str
    ) -> Optional[User]:
        """Implementation of user retrieval by email."""
        user = session.query(User).filter(User.email == email).one_or_none()
        logger.debug(f"Find by email {email}: {'found' if user else 'not found'}")
        return cast(Optional[User], user)

    def find_by_email(self, email: str) -> Optional[User]:
        """Get a user by email."""
        return cast(
            Optional[User],
            self._execute_with_session(
                lambda session: self._find_by_email_implementation(session, email),
                operation_name="find_by_email",
            ),
        )

    def _find_all_implementation(self, session: Session) -> List[User]:
        """Implementation of all users retrieval."""
        users = session.query(User).order_by(User.id).all()
        logger.debug(f"Found {len(users)} users")
        return cast(List[User], users)

    def find_all(self) -> List[User]:
        """Get all users ordered by id. Returns ``[]`` if the store fails."""
        return cast(
            List[User],
            self._execute_fail_soft(
                lambda session: self._find_all_implementation(session),
                default=[],
                operation_name="find_all",
            ),
        )

    def _update_implementation(self, session: Session, user: User) -> User:
        """Implementation of user update."""
        existing = session.get(User, user.id)
        if existing is None:
            raise UserNotFoundError(user.id)

        # Only the mutable fields, id and created_at stay as stored
        existing.name = user.name
        existing.email = user.email
        existing.age = user.age
        session.flush()

        logger.info(f"Updated user: {existing.id}")
        return cast(User, existing)

    def update(self, user: User) -> User:
        """Replace the mutable fields of an existing user."""
        return cast(
            User,
            self._execute_with_session(
                lambda session: self._update_implementation(session, user),
                operation_name="update",
            ),
        )

    def _delete_implementation(self, session: Session, user_id: int) -> bool:
        """Implementation of user deletion."""
        user = session.get(User, user_id)
        if user is None:
            logger.warning(f"User not found for deletion: {user_id}")
            return False

        session.delete(user)
        session.flush()
        logger.info(f"Deleted user: {user_id}")
        return True

    def delete(self, user_id: int) -> bool:
        """Delete a user. Returns whether a row was removed."""
        return cast(
            bool,
            self._execute_with_session(
                lambda session: self._delete_implementation(session, user_id),
                operation_name="delete",
            ),
        )

    def _exists_by_email_implementation(self, session: Session, email: str) -> bool:
        """Implementation of email existence check."""
        count = (
            session.query(func.count(User.id)).filter(User.email == email).scalar()
        )
        exists = bool(count)
        logger.debug(f"Email {email} exists: {exists}")
        return exists

    def exists_by_email(self, email: str) -> bool:
        """Check whether an email is taken. Returns ``False`` if the store fails."""
        return cast(
            bool,
            self._execute_fail_soft(
                lambda session: self._exists_by_email_implementation(session, email),
                default=False,
                operation_name="exists_by_email",
            ),
        )
