"""Base repository class."""

from typing import Any, Callable, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from user_service.core.exceptions import ConstraintViolationError, StorageError
from user_service.core.logging import get_logger
from user_service.repositories.transaction import transaction_scope

logger = get_logger(__name__)

T = TypeVar("T")


class BaseRepo:
    """Base repository class.

    Each public repository call runs exactly one operation inside its own
    transaction. Store failures are rolled back and re-raised as
    ``StorageError`` (``ConstraintViolationError`` for integrity failures).
    """

    def __init__(self, session_factory):
        """Initialize the repository."""
        self.session_factory = session_factory

    def _execute_with_session(
        self, operation: Callable[[Session], T], operation_name: str = "unknown"
    ) -> T:
        """Execute a function within a fresh transaction."""
        try:
            with transaction_scope(self.session_factory) as session:
                return operation(session)
        except IntegrityError as e:
            self._log_error(operation_name, e)
            raise ConstraintViolationError(
                f"Constraint violation in {operation_name}: {e.orig}"
            ) from e
        except SQLAlchemyError as e:
            self._log_error(operation_name, e)
            raise StorageError(f"Storage failure in {operation_name}: {e}") from e

    def _execute_fail_soft(
        self,
        operation: Callable[[Session], T],
        default: Any,
        operation_name: str = "unknown",
    ) -> T:
        """Execute a read, returning ``default`` if the store fails."""
        try:
            return self._execute_with_session(operation, operation_name)
        except StorageError:
            logger.error(f"{operation_name} failed, returning {default!r}")
            return default

    def _log_error(self, operation_name, error):
        """Log an error."""
        logger.error(f"Transaction rolled back in {operation_name}: {error}")
