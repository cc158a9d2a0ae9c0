"""Transaction context manager used by every repository call."""

from contextlib import contextmanager
from typing import Generator

from sqlalchemy.orm import Session

from user_service.core.logging import get_logger

logger = get_logger(__name__)


@contextmanager
def transaction_scope(session_factory) -> Generator[Session, None, None]:
    """
    Context manager for a single unit of work.

    Opens a session, commits it when the block exits normally, rolls it back
    when the block (or the commit itself) raises, and closes it on every
    exit path.

    Usage:
        with transaction_scope(SessionLocal) as session:
            session.add(user)
            # Committed on exit

    Args:
        session_factory: SQLAlchemy session factory (e.g., SessionLocal)

    Yields:
        Session: SQLAlchemy session scoped to the block

    Raises:
        Exception: Any exception from the block or the commit (after rollback)
    """
    session = session_factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        try:
            session.close()
        except Exception as e:
            # The outcome is already decided, a failed close must not mask it
            logger.warning(f"Error closing session: {e}")
