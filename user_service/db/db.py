"""Database connection manager and session factory."""

from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from user_service.core.logging import get_logger
from user_service.models import Base

logger = get_logger(__name__)


def safe_url(database_url: str) -> str:
    """Database URL without credentials, for logs."""
    return database_url.rsplit("@", 1)[-1]


class Database:
    """Process-scoped store connection.

    Owns the engine and the session factory handed to repositories. Created
    once at startup and released with ``dispose()`` at shutdown.
    """

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        pool_pre_ping: bool = True,
    ):
        if not database_url:
            raise ValueError("Database URL is required")

        self.database_url = database_url
        logger.info(f"Initializing database engine for {safe_url(database_url)}")

        engine_kwargs = {"echo": echo, "pool_pre_ping": pool_pre_ping}
        if database_url == "sqlite://" or database_url.endswith(":memory:"):
            # One shared connection, otherwise every session sees an empty db
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            engine_kwargs["poolclass"] = StaticPool

        self._engine: Optional[Engine] = create_engine(database_url, **engine_kwargs)
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self._engine,
            expire_on_commit=False,  # Records stay readable after their session closes
        )
        logger.info("Database engine initialized")

    @property
    def engine(self) -> Engine:
        """Get the SQLAlchemy engine."""
        if self._engine is None:
            raise RuntimeError("Database has been disposed")
        return self._engine

    @property
    def is_available(self) -> bool:
        """Whether the engine is still open."""
        return self._engine is not None

    def get_session_local(self):
        """Get the session factory for repositories."""
        if self._engine is None:
            raise RuntimeError("Database has been disposed")
        return self.SessionLocal

    def create_schema(self) -> None:
        """Create missing tables."""
        Base.metadata.create_all(self.engine)
        logger.info("Database schema ensured")

    def dispose(self) -> None:
        """Close all pooled connections. Safe to call more than once."""
        if self._engine is not None:
            logger.info("Closing database engine")
            self._engine.dispose()
            self._engine = None
            logger.info("Database engine closed")
