"""User Service main application."""

import argparse
import logging
import sys
from typing import Callable, Optional, Sequence

from user_service.console import ConsoleInterface
from user_service.core.config import Settings, get_settings
from user_service.core.logging import (
    configure_sqlalchemy_logging,
    get_logger,
    log_shutdown_info,
    log_startup_info,
    setup_logging,
)
from user_service.db.db import Database, safe_url
from user_service.repositories.user_repo import UserRepo
from user_service.services.user_service import UserService

logger = get_logger(__name__)


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="user-service", description="Manage user records from a text menu."
    )
    parser.add_argument(
        "--database-url", help="SQLAlchemy database URL (overrides DATABASE_URL)"
    )
    parser.add_argument(
        "--no-create-schema",
        action="store_true",
        help="Do not create the users table at startup",
    )
    parser.add_argument("--log-config", help="Path to a YAML logging config file")
    return parser.parse_args(argv)


def build_service(database: Database) -> UserService:
    """Wire the repository and service over an initialized database."""
    user_repo = UserRepo(database.get_session_local())
    return UserService(user_repo)


def main(
    argv: Optional[Sequence[str]] = None,
    settings: Optional[Settings] = None,
    input_func: Callable[[str], str] = input,
) -> int:
    """Run the application. Returns the process exit code."""
    args = _parse_args(argv)
    settings = settings or get_settings()
    database_url = args.database_url or settings.DATABASE_URL

    # Initialize logging first
    setup_logging(
        config_path=args.log_config,
        default_level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        environment=settings.ENVIRONMENT,
    )
    configure_sqlalchemy_logging(echo=settings.SQL_ECHO)
    log_startup_info(
        settings.PROJECT_NAME, settings.ENVIRONMENT, database=safe_url(database_url)
    )

    database: Optional[Database] = None
    try:
        database = Database(
            database_url,
            echo=settings.SQL_ECHO,
            pool_pre_ping=settings.POOL_PRE_PING,
        )
        if settings.CREATE_SCHEMA and not args.no_create_schema:
            database.create_schema()

        console = ConsoleInterface(build_service(database), input_func=input_func)
        logger.info("Application components initialized successfully")
        console.start()
        return 0
    except Exception:
        logger.exception("Fatal error while running the application")
        return 1
    finally:
        if database is not None and database.is_available:
            database.dispose()
        log_shutdown_info(settings.PROJECT_NAME)


if __name__ == "__main__":
    sys.exit(main())
