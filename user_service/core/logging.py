"""Logging configuration for the User Service."""

import logging
import logging.config
import os
import sys
from pathlib import Path
from typing import Optional

import yaml

CONFIG_DIR = Path(__file__).resolve().parent.parent.parent / "config"
LOGS_DIR = Path("logs")
BANNER_WIDTH = 50


def resolve_config_path(
    config_path: Optional[str] = None,
    environment: str = "development",
    env_key: str = "LOG_CFG",
) -> Path:
    """
    Pick the logging config file to load.

    Order: ``$LOG_CFG``, the explicit path, ``config/logging.<environment>.yaml``,
    then ``config/logging.yaml``.
    """
    explicit = os.getenv(env_key) or config_path
    if explicit:
        return Path(explicit)

    env_config = CONFIG_DIR / f"logging.{environment.lower()}.yaml"
    if env_config.exists():
        return env_config
    return CONFIG_DIR / "logging.yaml"


def setup_logging(
    config_path: Optional[str] = None,
    default_level: int = logging.INFO,
    env_key: str = "LOG_CFG",
    environment: str = "development",
) -> None:
    """
    Setup logging configuration from YAML file.

    Falls back to ``logging.basicConfig(level=default_level)`` when the file
    is missing or cannot be applied.

    Args:
        config_path: Path to logging config file
        default_level: Level used by the fallback configuration
        env_key: Environment variable name for config path override
        environment: Selects ``logging.<environment>.yaml``
    """
    path = resolve_config_path(config_path, environment, env_key)

    # File handlers in the shipped configs write under logs/
    LOGS_DIR.mkdir(exist_ok=True)

    logger = logging.getLogger(__name__)
    if not path.exists():
        print(f"Logging config file not found at {path}, using basic configuration")
        logging.basicConfig(level=default_level)
        logger.warning(f"Logging config file not found at {path}")
        return

    try:
        with open(path, "r") as f:
            logging.config.dictConfig(yaml.safe_load(f))
    except Exception as e:
        print(f"Error loading logging configuration from {path}: {e}")
        logging.basicConfig(level=default_level)
        logger.warning(f"Failed to load logging config, using basic config: {e}")
        return

    logger.info(f"Logging configured from {path}")


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance (typically for ``__name__``)."""
    return logging.getLogger(name)


def configure_sqlalchemy_logging(echo: bool = False, echo_pool: bool = False) -> None:
    """
    Configure SQLAlchemy logging levels.

    Args:
        echo: Enable SQL statement logging
        echo_pool: Enable connection pool logging
    """
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if echo else logging.WARNING
    )
    logging.getLogger("sqlalchemy.pool").setLevel(
        logging.INFO if echo_pool else logging.WARNING
    )


def log_startup_info(
    project_name: str, environment: str, database: Optional[str] = None
) -> None:
    """Log application startup information."""
    logger = get_logger(__name__)
    logger.info("=" * BANNER_WIDTH)
    logger.info(f"{project_name} Starting Up")
    logger.info("=" * BANNER_WIDTH)
    logger.info(f"Python version: {sys.version}")
    logger.info(f"Working directory: {os.getcwd()}")
    logger.info(f"Environment: {environment}")
    if database:
        logger.info(f"Database: {database}")
    logger.info("=" * BANNER_WIDTH)


def log_shutdown_info(project_name: str) -> None:
    """Log application shutdown information."""
    logger = get_logger(__name__)
    logger.info("=" * BANNER_WIDTH)
    logger.info(f"{project_name} Shutting Down")
    logger.info("=" * BANNER_WIDTH)
