"""Tests for logging setup."""

import logging
from unittest.mock import patch

from user_service.core.logging import (
    configure_sqlalchemy_logging,
    get_logger,
    log_shutdown_info,
    log_startup_info,
    setup_logging,
)

YAML_CONFIG = """
version: 1
disable_existing_loggers: false
handlers:
  null_handler:
    class: logging.NullHandler
loggers:
  user_service.test_marker:
    level: ERROR
    handlers: [null_handler]
    propagate: false
"""


class TestLogging:
    """Test cases for logging configuration."""

    def test_setup_from_yaml(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("LOG_CFG", raising=False)
        config_file = tmp_path / "logging.yaml"
        config_file.write_text(YAML_CONFIG)

        setup_logging(config_path=str(config_file))

        assert logging.getLogger("user_service.test_marker").level == logging.ERROR
        assert (tmp_path / "logs").is_dir()

    def test_env_var_overrides_path(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        config_file = tmp_path / "from_env.yaml"
        config_file.write_text(YAML_CONFIG)
        monkeypatch.setenv("LOG_CFG", str(config_file))

        setup_logging(config_path=str(tmp_path / "missing.yaml"))

        assert logging.getLogger("user_service.test_marker").level == logging.ERROR

    def test_missing_file_falls_back(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("LOG_CFG", raising=False)

        setup_logging(config_path=str(tmp_path / "missing.yaml"))

        assert "using basic configuration" in capsys.readouterr().out

    def test_broken_file_falls_back(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("LOG_CFG", raising=False)
        config_file = tmp_path / "broken.yaml"
        config_file.write_text("version: 99\n")

        setup_logging(config_path=str(config_file))

        assert "Error loading logging configuration" in capsys.readouterr().out

    def test_configure_sqlalchemy_logging(self):
        configure_sqlalchemy_logging(echo=True)
        assert logging.getLogger("sqlalchemy.engine").level == logging.INFO

        configure_sqlalchemy_logging(echo=False)
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
        assert logging.getLogger("sqlalchemy.pool").level == logging.WARNING

    def test_get_logger(self):
        assert get_logger("user_service.x").name == "user_service.x"


class TestBanners:
    """Test cases for startup and shutdown banners."""

    def _logged_lines(self, mock_get_logger):
        return [c.args[0] for c in mock_get_logger.return_value.info.call_args_list]

    def test_startup_banner_uses_given_values(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "from-process-env")

        with patch("user_service.core.logging.get_logger") as mock_get_logger:
            log_startup_info("User Service", "staging", database="db:5432/users")

        lines = self._logged_lines(mock_get_logger)
        assert "User Service Starting Up" in lines
        assert "Environment: staging" in lines
        assert "Database: db:5432/users" in lines
        assert not any("from-process-env" in line for line in lines)

    def test_startup_banner_without_database(self):
        with patch("user_service.core.logging.get_logger") as mock_get_logger:
            log_startup_info("User Service", "development")

        lines = self._logged_lines(mock_get_logger)
        assert not any(line.startswith("Database:") for line in lines)

    def test_shutdown_banner(self):
        with patch("user_service.core.logging.get_logger") as mock_get_logger:
            log_shutdown_info("User Service")

        assert "User Service Shutting Down" in self._logged_lines(mock_get_logger)
