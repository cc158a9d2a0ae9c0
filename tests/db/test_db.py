"""Tests for the Database lifecycle."""

import pytest
from sqlalchemy import inspect

from user_service.db.db import Database, safe_url
from user_service.models.user import User


class TestDatabase:
    """Test cases for Database."""

    def test_create_schema(self):
        database = Database("sqlite://")
        try:
            database.create_schema()

            assert "users" in inspect(database.engine).get_table_names()
        finally:
            database.dispose()

    def test_in_memory_sessions_share_data(self):
        database = Database("sqlite:///:memory:")
        database.create_schema()
        try:
            factory = database.get_session_local()
            with factory() as session:
                session.add(User(name="A", email="a@example.com"))
                session.commit()

            with factory() as session:
                assert session.query(User).count() == 1
        finally:
            database.dispose()

    def test_file_database(self, tmp_path):
        database = Database(f"sqlite:///{tmp_path / 'users.db'}")
        try:
            database.create_schema()
            assert (tmp_path / "users.db").exists()
        finally:
            database.dispose()

    def test_dispose_is_idempotent(self):
        database = Database("sqlite://")
        assert database.is_available

        database.dispose()
        database.dispose()

        assert not database.is_available
        with pytest.raises(RuntimeError, match="disposed"):
            database.get_session_local()
        with pytest.raises(RuntimeError, match="disposed"):
            database.engine

    def test_empty_url_rejected(self):
        with pytest.raises(ValueError, match="Database URL is required"):
            Database("")


class TestSafeUrl:
    """Test cases for safe_url."""

    def test_strips_credentials(self):
        assert safe_url("postgresql://app:secret@db:5432/users") == "db:5432/users"

    def test_url_without_credentials_unchanged(self):
        assert safe_url("sqlite:///users.db") == "sqlite:///users.db"
