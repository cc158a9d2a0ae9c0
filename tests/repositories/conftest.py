"""Shared fixtures for repository tests."""

from unittest.mock import Mock

import pytest
from sqlalchemy.exc import OperationalError

from user_service.repositories import UserRepo


@pytest.fixture
def mock_session_factory():
    """Mock session factory with mock session."""
    mock_session = Mock()
    mock_factory = Mock(return_value=mock_session)
    return mock_factory, mock_session


@pytest.fixture
def failing_user_repo():
    """UserRepo whose sessions fail on every query."""
    mock_session = Mock()
    error = OperationalError("SELECT", {}, Exception("database is locked"))
    mock_session.query.side_effect = error
    mock_session.get.side_effect = error
    mock_session.flush.side_effect = error
    mock_factory = Mock(return_value=mock_session)
    return UserRepo(mock_factory), mock_session
