"""Conftest for service tests."""

from unittest.mock import Mock

import pytest

from user_service.repositories.user_repo import UserRepo
from user_service.services.user_service import UserService


@pytest.fixture
def mock_user_repo():
    """UserRepo double limited to the real UserRepo methods."""
    return Mock(spec=UserRepo)


@pytest.fixture
def mocked_user_service(mock_user_repo):
    """UserService over a mocked repository."""
    return UserService(mock_user_repo)
