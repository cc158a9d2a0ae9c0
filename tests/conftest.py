"""Main conftest.py for the test suite."""

import os

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from user_service.models import Base
from user_service.models.user import User
from user_service.repositories.user_repo import UserRepo
from user_service.services.user_service import UserService

# Test database configuration
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite://")


@pytest.fixture(scope="session")
def test_engine():
    """Create test database engine and tables once per session."""
    if TEST_DATABASE_URL.startswith("sqlite"):
        engine = create_engine(
            TEST_DATABASE_URL,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(TEST_DATABASE_URL)
    Base.metadata.drop_all(engine)
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(scope="session")
def test_session_factory(test_engine):
    """Create session factory for tests."""
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=test_engine,
        expire_on_commit=False,  # Prevent DetachedInstanceError
    )


@pytest.fixture
def test_session(test_session_factory):
    """Create a clean database session for each test."""
    session = test_session_factory()
    try:
        yield session
    finally:
        # Rollback any uncommitted changes and close
        session.rollback()
        session.close()


@pytest.fixture(autouse=True)
def clean_db(test_session):
    """Automatically clean database state before each test."""
    test_session.query(User).delete()
    test_session.commit()


@pytest.fixture
def user_repo(test_session_factory):
    """UserRepo instance with test session factory."""
    return UserRepo(test_session_factory)


@pytest.fixture
def user_service(user_repo):
    """UserService instance over the test repository."""
    return UserService(user_repo)


@pytest.fixture
def sample_user(test_session):
    """Create a test user."""
    user = User(name="Test User", email="testuser@example.com", age=30)
    test_session.add(user)
    test_session.commit()
    test_session.refresh(user)
    return user


@pytest.fixture
def sample_users(test_session):
    """Create multiple test users."""
    users = [
        User(name="Alice", email="alice@example.com", age=25),
        User(name="Bob", email="bob@example.com", age=None),
        User(name="Charlie", email="charlie@example.com", age=40),
    ]

    for user in users:
        test_session.add(user)
    test_session.commit()

    for user in users:
        test_session.refresh(user)

    return users
