"""SQLAlchemy models for the User Service."""

from typing import Any

from sqlalchemy.orm import declarative_base

# Create the declarative base
Base: Any = declarative_base()

# Import all models so they're registered with Base.metadata
from .user import User  # noqa: E402

__all__ = [
    "Base",
    "User",
]
