"""Repository layer for data access."""

from .transaction import transaction_scope
from .user_repo import UserRepo

__all__ = [
    "UserRepo",
    "transaction_scope",
]
