"""User model."""

from datetime import datetime, timezone

from sqlalchemy import TIMESTAMP, Column, Integer, String
from sqlalchemy.types import TypeDecorator

from . import Base

MAX_NAME_LENGTH = 100
MAX_EMAIL_LENGTH = 150


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UTCTimestamp(TypeDecorator):
    """Timezone-aware UTC timestamp on every backend.

    SQLite stores timestamps without an offset, so values are normalized to
    UTC on the way in and tagged as UTC again on the way out.
    """

    impl = TIMESTAMP(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value

    def process_result_value(self, value, dialect):
        if value is None:
            return value
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(MAX_NAME_LENGTH), nullable=False)
    email = Column(String(MAX_EMAIL_LENGTH), unique=True, nullable=False, index=True)
    age = Column(Integer, nullable=True)
    created_at = Column(UTCTimestamp(), nullable=False, default=_utcnow)

    # Ids are never handed out twice, even after the highest row is deleted
    __table_args__ = ({"sqlite_autoincrement": True},)

    def __repr__(self):
        return (
            f"<User(id={self.id}, name='{self.name}', email='{self.email}', "
            f"age={self.age}, created_at={self.created_at})>"
        )
