"""User schemas for rendering records."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class UserRead(BaseModel):
    """Schema for user data shown to the operator."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    age: Optional[int] = None
    created_at: datetime

    def display(self) -> str:
        """Single-line text form used by the console."""
        age = self.age if self.age is not None else "-"
        created = self.created_at.strftime("%Y-%m-%d %H:%M:%S")
        return (
            f"User(id={self.id}, name='{self.name}', email='{self.email}', "
            f"age={age}, created_at={created})"
        )
