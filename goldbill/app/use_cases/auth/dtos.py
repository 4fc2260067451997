"""Data Transfer Objects for Auth Use Cases"""

from datetime import datetime
from pydantic import BaseModel, Field
from goldbill.domain.user import User


class LoginCommandDTO(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserResponseDTO(BaseModel):
    """Public view of a user; the password hash is never exposed"""

    id: str
    username: str
    created_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserResponseDTO":
        return cls(id=user.id, username=user.username, created_at=user.created_at)
