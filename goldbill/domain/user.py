"""User Domain Entity

Operator account used for session login.
"""

from datetime import datetime
from sqlmodel import Field, Column
from sqlalchemy import String
from goldbill.domain.base import BaseModel, generate_uuid


class User(BaseModel, table=True):
    """
    User - Login account

    Domain Rules:
    - username is unique
    - password holds "<hex scrypt digest>.<hex salt>", never the plain text
    """

    __tablename__ = "users"

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
    )

    username: str = Field(
        sa_column=Column(String(150), nullable=False, unique=True),
    )

    password: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Salted password hash"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
    )
