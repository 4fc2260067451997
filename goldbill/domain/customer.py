"""Customer Domain Entity

A registered customer of the gold merchant.
"""

from datetime import datetime
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import String, Text
from goldbill.domain.base import BaseModel, generate_uuid


class Customer(BaseModel, table=True):
    """
    Customer - Business-facing customer record

    Domain Rules:
    - customer_id (e.g. "CU001") is unique and immutable after creation
    - phone is required, contact/address fields are optional
    - Customers are never updated or deleted
    """

    __tablename__ = "customers"
    __table_args__ = (
        Index('ix_customers_name', 'name'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Internal unique identifier (UUID)"
    )

    customer_id: str = Field(
        sa_column=Column(String(50), nullable=False, unique=True),
        description="Business-facing customer identifier (e.g., CU001)"
    )

    name: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Customer full name"
    )

    phone: str = Field(
        sa_column=Column(String(50), nullable=False),
        description="Contact phone number"
    )

    email: Optional[str] = Field(
        default=None,
        sa_column=Column(String(255), nullable=True),
    )

    address: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
    )

    city: Optional[str] = Field(
        default=None,
        sa_column=Column(String(100), nullable=True),
    )

    state: Optional[str] = Field(
        default=None,
        sa_column=Column(String(100), nullable=True),
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Registration timestamp"
    )
