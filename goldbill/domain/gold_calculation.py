"""Gold Calculation Domain Entity

Snapshot of a pure-gold computation saved from the calculator.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import ForeignKey, Numeric, String, Text
from goldbill.domain.base import BaseModel, generate_uuid


class GoldCalculation(BaseModel, table=True):
    """
    Gold Calculation - Persisted result of a weight/purity/rate computation

    Domain Rules:
    - pure_gold_weight = weight * purity / 100, always derived
    - total_value = pure_gold_weight * gold_rate, present only when a rate is given
    - Optional link to a Customer
    - Immutable once created
    """

    __tablename__ = "gold_calculations"
    __table_args__ = (
        Index('ix_gold_calculations_created_at', 'created_at'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
    )

    customer_id: Optional[str] = Field(
        default=None,
        sa_column=Column(String(36), ForeignKey("customers.id"), nullable=True, index=True),
        description="Optional FK to Customer.id"
    )

    weight: Decimal = Field(
        sa_column=Column(Numeric(10, 3), nullable=False),
        description="Gross weight in grams (precision: 10,3)"
    )

    purity: Decimal = Field(
        sa_column=Column(Numeric(5, 2), nullable=False),
        description="Purity percentage in (0, 100]"
    )

    pure_gold_weight: Decimal = Field(
        sa_column=Column(Numeric(10, 3), nullable=False),
        description="Derived: weight * purity / 100"
    )

    gold_rate: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(12, 2), nullable=True),
        description="Rate per gram of pure gold"
    )

    total_value: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(14, 2), nullable=True),
        description="Derived: pure_gold_weight * gold_rate"
    )

    description: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
    )
