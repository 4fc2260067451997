"""Invoice Domain Entity

Tracks invoices issued to customers and their derived totals.
"""

from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import Date, ForeignKey, Integer, Numeric, String, Text
from goldbill.domain.base import BaseModel, generate_uuid


class InvoiceStatus(str, Enum):
    """Invoice status types"""
    PENDING = "pending"
    PAID = "paid"
    OVERDUE = "overdue"


class InvoiceKind(str, Enum):
    """Which item variant an invoice carries"""
    RATE = "rate"    # priced items: weight, purity, rate -> amount
    TOUCH = "touch"  # gold-settled items: pieces, net weight, touch -> fine gold


class PaymentType(str, Enum):
    CASH = "cash"
    GOLD = "gold"


class Invoice(BaseModel, table=True):
    """
    Invoice - Customer invoice with a snapshot of its derived totals

    Domain Rules:
    - invoice_number must be unique (INV-<customer_id>-<YYYYMMDD>-<suffix>)
    - Linked to exactly one Customer
    - kind selects the item variant; all items of an invoice share it
    - Rate invoices: subtotal = sum(item.amount) + making_charges,
      tax_amount = subtotal * tax_percentage / 100, total = subtotal + tax_amount
    - Touch invoices: totals are sums of pieces, net weight, fine gold, old balance
    - Immutable once created
    """

    __tablename__ = "invoices"
    __table_args__ = (
        Index('ix_invoices_customer_id', 'customer_id'),
        Index('ix_invoices_status', 'status'),
        Index('ix_invoices_created_at', 'created_at'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
    )

    invoice_number: str = Field(
        sa_column=Column(String(64), nullable=False, unique=True),
        description="Unique invoice number (e.g., INV-CU001-20240115-4821)"
    )

    customer_id: str = Field(
        sa_column=Column(String(36), ForeignKey("customers.id"), nullable=False),
        description="FK to Customer.id"
    )

    kind: InvoiceKind = Field(
        default=InvoiceKind.RATE,
        description="Item variant (rate or touch)"
    )

    status: InvoiceStatus = Field(
        default=InvoiceStatus.PENDING,
        description="Invoice status (pending, paid, overdue)"
    )

    payment_type: PaymentType = Field(
        default=PaymentType.CASH,
        description="Settlement in cash or gold"
    )

    payment_details: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
    )

    # Rate-based totals
    making_charges: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(14, 2), nullable=True),
    )

    tax_percentage: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(5, 2), nullable=True),
    )

    subtotal: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(14, 2), nullable=True),
    )

    tax_amount: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(14, 2), nullable=True),
    )

    total: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(14, 2), nullable=True),
    )

    # Touch-based totals
    total_pieces: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, nullable=True),
    )

    total_net_weight: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(12, 3), nullable=True),
    )

    total_fine_gold: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(12, 3), nullable=True),
    )

    total_old_balance: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(12, 3), nullable=True),
    )

    due_date: Optional[date] = Field(
        default=None,
        sa_column=Column(Date, nullable=True),
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Invoice creation timestamp"
    )
