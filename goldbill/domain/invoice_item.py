"""Invoice Item Domain Entity

Line items of an invoice. Both item variants share one table; columns that
do not belong to an item's kind stay NULL.
"""

from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import ForeignKey, Integer, Numeric, String
from goldbill.domain.base import BaseModel, generate_uuid
from goldbill.domain.invoice import InvoiceKind


class InvoiceItem(BaseModel, table=True):
    """
    Invoice Item - Individual line of an invoice

    Domain Rules:
    - Each item belongs to exactly one invoice, ordered by position
    - kind=rate:  description, weight, purity, rate; amount = weight * purity / 100 * rate
    - kind=touch: item_name, pieces, net_weight, touch, old_balance;
                  fine_gold = net_weight * touch / 100
    """

    __tablename__ = "invoice_items"
    __table_args__ = (
        Index('ix_invoice_items_invoice_id', 'invoice_id'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
    )

    invoice_id: Optional[str] = Field(
        default=None,
        sa_column=Column(String(36), ForeignKey("invoices.id", ondelete="CASCADE"), nullable=False),
        description="FK to Invoice.id, assigned when the invoice is stored"
    )

    position: int = Field(
        default=0,
        sa_column=Column(Integer, nullable=False),
        description="Zero-based order of the item within the invoice"
    )

    kind: InvoiceKind = Field(
        description="Item variant (rate or touch)"
    )

    # rate variant
    description: Optional[str] = Field(
        default=None,
        sa_column=Column(String(255), nullable=True),
    )

    weight: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(10, 3), nullable=True),
    )

    purity: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(5, 2), nullable=True),
    )

    rate: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(12, 2), nullable=True),
    )

    amount: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(14, 2), nullable=True),
    )

    # touch variant
    item_name: Optional[str] = Field(
        default=None,
        sa_column=Column(String(255), nullable=True),
    )

    pieces: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, nullable=True),
    )

    net_weight: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(10, 3), nullable=True),
    )

    touch: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(5, 2), nullable=True),
    )

    fine_gold: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(10, 3), nullable=True),
    )

    old_balance: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(10, 3), nullable=True),
    )
