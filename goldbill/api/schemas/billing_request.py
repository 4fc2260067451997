"""Request schemas for Billing API

Pydantic models for validating incoming HTTP requests.
"""

from datetime import date
from decimal import Decimal
from typing import Annotated, Any, List, Literal, Optional, Union
from pydantic import BaseModel, Discriminator, Field, Tag
from goldbill.domain.calculator import MAX_AMOUNT, MAX_PIECES, MAX_RATE, MAX_WEIGHT
from goldbill.domain.invoice import InvoiceStatus, PaymentType


class CreateCustomerRequestSchema(BaseModel):
    """
    Request schema for registering a customer

    Used for POST /customers endpoint.
    """

    customer_id: str = Field(
        ...,
        min_length=1,
        max_length=50,
        description="Business identifier, unique (e.g., CU001)"
    )

    name: str = Field(..., min_length=1, description="Customer name")

    phone: str = Field(..., min_length=1, description="Contact phone number")

    email: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "customer_id": "CU013",
                "name": "Suresh Kumar",
                "phone": "9876543222",
                "city": "Chennai",
                "state": "Tamil Nadu",
            }
        }


class CreateCalculationRequestSchema(BaseModel):
    """
    Request schema for saving a gold calculation

    Used for POST /calculations endpoint. pure_gold_weight and total_value are
    computed by the server.
    """

    customer_id: Optional[str] = Field(default=None, description="Optional Customer.id")

    weight: Decimal = Field(
        ..., gt=0, le=MAX_WEIGHT, description="Gross weight in grams (must be > 0)"
    )

    purity: Decimal = Field(..., gt=0, le=100, description="Purity percentage in (0, 100]")

    gold_rate: Optional[Decimal] = Field(
        default=None,
        gt=0,
        le=MAX_RATE,
        description="Rate per gram of pure gold; total_value is computed when given"
    )

    description: Optional[str] = None


class RateItemSchema(BaseModel):
    description: str = Field(default="", description="Item description")
    weight: Decimal = Field(..., gt=0, le=MAX_WEIGHT)
    purity: Decimal = Field(..., gt=0, le=100)
    rate: Decimal = Field(..., gt=0, le=MAX_RATE, description="Rate per gram of pure gold")


class TouchItemSchema(BaseModel):
    item_name: str = Field(default="", description="Item name")
    pieces: int = Field(default=0, ge=0, le=MAX_PIECES)
    net_weight: Decimal = Field(..., gt=0, le=MAX_WEIGHT)
    touch: Decimal = Field(..., gt=0, le=100, description="Touch percentage in (0, 100]")
    old_balance: Optional[Decimal] = Field(default=None, ge=0, le=MAX_WEIGHT)


class InvoiceRequestBase(BaseModel):
    customer_id: str = Field(..., min_length=1, description="Customer.id the invoice is issued to")
    status: InvoiceStatus = Field(default=InvoiceStatus.PENDING)
    payment_type: PaymentType = Field(default=PaymentType.CASH)
    payment_details: Optional[str] = None
    due_date: Optional[date] = None


class RateInvoiceRequestSchema(InvoiceRequestBase):
    """
    Rate-based invoice

    Totals are computed from the items, making_charges and tax_percentage;
    any client supplied totals are ignored.
    """

    kind: Literal["rate"] = "rate"
    items: List[RateItemSchema] = Field(..., min_length=1)
    making_charges: Decimal = Field(default=Decimal("0"), ge=0, le=MAX_AMOUNT)
    tax_percentage: Decimal = Field(default=Decimal("3"), ge=0, le=100)

    class Config:
        json_schema_extra = {
            "example": {
                "customer_id": "5f0c6c1e-8a4b-4f57-9a57-0b6d3b8f3c11",
                "kind": "rate",
                "items": [
                    {"description": "22K bangle", "weight": "5.000", "purity": "92.00", "rate": "525.00"}
                ],
                "making_charges": "500.00",
                "tax_percentage": "3.00",
            }
        }


class TouchInvoiceRequestSchema(InvoiceRequestBase):
    """Touch-based invoice; fine gold and totals are computed from the items"""

    kind: Literal["touch"]
    items: List[TouchItemSchema] = Field(..., min_length=1)


def _invoice_kind(value: Any) -> str:
    # Missing kind means a rate invoice
    if isinstance(value, dict):
        return value.get("kind") or "rate"
    return getattr(value, "kind", "rate")


CreateInvoiceRequestSchema = Annotated[
    Union[
        Annotated[RateInvoiceRequestSchema, Tag("rate")],
        Annotated[TouchInvoiceRequestSchema, Tag("touch")],
    ],
    Discriminator(_invoice_kind),
]
