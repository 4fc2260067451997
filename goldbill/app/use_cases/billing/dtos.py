"""Data Transfer Objects for Billing Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field
from goldbill.domain.customer import Customer
from goldbill.domain.gold_calculation import GoldCalculation
from goldbill.domain.invoice import Invoice, InvoiceKind, InvoiceStatus, PaymentType
from goldbill.domain.invoice_item import InvoiceItem


# --- Customers ---------------------------------------------------------------

class CreateCustomerCommandDTO(BaseModel):
    """
    Command DTO for registering a customer

    Used as input to CreateCustomer use case.
    """

    customer_id: str = Field(..., description="Business identifier (e.g., CU001)")
    name: str
    phone: str
    email: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None


class CustomerResponseDTO(BaseModel):
    id: str
    customer_id: str
    name: str
    phone: str
    email: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, customer: Customer) -> "CustomerResponseDTO":
        return cls(
            id=customer.id,
            customer_id=customer.customer_id,
            name=customer.name,
            phone=customer.phone,
            email=customer.email,
            address=customer.address,
            city=customer.city,
            state=customer.state,
            created_at=customer.created_at,
        )


class ListCustomersResponseDTO(BaseModel):
    customers: List[CustomerResponseDTO]
    total: int = Field(..., description="Number of customers matching the filter")
    limit: int
    offset: int


# --- Gold calculations -------------------------------------------------------

class CreateCalculationCommandDTO(BaseModel):
    """
    Command DTO for saving a gold calculation

    pure_gold_weight and total_value are never accepted; they are computed.
    """

    customer_id: Optional[str] = Field(default=None, description="Optional Customer.id")
    weight: Decimal = Field(..., description="Gross weight in grams")
    purity: Decimal = Field(..., description="Purity percentage in (0, 100]")
    gold_rate: Optional[Decimal] = Field(default=None, description="Rate per gram of pure gold")
    description: Optional[str] = None


class CalculationResponseDTO(BaseModel):
    id: str
    customer_id: Optional[str] = None
    weight: Decimal
    purity: Decimal
    pure_gold_weight: Decimal
    gold_rate: Optional[Decimal] = None
    total_value: Optional[Decimal] = None
    description: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, calculation: GoldCalculation) -> "CalculationResponseDTO":
        return cls(
            id=calculation.id,
            customer_id=calculation.customer_id,
            weight=calculation.weight,
            purity=calculation.purity,
            pure_gold_weight=calculation.pure_gold_weight,
            gold_rate=calculation.gold_rate,
            total_value=calculation.total_value,
            description=calculation.description,
            created_at=calculation.created_at,
        )


# --- Invoices ----------------------------------------------------------------

class InvoiceItemInputDTO(BaseModel):
    """
    Invoice item as submitted

    Rate items use description/weight/purity/rate; touch items use
    item_name/pieces/net_weight/touch/old_balance. Derived values
    (amount, fine_gold) are never accepted.
    """

    description: Optional[str] = None
    weight: Optional[Decimal] = None
    purity: Optional[Decimal] = None
    rate: Optional[Decimal] = None

    item_name: Optional[str] = None
    pieces: Optional[int] = None
    net_weight: Optional[Decimal] = None
    touch: Optional[Decimal] = None
    old_balance: Optional[Decimal] = None


class CreateInvoiceCommandDTO(BaseModel):
    """
    Command DTO for creating an invoice

    Used as input to CreateInvoice use case.
    """

    customer_id: str = Field(..., description="Customer.id the invoice is issued to")
    kind: InvoiceKind = Field(default=InvoiceKind.RATE)
    items: List[InvoiceItemInputDTO]
    making_charges: Decimal = Field(default=Decimal("0"))
    tax_percentage: Decimal = Field(default=Decimal("3"))
    status: InvoiceStatus = Field(default=InvoiceStatus.PENDING)
    payment_type: PaymentType = Field(default=PaymentType.CASH)
    payment_details: Optional[str] = None
    due_date: Optional[date] = Field(default=None, description="Defaults to creation date + due days")

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
                "status": "pending",
            }
        }


class InvoiceItemDTO(BaseModel):
    kind: InvoiceKind
    position: int

    description: Optional[str] = None
    weight: Optional[Decimal] = None
    purity: Optional[Decimal] = None
    rate: Optional[Decimal] = None
    amount: Optional[Decimal] = None

    item_name: Optional[str] = None
    pieces: Optional[int] = None
    net_weight: Optional[Decimal] = None
    touch: Optional[Decimal] = None
    fine_gold: Optional[Decimal] = None
    old_balance: Optional[Decimal] = None

    @classmethod
    def from_entity(cls, item: InvoiceItem) -> "InvoiceItemDTO":
        return cls(
            kind=item.kind,
            position=item.position,
            description=item.description,
            weight=item.weight,
            purity=item.purity,
            rate=item.rate,
            amount=item.amount,
            item_name=item.item_name,
            pieces=item.pieces,
            net_weight=item.net_weight,
            touch=item.touch,
            fine_gold=item.fine_gold,
            old_balance=item.old_balance,
        )


class InvoiceResponseDTO(BaseModel):
    """
    Response DTO for invoice operations

    Rate invoices fill making_charges..total; touch invoices fill total_pieces..total_old_balance.
    """

    id: str
    invoice_number: str
    customer_id: str
    kind: InvoiceKind
    status: InvoiceStatus
    payment_type: PaymentType
    payment_details: Optional[str] = None

    making_charges: Optional[Decimal] = None
    tax_percentage: Optional[Decimal] = None
    subtotal: Optional[Decimal] = None
    tax_amount: Optional[Decimal] = None
    total: Optional[Decimal] = None

    total_pieces: Optional[int] = None
    total_net_weight: Optional[Decimal] = None
    total_fine_gold: Optional[Decimal] = None
    total_old_balance: Optional[Decimal] = None

    due_date: Optional[date] = None
    created_at: datetime
    items: List[InvoiceItemDTO] = Field(default_factory=list)
    customer: Optional[CustomerResponseDTO] = None

    @classmethod
    def from_entity(
        cls,
        invoice: Invoice,
        items: List[InvoiceItem],
        customer: Optional[Customer] = None,
    ) -> "InvoiceResponseDTO":
        return cls(
            id=invoice.id,
            invoice_number=invoice.invoice_number,
            customer_id=invoice.customer_id,
            kind=invoice.kind,
            status=invoice.status,
            payment_type=invoice.payment_type,
            payment_details=invoice.payment_details,
            making_charges=invoice.making_charges,
            tax_percentage=invoice.tax_percentage,
            subtotal=invoice.subtotal,
            tax_amount=invoice.tax_amount,
            total=invoice.total,
            total_pieces=invoice.total_pieces,
            total_net_weight=invoice.total_net_weight,
            total_fine_gold=invoice.total_fine_gold,
            total_old_balance=invoice.total_old_balance,
            due_date=invoice.due_date,
            created_at=invoice.created_at,
            items=[InvoiceItemDTO.from_entity(item) for item in items],
            customer=CustomerResponseDTO.from_entity(customer) if customer else None,
        )


class ListInvoicesResponseDTO(BaseModel):
    invoices: List[InvoiceResponseDTO]
    total: int
    limit: int
    offset: int


# --- Dashboard ---------------------------------------------------------------

class DashboardStatsDTO(BaseModel):
    """
    Dashboard summary numbers

    today_invoices counts every paid invoice regardless of its creation date.
    """

    total_customers: int
    today_invoices: int
    total_revenue: Decimal = Field(..., description="Sum of total over paid invoices")
    gold_processed: Decimal = Field(..., description="Sum of weight over all calculations")

    class Config:
        json_schema_extra = {
            "example": {
                "total_customers": 50,
                "today_invoices": 4,
                "total_revenue": "12010.80",
                "gold_processed": "142.500",
            }
        }
