from .base import BaseModel, generate_uuid
from .customer import Customer
from .gold_calculation import GoldCalculation
from .invoice import Invoice, InvoiceStatus, InvoiceKind, PaymentType
from .invoice_item import InvoiceItem
from .user import User
from .errors import DomainError, ValidationError

__all__ = [
    "BaseModel",
    "generate_uuid",
    "Customer",
    "GoldCalculation",
    "Invoice",
    "InvoiceStatus",
    "InvoiceKind",
    "PaymentType",
    "InvoiceItem",
    "User",
    "DomainError",
    "ValidationError",
]
