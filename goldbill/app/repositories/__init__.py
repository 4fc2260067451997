from .customer_repository import CustomerRepository
from .gold_calculation_repository import GoldCalculationRepository
from .invoice_repository import InvoiceRepository
from .user_repository import UserRepository

__all__ = [
    "CustomerRepository",
    "GoldCalculationRepository",
    "InvoiceRepository",
    "UserRepository",
]
