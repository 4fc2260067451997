from .customer_repository import SqlAlchemyCustomerRepository
from .gold_calculation_repository import SqlAlchemyGoldCalculationRepository
from .invoice_repository import SqlAlchemyInvoiceRepository
from .user_repository import SqlAlchemyUserRepository

__all__ = [
    "SqlAlchemyCustomerRepository",
    "SqlAlchemyGoldCalculationRepository",
    "SqlAlchemyInvoiceRepository",
    "SqlAlchemyUserRepository",
]
