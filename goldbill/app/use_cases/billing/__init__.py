"""Billing domain use cases"""
from .create_customer import CreateCustomer
from .get_customer import GetCustomer
from .list_customers import ListCustomers
from .create_calculation import CreateCalculation
from .list_calculations import ListCalculations
from .create_invoice import CreateInvoice
from .get_invoice import GetInvoice
from .list_invoices import ListInvoices
from .get_dashboard_stats import GetDashboardStats
from .initialize_sample_data import InitializeSampleData
from .dtos import (
    CreateCustomerCommandDTO,
    CustomerResponseDTO,
    ListCustomersResponseDTO,
    CreateCalculationCommandDTO,
    CalculationResponseDTO,
    InvoiceItemInputDTO,
    CreateInvoiceCommandDTO,
    InvoiceItemDTO,
    InvoiceResponseDTO,
    ListInvoicesResponseDTO,
    DashboardStatsDTO,
)

__all__ = [
    "CreateCustomer",
    "GetCustomer",
    "ListCustomers",
    "CreateCalculation",
    "ListCalculations",
    "CreateInvoice",
    "GetInvoice",
    "ListInvoices",
    "GetDashboardStats",
    "InitializeSampleData",
    "CreateCustomerCommandDTO",
    "CustomerResponseDTO",
    "ListCustomersResponseDTO",
    "CreateCalculationCommandDTO",
    "CalculationResponseDTO",
    "InvoiceItemInputDTO",
    "CreateInvoiceCommandDTO",
    "InvoiceItemDTO",
    "InvoiceResponseDTO",
    "ListInvoicesResponseDTO",
    "DashboardStatsDTO",
]
