"""Invoice Repository Interface

Defines the contract for invoice and invoice item persistence operations.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional, Tuple
from goldbill.domain.customer import Customer
from goldbill.domain.invoice import Invoice, InvoiceStatus
from goldbill.domain.invoice_item import InvoiceItem


class InvoiceRepository(ABC):
    """
    Repository interface for Invoice persistence

    Invoices are always read together with their customer; items are loaded
    separately with get_items / get_items_for_invoices.
    """

    @abstractmethod
    async def create(self, invoice: Invoice, items: List[InvoiceItem]) -> Invoice:
        """
        Create a new invoice with its items

        Args:
            invoice: Invoice entity to persist
            items: Items in display order; invoice_id and position are assigned here

        Returns:
            Created Invoice with generated ID
        """
        pass

    @abstractmethod
    async def get_by_id(self, invoice_id: str) -> Optional[Tuple[Invoice, Customer]]:
        """
        Retrieve invoice by ID together with its customer

        Args:
            invoice_id: Invoice ID

        Returns:
            (Invoice, Customer) if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_invoice_number(self, invoice_number: str) -> Optional[Invoice]:
        pass

    @abstractmethod
    async def list(
        self,
        search: Optional[str] = None,
        customer_id: Optional[str] = None,
        status: Optional[InvoiceStatus] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> Tuple[List[Tuple[Invoice, Customer]], int]:
        """
        List invoices, most recent first

        All given filters are combined with AND.

        Args:
            search: Optional substring of the invoice number
            customer_id: Optional customer filter (Customer.id)
            status: Optional status filter
            limit: Maximum number of invoices to return
            offset: Offset for pagination

        Returns:
            Tuple of (list of (Invoice, Customer), total matching count)
        """
        pass

    @abstractmethod
    async def get_items(self, invoice_id: str) -> List[InvoiceItem]:
        pass

    @abstractmethod
    async def get_items_for_invoices(self, invoice_ids: List[str]) -> Dict[str, List[InvoiceItem]]:
        """Items of several invoices, keyed by invoice ID, each list in position order"""
        pass

    @abstractmethod
    async def generate_invoice_number(self, customer_code: str, now: Optional[datetime] = None) -> str:
        """
        Generate an invoice number for a customer

        Format: INV-<customer_code>-<YYYYMMDD>-<NNNN>, where NNNN comes from
        the current time and is bumped while the number is already taken.

        Returns:
            Invoice number string
        """
        pass

    @abstractmethod
    async def count_by_status(self, status: InvoiceStatus) -> int:
        pass

    @abstractmethod
    async def sum_total_by_status(self, status: InvoiceStatus) -> Decimal:
        pass
