"""SQLAlchemy Invoice Repository Implementation

Implements invoice and invoice item persistence using SQLAlchemy async session.
"""

import time
from collections import defaultdict
from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional, Tuple
from sqlmodel import col, func, select
from sqlmodel.ext.asyncio.session import AsyncSession
from goldbill.app.repositories.invoice_repository import InvoiceRepository
from goldbill.domain.customer import Customer
from goldbill.domain.invoice import Invoice, InvoiceStatus
from goldbill.domain.invoice_item import InvoiceItem

# Suffix attempts before giving up and letting the unique constraint decide
MAX_SUFFIX_ATTEMPTS = 10


class SqlAlchemyInvoiceRepository(InvoiceRepository):
    """
    SQLAlchemy implementation of InvoiceRepository

    Uses async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, invoice: Invoice, items: List[InvoiceItem]) -> Invoice:
        """
        Create a new invoice with its items

        Args:
            invoice: Invoice entity to persist
            items: Items in display order

        Returns:
            Created Invoice with generated ID
        """
        self.session.add(invoice)
        await self.session.flush()

        for position, item in enumerate(items):
            item.invoice_id = invoice.id
            item.position = position
            self.session.add(item)

        await self.session.flush()
        await self.session.refresh(invoice)
        return invoice

    async def get_by_id(self, invoice_id: str) -> Optional[Tuple[Invoice, Customer]]:
        statement = (
            select(Invoice, Customer)
            .join(Customer, col(Invoice.customer_id) == col(Customer.id))
            .where(Invoice.id == invoice_id)
        )
        result = await self.session.execute(statement)
        row = result.one_or_none()
        if row is None:
            return None
        return row[0], row[1]

    async def get_by_invoice_number(self, invoice_number: str) -> Optional[Invoice]:
        statement = select(Invoice).where(Invoice.invoice_number == invoice_number)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def list(
        self,
        search: Optional[str] = None,
        customer_id: Optional[str] = None,
        status: Optional[InvoiceStatus] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> Tuple[List[Tuple[Invoice, Customer]], int]:
        """
        List invoices with their customers, most recent first

        Args:
            search: Optional invoice number substring
            customer_id: Optional customer filter
            status: Optional status filter
            limit: Maximum number of invoices to return
            offset: Offset for pagination

        Returns:
            Tuple of (list of (Invoice, Customer), total matching count)
        """
        conditions = []
        if search:
            conditions.append(col(Invoice.invoice_number).icontains(search, autoescape=True))
        if customer_id:
            conditions.append(col(Invoice.customer_id) == customer_id)
        if status:
            conditions.append(col(Invoice.status) == status)

        statement = select(Invoice, Customer).join(
            Customer, col(Invoice.customer_id) == col(Customer.id)
        )
        count_statement = select(func.count()).select_from(Invoice)
        for condition in conditions:
            statement = statement.where(condition)
            count_statement = count_statement.where(condition)

        statement = statement.order_by(col(Invoice.created_at).desc())
        statement = statement.limit(limit).offset(offset)

        result = await self.session.execute(statement)
        rows = [(row[0], row[1]) for row in result.all()]
        total = (await self.session.execute(count_statement)).scalar_one()
        return rows, total

    async def get_items(self, invoice_id: str) -> List[InvoiceItem]:
        statement = (
            select(InvoiceItem)
            .where(InvoiceItem.invoice_id == invoice_id)
            .order_by(col(InvoiceItem.position).asc())
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def get_items_for_invoices(self, invoice_ids: List[str]) -> Dict[str, List[InvoiceItem]]:
        if not invoice_ids:
            return {}
        statement = (
            select(InvoiceItem)
            .where(col(InvoiceItem.invoice_id).in_(invoice_ids))
            .order_by(col(InvoiceItem.invoice_id), col(InvoiceItem.position).asc())
        )
        result = await self.session.execute(statement)
        grouped: Dict[str, List[InvoiceItem]] = defaultdict(list)
        for item in result.scalars().all():
            grouped[item.invoice_id].append(item)
        return dict(grouped)

    async def generate_invoice_number(self, customer_code: str, now: Optional[datetime] = None) -> str:
        """
        Generate an invoice number for a customer

        Format: INV-<customer_code>-<YYYYMMDD>-<NNNN> (e.g., INV-CU001-20240115-4821)

        The suffix is the last four digits of the current epoch milliseconds.
        Concurrent requests may still collide; the unique constraint on
        invoice_number rejects the loser.
        """
        now = now or datetime.utcnow()
        date_part = now.strftime("%Y%m%d")
        suffix = int(time.time() * 1000) % 10000

        for attempt in range(MAX_SUFFIX_ATTEMPTS):
            candidate = f"INV-{customer_code}-{date_part}-{(suffix + attempt) % 10000:04d}"
            if await self.get_by_invoice_number(candidate) is None:
                return candidate

        return f"INV-{customer_code}-{date_part}-{(suffix + MAX_SUFFIX_ATTEMPTS) % 10000:04d}"

    async def count_by_status(self, status: InvoiceStatus) -> int:
        statement = select(func.count()).select_from(Invoice).where(col(Invoice.status) == status)
        result = await self.session.execute(statement)
        return result.scalar_one()

    async def sum_total_by_status(self, status: InvoiceStatus) -> Decimal:
        statement = select(func.coalesce(func.sum(Invoice.total), 0)).where(
            col(Invoice.status) == status
        )
        result = await self.session.execute(statement)
        # SQLite returns float aggregates
        return Decimal(str(result.scalar_one()))
