"""
List Invoices Use Case

Retrieves invoices with their customers and items, most recent first.
"""
from typing import Optional
from libs.result import Result, Return
from goldbill.app.repositories.invoice_repository import InvoiceRepository
from goldbill.domain.invoice import InvoiceStatus
from .dtos import InvoiceResponseDTO, ListInvoicesResponseDTO


class ListInvoices:
    """
    Use case: Invoice history

    Filters (all optional, combined with AND):
    - search: substring of the invoice number
    - customer_id: invoices of one customer
    - status: pending / paid / overdue
    """

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(
        self,
        search: Optional[str] = None,
        customer_id: Optional[str] = None,
        status: Optional[InvoiceStatus] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> Result[ListInvoicesResponseDTO]:
        rows, total = await self.invoice_repo.list(
            search=search.strip() if search else None,
            customer_id=customer_id or None,
            status=status,
            limit=limit,
            offset=offset,
        )

        items_by_invoice = await self.invoice_repo.get_items_for_invoices(
            [invoice.id for invoice, _ in rows]
        )

        invoices = [
            InvoiceResponseDTO.from_entity(invoice, items_by_invoice.get(invoice.id, []), customer)
            for invoice, customer in rows
        ]

        return Return.ok(
            ListInvoicesResponseDTO(
                invoices=invoices,
                total=total,
                limit=limit,
                offset=offset,
            )
        )
