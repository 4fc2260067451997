"""Get Invoice Use Case

Retrieves one invoice with its customer and items.
"""

from libs.result import Result, Return, Error
from goldbill.app.repositories.invoice_repository import InvoiceRepository
from .dtos import InvoiceResponseDTO


class GetInvoice:
    """
    Get Invoice Use Case

    Errors:
        INVOICE_NOT_FOUND: No invoice with that ID
    """

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self, invoice_id: str) -> Result[InvoiceResponseDTO]:
        found = await self.invoice_repo.get_by_id(invoice_id)

        if not found:
            return Return.err(
                Error(
                    code="INVOICE_NOT_FOUND",
                    message=f"Invoice with ID {invoice_id} not found",
                )
            )

        invoice, customer = found
        items = await self.invoice_repo.get_items(invoice.id)
        return Return.ok(InvoiceResponseDTO.from_entity(invoice, items, customer))
