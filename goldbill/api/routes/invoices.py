"""Invoice API Routes

FastAPI routes for creating and browsing invoices.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query, Request, status
from sqlmodel.ext.asyncio.session import AsyncSession

from goldbill.api.schemas.billing_request import CreateInvoiceRequestSchema
from goldbill.app.use_cases.billing.dtos import (
    CreateInvoiceCommandDTO,
    InvoiceResponseDTO,
    ListInvoicesResponseDTO,
)
from goldbill.app.use_cases.billing.create_invoice import CreateInvoice
from goldbill.app.use_cases.billing.get_invoice import GetInvoice
from goldbill.app.use_cases.billing.list_invoices import ListInvoices
from goldbill.adapter.repositories.customer_repository import SqlAlchemyCustomerRepository
from goldbill.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from goldbill.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from goldbill.domain.invoice import InvoiceStatus
from goldbill.depends import get_session
from goldbill.api.error import ClientError

router = APIRouter(prefix="/invoices", tags=["Invoices"])


@router.get(
    "",
    response_model=ListInvoicesResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def list_invoices(
    search: Optional[str] = Query(default=None, description="Invoice number substring"),
    invoice_status: Optional[InvoiceStatus] = Query(default=None, alias="status"),
    customer_id: Optional[str] = Query(default=None, alias="customerId"),
    limit: int = Query(default=50, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    session: AsyncSession = Depends(get_session)
):
    """
    List invoices with their customer and items, most recent first.

    **Query parameters:**
    - `search` (optional): case-insensitive invoice number substring
    - `status` (optional): pending, paid or overdue
    - `customerId` (optional): only this customer's invoices
    - `limit`, `offset` (optional): pagination, default 50 / 0
    """
    invoice_repo = SqlAlchemyInvoiceRepository(session)

    use_case = ListInvoices(invoice_repo)
    result = await use_case.execute(
        search=search,
        customer_id=customer_id,
        status=invoice_status,
        limit=limit,
        offset=offset,
    )

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get(
    "/{invoice_id}",
    response_model=InvoiceResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={
        404: {
            "description": "Invoice not found",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "INVOICE_NOT_FOUND",
                            "message": "Invoice with ID 0b0e0c3a-1d7e-4c55-8a0e-6f3d8e1c2b44 not found"
                        }
                    }
                }
            }
        }
    }
)
async def get_invoice(
    invoice_id: str,
    session: AsyncSession = Depends(get_session)
):
    """
    Get an invoice with its items and customer.

    **Returns:**
    - 200: Invoice found
    - 404: Invoice not found
    """
    invoice_repo = SqlAlchemyInvoiceRepository(session)

    use_case = GetInvoice(invoice_repo)
    result = await use_case.execute(invoice_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.post(
    "",
    response_model=InvoiceResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {
            "description": "Validation error",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "VALIDATION_ERROR",
                            "message": "Invalid input: items.0.purity",
                            "details": {"fields": {"items.0.purity": "Input should be greater than 0"}}
                        }
                    }
                }
            }
        },
        404: {"description": "Customer not found"},
    }
)
async def create_invoice(
    request: Request,
    body: CreateInvoiceRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Create an invoice.

    The invoice number, item amounts / fine gold and every total are computed
    by the server. `kind` selects the item shape and defaults to `rate`.

    **Rate invoice example:**
    ```json
    {
      "customer_id": "5f0c6c1e-8a4b-4f57-9a57-0b6d3b8f3c11",
      "kind": "rate",
      "items": [{"description": "22K bangle", "weight": "5", "purity": "92", "rate": "525"}],
      "making_charges": "500",
      "tax_percentage": "3"
    }
    ```
    gives amount 2415.00, subtotal 2915.00, tax_amount 87.45, total 3002.45.

    **Touch invoice example:**
    ```json
    {
      "customer_id": "5f0c6c1e-8a4b-4f57-9a57-0b6d3b8f3c11",
      "kind": "touch",
      "items": [{"item_name": "Chain", "pieces": 2, "net_weight": "10.500", "touch": "91.60"}]
    }
    ```

    **Returns:**
    - 201: Invoice created
    - 400: Invalid input
    - 404: Customer not found
    """
    uow = SqlAlchemyUnitOfWork(session)
    invoice_repo = SqlAlchemyInvoiceRepository(session)
    customer_repo = SqlAlchemyCustomerRepository(session)

    command = CreateInvoiceCommandDTO(**body.model_dump())

    use_case = CreateInvoice(
        uow,
        invoice_repo,
        customer_repo,
        due_days=request.app.state.config.INVOICE_DUE_DAYS,
    )
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value
