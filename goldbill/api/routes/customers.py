"""Customer API Routes

FastAPI routes for customer registration and lookup.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from goldbill.api.schemas.billing_request import CreateCustomerRequestSchema
from goldbill.app.use_cases.billing.dtos import (
    CreateCustomerCommandDTO,
    CustomerResponseDTO,
    ListCustomersResponseDTO,
)
from goldbill.app.use_cases.billing.create_customer import CreateCustomer
from goldbill.app.use_cases.billing.get_customer import GetCustomer
from goldbill.app.use_cases.billing.list_customers import ListCustomers
from goldbill.adapter.repositories.customer_repository import SqlAlchemyCustomerRepository
from goldbill.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from goldbill.depends import get_session
from goldbill.api.error import ClientError

router = APIRouter(prefix="/customers", tags=["Customers"])


@router.get(
    "",
    response_model=ListCustomersResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def list_customers(
    search: Optional[str] = Query(default=None, description="Case-insensitive name substring"),
    limit: int = Query(default=50, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    session: AsyncSession = Depends(get_session)
):
    """
    List customers ordered by name.

    **Query parameters:**
    - `search` (optional): case-insensitive substring of the customer name
    - `limit` (optional): page size, default 50
    - `offset` (optional): number of customers to skip

    **Returns:**
    - 200: Page of customers with the total number of matches
    """
    customer_repo = SqlAlchemyCustomerRepository(session)

    use_case = ListCustomers(customer_repo)
    result = await use_case.execute(search=search, limit=limit, offset=offset)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get(
    "/{customer_id}",
    response_model=CustomerResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={
        404: {
            "description": "Customer not found",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "CUSTOMER_NOT_FOUND",
                            "message": "Customer with ID 5f0c6c1e-8a4b-4f57-9a57-0b6d3b8f3c11 not found"
                        }
                    }
                }
            }
        }
    }
)
async def get_customer(
    customer_id: str,
    session: AsyncSession = Depends(get_session)
):
    """
    Get a customer by its internal ID.

    **Returns:**
    - 200: Customer found
    - 404: Customer not found
    """
    customer_repo = SqlAlchemyCustomerRepository(session)

    use_case = GetCustomer(customer_repo)
    result = await use_case.execute(customer_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.post(
    "",
    response_model=CustomerResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {
            "description": "Validation error",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "VALIDATION_ERROR",
                            "message": "Invalid input: customer_id",
                            "details": {"fields": {"customer_id": "already exists"}}
                        }
                    }
                }
            }
        }
    }
)
async def create_customer(
    request: CreateCustomerRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Register a customer.

    **Request body:**
    - `customer_id` (required): business identifier, unique (e.g. CU013)
    - `name` (required)
    - `phone` (required)
    - `email`, `address`, `city`, `state` (optional)

    **Returns:**
    - 201: Customer created
    - 400: Invalid input or duplicate customer_id
    """
    uow = SqlAlchemyUnitOfWork(session)
    customer_repo = SqlAlchemyCustomerRepository(session)

    command = CreateCustomerCommandDTO(**request.model_dump())

    use_case = CreateCustomer(uow, customer_repo)
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value
