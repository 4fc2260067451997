"""Gold Calculation API Routes"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from goldbill.api.schemas.billing_request import CreateCalculationRequestSchema
from goldbill.app.use_cases.billing.dtos import CalculationResponseDTO, CreateCalculationCommandDTO
from goldbill.app.use_cases.billing.create_calculation import CreateCalculation
from goldbill.app.use_cases.billing.list_calculations import ListCalculations
from goldbill.adapter.repositories.customer_repository import SqlAlchemyCustomerRepository
from goldbill.adapter.repositories.gold_calculation_repository import (
    SqlAlchemyGoldCalculationRepository,
)
from goldbill.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from goldbill.depends import get_session
from goldbill.api.error import ClientError

router = APIRouter(prefix="/calculations", tags=["Calculations"])


@router.get(
    "",
    response_model=List[CalculationResponseDTO],
    status_code=status.HTTP_200_OK,
)
async def list_calculations(
    customer_id: Optional[str] = Query(default=None, alias="customerId"),
    limit: int = Query(default=10, ge=1, le=500),
    session: AsyncSession = Depends(get_session)
):
    """
    Most recent gold calculations, newest first.

    **Query parameters:**
    - `customerId` (optional): only calculations linked to this customer
    - `limit` (optional): default 10
    """
    calculation_repo = SqlAlchemyGoldCalculationRepository(session)

    use_case = ListCalculations(calculation_repo)
    result = await use_case.execute(customer_id=customer_id, limit=limit)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.post(
    "",
    response_model=CalculationResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {
            "description": "Validation error",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "VALIDATION_ERROR",
                            "message": "Invalid input: purity",
                            "details": {"fields": {"purity": "Input should be less than or equal to 100"}}
                        }
                    }
                }
            }
        },
        404: {"description": "Linked customer not found"},
    }
)
async def create_calculation(
    request: CreateCalculationRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Compute and save a gold calculation.

    pure_gold_weight = weight * purity / 100 (3 decimals). When `gold_rate` is
    given, total_value = pure_gold_weight * gold_rate (2 decimals).

    **Example request:**
    ```json
    {"weight": "10", "purity": "91.6", "gold_rate": "6000"}
    ```

    **Example response fields:** `pure_gold_weight` 9.160, `total_value` 54960.00
    """
    uow = SqlAlchemyUnitOfWork(session)
    calculation_repo = SqlAlchemyGoldCalculationRepository(session)
    customer_repo = SqlAlchemyCustomerRepository(session)

    command = CreateCalculationCommandDTO(**request.model_dump())

    use_case = CreateCalculation(uow, calculation_repo, customer_repo)
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value
