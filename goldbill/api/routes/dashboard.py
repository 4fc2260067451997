"""Dashboard API Routes"""

from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from goldbill.app.use_cases.billing.dtos import DashboardStatsDTO
from goldbill.app.use_cases.billing.get_dashboard_stats import GetDashboardStats
from goldbill.adapter.repositories.customer_repository import SqlAlchemyCustomerRepository
from goldbill.adapter.repositories.gold_calculation_repository import (
    SqlAlchemyGoldCalculationRepository,
)
from goldbill.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from goldbill.depends import get_session
from goldbill.api.error import ClientError

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get(
    "/stats",
    response_model=DashboardStatsDTO,
    status_code=status.HTTP_200_OK,
)
async def get_dashboard_stats(session: AsyncSession = Depends(get_session)):
    """
    Summary numbers for the dashboard.

    - `total_customers`: number of customers
    - `today_invoices`: number of paid invoices
    - `total_revenue`: sum of `total` over paid invoices
    - `gold_processed`: sum of `weight` over all calculations
    """
    use_case = GetDashboardStats(
        SqlAlchemyCustomerRepository(session),
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyGoldCalculationRepository(session),
    )
    result = await use_case.execute()

    if result.is_err():
        raise ClientError(result.error)

    return result.value
