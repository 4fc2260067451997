"""Get Dashboard Stats Use Case

Read-only aggregation of dashboard summary numbers.
"""

from libs.result import Result, Return
from goldbill.app.repositories.customer_repository import CustomerRepository
from goldbill.app.repositories.gold_calculation_repository import GoldCalculationRepository
from goldbill.app.repositories.invoice_repository import InvoiceRepository
from goldbill.domain.calculator import quantize_currency, quantize_weight
from goldbill.domain.invoice import InvoiceStatus
from .dtos import DashboardStatsDTO


class GetDashboardStats:
    """
    Dashboard summary

    - total_customers: number of customers
    - today_invoices: number of paid invoices. Not restricted to today; the
      dashboard has always counted every paid invoice under this label.
    - total_revenue: sum of total over paid invoices (2 dp)
    - gold_processed: sum of gross weight over all calculations (3 dp)
    """

    def __init__(
        self,
        customer_repo: CustomerRepository,
        invoice_repo: InvoiceRepository,
        calculation_repo: GoldCalculationRepository,
    ):
        self.customer_repo = customer_repo
        self.invoice_repo = invoice_repo
        self.calculation_repo = calculation_repo

    async def execute(self) -> Result[DashboardStatsDTO]:
        total_customers = await self.customer_repo.count()
        paid_invoices = await self.invoice_repo.count_by_status(InvoiceStatus.PAID)
        revenue = await self.invoice_repo.sum_total_by_status(InvoiceStatus.PAID)
        gold_processed = await self.calculation_repo.sum_weight()

        return Return.ok(
            DashboardStatsDTO(
                total_customers=total_customers,
                today_invoices=paid_invoices,
                total_revenue=quantize_currency(revenue),
                gold_processed=quantize_weight(gold_processed),
            )
        )
