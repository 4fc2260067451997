"""SQLAlchemy Gold Calculation Repository Implementation"""

from decimal import Decimal
from typing import List, Optional
from sqlmodel import col, func, select
from sqlmodel.ext.asyncio.session import AsyncSession
from goldbill.app.repositories.gold_calculation_repository import GoldCalculationRepository
from goldbill.domain.gold_calculation import GoldCalculation


class SqlAlchemyGoldCalculationRepository(GoldCalculationRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, calculation: GoldCalculation) -> GoldCalculation:
        self.session.add(calculation)
        await self.session.flush()
        await self.session.refresh(calculation)
        return calculation

    async def get_by_id(self, calculation_id: str) -> Optional[GoldCalculation]:
        statement = select(GoldCalculation).where(GoldCalculation.id == calculation_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def list(
        self,
        customer_id: Optional[str] = None,
        limit: int = 10,
    ) -> List[GoldCalculation]:
        statement = select(GoldCalculation)

        if customer_id:
            statement = statement.where(GoldCalculation.customer_id == customer_id)

        statement = statement.order_by(col(GoldCalculation.created_at).desc()).limit(limit)

        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def sum_weight(self) -> Decimal:
        statement = select(func.coalesce(func.sum(GoldCalculation.weight), 0))
        result = await self.session.execute(statement)
        # SQLite returns float aggregates
        return Decimal(str(result.scalar_one()))
