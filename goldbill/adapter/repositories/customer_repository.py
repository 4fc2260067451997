"""SQLAlchemy Customer Repository Implementation

Implements customer persistence using SQLAlchemy async session.
"""

from typing import List, Optional, Tuple
from sqlmodel import col, func, select
from sqlmodel.ext.asyncio.session import AsyncSession
from goldbill.app.repositories.customer_repository import CustomerRepository
from goldbill.domain.customer import Customer


class SqlAlchemyCustomerRepository(CustomerRepository):
    """
    SQLAlchemy implementation of CustomerRepository

    Uses async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, customer: Customer) -> Customer:
        self.session.add(customer)
        await self.session.flush()
        await self.session.refresh(customer)
        return customer

    async def get_by_id(self, customer_id: str) -> Optional[Customer]:
        statement = select(Customer).where(Customer.id == customer_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_by_customer_id(self, customer_id: str) -> Optional[Customer]:
        statement = select(Customer).where(Customer.customer_id == customer_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def list(
        self,
        search: Optional[str] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> Tuple[List[Customer], int]:
        """
        List customers ordered by name

        The search term is matched case-insensitively anywhere in the name;
        LIKE wildcards in the term are escaped.
        """
        statement = select(Customer)
        count_statement = select(func.count()).select_from(Customer)

        if search:
            condition = col(Customer.name).icontains(search, autoescape=True)
            statement = statement.where(condition)
            count_statement = count_statement.where(condition)

        statement = statement.order_by(col(Customer.name).asc()).limit(limit).offset(offset)

        result = await self.session.execute(statement)
        total = (await self.session.execute(count_statement)).scalar_one()
        return list(result.scalars().all()), total

    async def count(self) -> int:
        result = await self.session.execute(select(func.count()).select_from(Customer))
        return result.scalar_one()
