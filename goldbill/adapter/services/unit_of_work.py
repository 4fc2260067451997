import logging
from sqlmodel.ext.asyncio.session import AsyncSession
from goldbill.app.services.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class SqlAlchemyUnitOfWork(UnitOfWork):
    """Commits or discards everything flushed on the request's session"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        if self.session.in_transaction():
            logger.info("Rolling back pending changes")
        await self.session.rollback()
