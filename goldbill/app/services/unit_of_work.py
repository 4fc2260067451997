"""Unit of Work Interface

Transaction boundary used by write use cases. Repositories only flush;
the use case decides when the work is committed.
"""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
