"""User Repository Interface"""

from abc import ABC, abstractmethod
from typing import Optional
from goldbill.domain.user import User


class UserRepository(ABC):

    @abstractmethod
    async def create(self, user: User) -> User:
        pass

    @abstractmethod
    async def get_by_id(self, user_id: str) -> Optional[User]:
        pass

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]:
        pass
