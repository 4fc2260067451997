"""Customer Repository Interface

Defines the contract for customer persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from goldbill.domain.customer import Customer


class CustomerRepository(ABC):
    """
    Repository interface for Customer persistence
    """

    @abstractmethod
    async def create(self, customer: Customer) -> Customer:
        """
        Create a new customer

        Args:
            customer: Customer entity to persist

        Returns:
            Created Customer with generated ID
        """
        pass

    @abstractmethod
    async def get_by_id(self, customer_id: str) -> Optional[Customer]:
        """
        Retrieve customer by internal ID

        Args:
            customer_id: Customer.id (UUID)

        Returns:
            Customer if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_customer_id(self, customer_id: str) -> Optional[Customer]:
        """
        Retrieve customer by business identifier (e.g., CU001)
        """
        pass

    @abstractmethod
    async def list(
        self,
        search: Optional[str] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> Tuple[List[Customer], int]:
        """
        List customers ordered by name

        Args:
            search: Optional case-insensitive substring of the name
            limit: Maximum number of customers to return
            offset: Offset for pagination

        Returns:
            Tuple of (customers page, total matching count)
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        pass
