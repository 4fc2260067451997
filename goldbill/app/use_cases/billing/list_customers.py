"""
List Customers Use Case

Retrieves customers ordered by name, optionally filtered by a name search.
"""
from typing import Optional
from libs.result import Result, Return
from goldbill.app.repositories.customer_repository import CustomerRepository
from .dtos import CustomerResponseDTO, ListCustomersResponseDTO


class ListCustomers:
    """
    Use case: Browse customers

    The search term matches case-insensitively anywhere in the name.
    Customers are ordered by name ascending.
    """

    def __init__(self, customer_repo: CustomerRepository):
        self.customer_repo = customer_repo

    async def execute(
        self, search: Optional[str] = None, limit: int = 50, offset: int = 0
    ) -> Result[ListCustomersResponseDTO]:
        """
        List customers with pagination.

        Args:
            search: Optional name substring
            limit: Maximum number of customers to return (default 50)
            offset: Number of customers to skip (default 0)

        Returns:
            Result[ListCustomersResponseDTO]: Page of customers and total match count
        """
        search = search.strip() if search else None
        customers, total = await self.customer_repo.list(
            search=search or None,
            limit=limit,
            offset=offset,
        )

        return Return.ok(
            ListCustomersResponseDTO(
                customers=[CustomerResponseDTO.from_entity(c) for c in customers],
                total=total,
                limit=limit,
                offset=offset,
            )
        )
