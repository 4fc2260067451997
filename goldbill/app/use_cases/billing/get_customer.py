"""Get Customer Use Case"""

from libs.result import Result, Return, Error
from goldbill.app.repositories.customer_repository import CustomerRepository
from .dtos import CustomerResponseDTO


class GetCustomer:
    """
    Read-only lookup of a single customer by internal ID

    Errors:
        CUSTOMER_NOT_FOUND: No customer with that ID
    """

    def __init__(self, customer_repo: CustomerRepository):
        self.customer_repo = customer_repo

    async def execute(self, customer_id: str) -> Result[CustomerResponseDTO]:
        customer = await self.customer_repo.get_by_id(customer_id)

        if not customer:
            return Return.err(
                Error(
                    code="CUSTOMER_NOT_FOUND",
                    message=f"Customer with ID {customer_id} not found",
                )
            )

        return Return.ok(CustomerResponseDTO.from_entity(customer))
