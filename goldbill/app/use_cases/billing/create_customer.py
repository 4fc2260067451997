"""CreateCustomer Use Case

Registers a new customer with a unique business identifier.
"""

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from libs.result import Result, Return
from goldbill.app.services.unit_of_work import UnitOfWork
from goldbill.app.repositories.customer_repository import CustomerRepository
from goldbill.app.use_cases.errors import store_failed, validation_failed
from goldbill.domain.customer import Customer
from goldbill.domain.errors import ValidationError
from .dtos import CreateCustomerCommandDTO, CustomerResponseDTO

REQUIRED_FIELDS = ("customer_id", "name", "phone")


class CreateCustomer:
    """
    Use Case: Register a customer

    Business Rules:
    1. customer_id, name and phone are required and non-blank
    2. customer_id is unique across all customers
    3. Optional contact fields are stored as given (blank -> None)

    Flow:
    1. Validate required fields
    2. Reject duplicate customer_id
    3. Create customer
    4. Commit transaction
    """

    def __init__(self, uow: UnitOfWork, customer_repo: CustomerRepository):
        self.uow = uow
        self.customer_repo = customer_repo

    async def execute(self, command: CreateCustomerCommandDTO) -> Result[CustomerResponseDTO]:
        values = {
            name: (value.strip() or None) if isinstance(value, str) else value
            for name, value in command.model_dump().items()
        }

        missing = {name: "is required" for name in REQUIRED_FIELDS if not values.get(name)}
        if missing:
            return Return.err(validation_failed(ValidationError(missing)))

        try:
            existing = await self.customer_repo.get_by_customer_id(values["customer_id"])
            if existing:
                return Return.err(
                    validation_failed(ValidationError({"customer_id": "already exists"}))
                )

            created = await self.customer_repo.create(Customer(**values))
            await self.uow.commit()

            return Return.ok(CustomerResponseDTO.from_entity(created))

        except IntegrityError:
            # Lost a race against a concurrent registration with the same customer_id
            await self.uow.rollback()
            return Return.err(validation_failed(ValidationError({"customer_id": "already exists"})))
        except SQLAlchemyError as e:
            await self.uow.rollback()
            return Return.err(store_failed("create customer", e))
