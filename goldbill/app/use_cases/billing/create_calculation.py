"""CreateCalculation Use Case

Computes pure gold weight (and value, when a rate is given) and saves the result.
"""

from sqlalchemy.exc import SQLAlchemyError
from libs.result import Result, Return, Error
from goldbill.app.services.unit_of_work import UnitOfWork
from goldbill.app.repositories.customer_repository import CustomerRepository
from goldbill.app.repositories.gold_calculation_repository import GoldCalculationRepository
from goldbill.app.use_cases.errors import store_failed, validation_failed
from goldbill.domain.calculator import (
    compute_gold_value,
    compute_pure_gold,
    percentage_input,
    rate_input,
    weight_input,
)
from goldbill.domain.errors import ValidationError
from goldbill.domain.gold_calculation import GoldCalculation
from .dtos import CalculationResponseDTO, CreateCalculationCommandDTO


class CreateCalculation:
    """
    Use Case: Save a gold calculation

    Business Rules:
    1. weight > 0 and purity in (0, 100], rounded to their stored precision
       (3 and 2 dp) before anything is computed
    2. pure_gold_weight = weight * purity / 100 (3 dp), never client-supplied
    3. total_value = pure_gold_weight * gold_rate (2 dp) when a rate is given
    4. A linked customer must exist

    Flow:
    1. Compute derived values (validates inputs)
    2. Check linked customer
    3. Create calculation
    4. Commit transaction
    """

    def __init__(
        self,
        uow: UnitOfWork,
        calculation_repo: GoldCalculationRepository,
        customer_repo: CustomerRepository,
    ):
        self.uow = uow
        self.calculation_repo = calculation_repo
        self.customer_repo = customer_repo

    async def execute(self, command: CreateCalculationCommandDTO) -> Result[CalculationResponseDTO]:
        try:
            pure_gold_weight = compute_pure_gold(command.weight, command.purity)
            weight = weight_input(command.weight)
            purity = percentage_input(command.purity)
            gold_rate = total_value = None
            if command.gold_rate is not None:
                gold_rate = rate_input(command.gold_rate, "gold_rate")
                total_value = compute_gold_value(pure_gold_weight, gold_rate)
        except ValidationError as e:
            return Return.err(validation_failed(e))

        try:
            if command.customer_id:
                customer = await self.customer_repo.get_by_id(command.customer_id)
                if not customer:
                    return Return.err(
                        Error(
                            code="CUSTOMER_NOT_FOUND",
                            message=f"Customer with ID {command.customer_id} not found",
                        )
                    )

            calculation = GoldCalculation(
                customer_id=command.customer_id or None,
                weight=weight,
                purity=purity,
                pure_gold_weight=pure_gold_weight,
                gold_rate=gold_rate,
                total_value=total_value,
                description=command.description,
            )

            created = await self.calculation_repo.create(calculation)
            await self.uow.commit()

            return Return.ok(CalculationResponseDTO.from_entity(created))

        except SQLAlchemyError as e:
            await self.uow.rollback()
            return Return.err(store_failed("create calculation", e))
