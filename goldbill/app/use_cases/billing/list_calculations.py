"""
List Calculations Use Case

Retrieves saved gold calculations, most recent first.
"""
from typing import List, Optional
from libs.result import Result, Return
from goldbill.app.repositories.gold_calculation_repository import GoldCalculationRepository
from .dtos import CalculationResponseDTO


class ListCalculations:

    def __init__(self, calculation_repo: GoldCalculationRepository):
        self.calculation_repo = calculation_repo

    async def execute(
        self, customer_id: Optional[str] = None, limit: int = 10
    ) -> Result[List[CalculationResponseDTO]]:
        calculations = await self.calculation_repo.list(customer_id=customer_id, limit=limit)
        return Return.ok([CalculationResponseDTO.from_entity(c) for c in calculations])
