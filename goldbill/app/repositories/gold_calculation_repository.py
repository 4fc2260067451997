"""Gold Calculation Repository Interface"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List, Optional
from goldbill.domain.gold_calculation import GoldCalculation


class GoldCalculationRepository(ABC):
    """
    Repository interface for GoldCalculation persistence
    """

    @abstractmethod
    async def create(self, calculation: GoldCalculation) -> GoldCalculation:
        pass

    @abstractmethod
    async def get_by_id(self, calculation_id: str) -> Optional[GoldCalculation]:
        pass

    @abstractmethod
    async def list(
        self,
        customer_id: Optional[str] = None,
        limit: int = 10,
    ) -> List[GoldCalculation]:
        """
        List calculations, most recent first

        Args:
            customer_id: Optional filter on the linked customer
            limit: Maximum number of calculations to return
        """
        pass

    @abstractmethod
    async def sum_weight(self) -> Decimal:
        """Sum of gross weight over all calculations"""
        pass
