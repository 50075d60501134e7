from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from ..model import DistributionRules


class PaidHoursCalculator(ABC):
    """Calculator interface (Strategy Pattern for paid hours)."""

    @abstractmethod
    def paid_hours(self, raw_hours: Decimal, rules: DistributionRules) -> Decimal:
        raise NotImplementedError
