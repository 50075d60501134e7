from __future__ import annotations

from decimal import Decimal

from ...core.constants import MINUTES_PER_HOUR
from ..model import DistributionRules
from .base import PaidHoursCalculator


class BreakDeductionCalculator(PaidHoursCalculator):
    """Standard rule: once hours reach the threshold, deduct the break (result may drop to <= 0)."""

    def paid_hours(self, raw_hours: Decimal, rules: DistributionRules) -> Decimal:
        if rules.has_break_rule and raw_hours >= rules.break_threshold_hours:
            return raw_hours - rules.break_duration_minutes / MINUTES_PER_HOUR
        return raw_hours
