from __future__ import annotations

from decimal import Decimal
from typing import MutableSet, Optional

from ..common.number_utils import to_decimal
from ..rules.engine import RulesEngine
from ..rules.model import DistributionRules
from ..shifts.model import Shift


class ShiftAllocator:
    """Decide what one shift may still receive, and record it when asked.

    ``incentive_to_offer`` only proposes; ``commit`` is the single place where
    shift state changes.
    """

    def incentive_to_offer(
        self,
        existing_incentive,
        amount_left_to_distribute,
        rules: DistributionRules,
        hours_worked,
        *,
        engine: Optional[RulesEngine] = None,
    ) -> Decimal:
        amount_left = to_decimal(amount_left_to_distribute, "amount left to distribute")
        hours = to_decimal(hours_worked, "hours worked")
        if amount_left <= 0 or hours <= 0:
            return Decimal(0)

        engine = engine or RulesEngine(rules)
        paid = engine.paid_hours(hours)
        if paid <= 0:
            return Decimal(0)

        candidate = engine.snap_rate(amount_left, paid)
        existing = to_decimal(existing_incentive, "existing incentive")
        if existing != 0:
            candidate = engine.clamp_to_ceiling(existing, candidate)
        return max(candidate, Decimal(0))

    def commit(self, rate, shift: Shift, tried: MutableSet) -> None:
        tried.add(shift.id)
        shift.distributed_incentive = to_decimal(shift.distributed_incentive) + to_decimal(rate, "rate")
