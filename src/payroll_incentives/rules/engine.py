from __future__ import annotations

from decimal import Decimal
from typing import Optional

from ..common.number_utils import format_decimal, to_decimal
from ..core.exceptions import NoEligibleRateError, ValidationError
from .calculator.base import PaidHoursCalculator
from .calculator.break_calculator import BreakDeductionCalculator
from .model import DistributionRules


class RulesEngine:
    """Pure policy queries over a ``DistributionRules`` configuration."""

    def __init__(self, rules: DistributionRules, *, calculator: Optional[PaidHoursCalculator] = None):
        self._rules = rules
        self._calculator = calculator or BreakDeductionCalculator()

    @property
    def rules(self) -> DistributionRules:
        return self._rules

    def paid_hours(self, raw_hours) -> Decimal:
        return self._calculator.paid_hours(to_decimal(raw_hours, "hours worked"), self._rules)

    def snap_rate(self, requested_pool, paid_hours) -> Decimal:
        """Greatest configured option at or below ``requested_pool / paid_hours``."""
        paid_hours = to_decimal(paid_hours, "paid hours")
        if paid_hours <= 0:
            raise ValidationError("Paid hours must be positive to compute a rate")

        requested_rate = to_decimal(requested_pool, "requested pool") / paid_hours
        for option in self._rules.rate_options:
            if option <= requested_rate:
                return option
        raise NoEligibleRateError(
            f"No incentive rate option is at or below the requested rate of {format_decimal(requested_rate)}"
        )

    def clamp_to_ceiling(self, existing_incentive, candidate_rate) -> Decimal:
        """Step down the menu until ``existing + option`` fits under the highest option."""
        existing = to_decimal(existing_incentive, "existing incentive")
        candidate = to_decimal(candidate_rate, "candidate rate")
        ceiling = self._rules.max_rate

        for option in self._rules.rate_options:
            if option > candidate:
                continue
            if existing + option <= ceiling:
                return option

        # Nothing on the menu fits: fall back to what is left under the ceiling.
        return max(Decimal(0), min(candidate, ceiling - existing))
