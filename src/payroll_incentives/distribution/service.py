from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional, Sequence

from ..common.number_utils import format_decimal, to_decimal
from ..core.constants import NOTHING_TO_DISTRIBUTE
from ..core.enums import RemainingPoolPolicy
from ..core.exceptions import DomainError, ValidationError
from ..employees.model import Employee
from ..rules.calculator.base import PaidHoursCalculator
from ..rules.engine import RulesEngine
from ..rules.model import DistributionRules
from ..shifts.model import Shift
from .allocator import ShiftAllocator
from .model import DistributionPolicy, DistributionResult

logger = logging.getLogger(__name__)


class DistributionCoordinator:
    """Greedy, order-sensitive spread of a target rate over a primary shift and its siblings.

    Shifts are mutated in place and nothing here takes a lock: callers must not
    run ``distribute`` concurrently on overlapping shift collections unless
    they serialize the calls themselves or hand in private copies.
    """

    def __init__(
        self,
        *,
        allocator: Optional[ShiftAllocator] = None,
        policy: Optional[DistributionPolicy] = None,
        calculator: Optional[PaidHoursCalculator] = None,
    ):
        self._allocator = allocator or ShiftAllocator()
        self._policy = policy or DistributionPolicy()
        self._calculator = calculator

    @property
    def policy(self) -> DistributionPolicy:
        return self._policy

    def distribute(
        self,
        primary_shift: Shift,
        target_incentive,
        all_shifts: Sequence[Shift],
        rules: DistributionRules,
    ) -> DistributionResult:
        """``all_shifts`` includes ``primary_shift``; its order decides priority."""
        result = DistributionResult()
        tried: set = set()
        undo: dict = {}
        total = Decimal(0)

        try:
            target = to_decimal(target_incentive, "target incentive")
            engine = RulesEngine(rules, calculator=self._calculator)

            primary_pool = target * primary_shift.hours_worked
            primary_offer = self._offer(primary_shift, primary_pool, rules, engine)
            if primary_offer <= 0:
                logger.info("Primary shift %s is not eligible for any incentive", primary_shift.id)
                if self._policy.abort_on_first_ineligible:
                    result.errors.append(NOTHING_TO_DISTRIBUTE)
                    return result
                tried.add(primary_shift.id)
            else:
                self._commit(primary_offer, primary_shift, tried, undo, result)
                total += primary_offer

            if total != target:
                for shift in all_shifts:
                    if shift.id in tried:
                        continue

                    if self._policy.remaining_pool == RemainingPoolPolicy.RUNNING_TOTAL:
                        pool = target - total
                    else:
                        pool = target - primary_offer

                    offer = self._offer(shift, pool, rules, engine)
                    if offer <= 0:
                        if self._policy.abort_on_first_ineligible:
                            logger.info("Shift %s is not eligible, stopping distribution", shift.id)
                            result.errors.append(NOTHING_TO_DISTRIBUTE)
                            break
                        logger.info("Shift %s is not eligible, skipping", shift.id)
                        tried.add(shift.id)
                        continue

                    self._commit(offer, shift, tried, undo, result)
                    total += offer
                    if total == target:
                        break

                if total != target:
                    result.errors.append(
                        f"Cannot distribute the rest of the incentive.  Distributed {format_decimal(total)} "
                        f"out of {format_decimal(target)} to the existing {len(all_shifts)} shifts"
                    )
        except DomainError as e:
            logger.warning("Distribution failed: %s", e)
            result = DistributionResult(errors=result.errors)
            result.errors.insert(0, str(e))
        except Exception as e:
            logger.exception("Unexpected error while distributing incentive")
            result = DistributionResult(errors=result.errors)
            result.errors.insert(0, str(e))

        result.total_distributed = total
        if result.errors and self._policy.transactional and undo:
            self._rollback(undo, result)
        return result

    def _offer(self, shift: Shift, pool: Decimal, rules: DistributionRules, engine: RulesEngine) -> Decimal:
        return self._allocator.incentive_to_offer(
            shift.all_incentives,
            pool,
            rules,
            shift.hours_worked,
            engine=engine,
        )

    def _commit(self, rate: Decimal, shift: Shift, tried: set, undo: dict, result: DistributionResult) -> None:
        undo.setdefault(shift.id, (shift, shift.distributed_incentive))
        self._allocator.commit(rate, shift, tried)
        if shift not in result.shift_results:
            result.shift_results.append(shift)
        logger.debug("Committed %s to shift %s", rate, shift.id)

    @staticmethod
    def _rollback(undo: dict, result: DistributionResult) -> None:
        for shift, previous in undo.values():
            shift.distributed_incentive = previous
        logger.info("Rolled back incentive on %d shift(s)", len(undo))
        result.shift_results = []
        result.total_distributed = Decimal(0)


class IncentiveDistributionService:
    """Use case: distribute an incentive with the configured rules and policy."""

    def __init__(self, coordinator: DistributionCoordinator, rules: DistributionRules):
        self._coordinator = coordinator
        self._rules = rules

    @property
    def rules(self) -> DistributionRules:
        return self._rules

    def distribute(
        self,
        primary_shift: Shift,
        target_incentive,
        all_shifts: Sequence[Shift],
        *,
        rules: Optional[DistributionRules] = None,
    ) -> DistributionResult:
        result = self._coordinator.distribute(primary_shift, target_incentive, all_shifts, rules or self._rules)
        if result.succeeded:
            logger.info(
                "Distributed %s across %d shift(s)", format_decimal(result.total_distributed), len(result.shift_results)
            )
        else:
            logger.info("Distribution finished with errors: %s", "; ".join(result.errors))
        return result

    def distribute_for_employee(
        self,
        employee: Employee,
        primary_shift_id,
        target_incentive,
        *,
        rules: Optional[DistributionRules] = None,
    ) -> DistributionResult:
        primary = employee.find_shift(primary_shift_id)
        if not primary:
            raise ValidationError(f"Shift {primary_shift_id} does not belong to employee {employee.employee_id}")
        return self.distribute(primary, target_incentive, employee.shifts, rules=rules)
