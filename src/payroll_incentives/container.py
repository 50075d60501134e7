from __future__ import annotations

from dataclasses import dataclass

from .distribution.allocator import ShiftAllocator
from .distribution.model import DistributionPolicy
from .distribution.service import DistributionCoordinator, IncentiveDistributionService
from .rules.calculator.break_calculator import BreakDeductionCalculator
from .rules.model import DistributionRules


@dataclass(frozen=True)
class Container:
    rules: DistributionRules
    policy: DistributionPolicy

    allocator: ShiftAllocator
    coordinator: DistributionCoordinator
    distribution_service: IncentiveDistributionService


def build_container(*, settings) -> Container:
    rules = DistributionRules.from_settings(settings)
    policy = DistributionPolicy.from_settings(settings)

    allocator = ShiftAllocator()
    coordinator = DistributionCoordinator(
        allocator=allocator,
        policy=policy,
        calculator=BreakDeductionCalculator(),
    )
    distribution_service = IncentiveDistributionService(coordinator, rules)

    return Container(
        rules=rules,
        policy=policy,
        allocator=allocator,
        coordinator=coordinator,
        distribution_service=distribution_service,
    )
