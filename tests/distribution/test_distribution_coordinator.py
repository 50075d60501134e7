from __future__ import annotations

from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from payroll_incentives.core.constants import NOTHING_TO_DISTRIBUTE
from payroll_incentives.core.enums import RemainingPoolPolicy
from payroll_incentives.distribution.model import DistributionPolicy
from payroll_incentives.distribution.service import DistributionCoordinator
from payroll_incentives.rules.model import DistributionRules
from payroll_incentives.shifts.model import Shift

RULES = DistributionRules([1, 2, 5, 10])
DAY = datetime(2025, 3, 3, 8, 0)


def make_shift(hours, *, incentive=0, day=0) -> Shift:
    return Shift.from_duration(DAY + timedelta(days=day), hours, incentive=incentive)


def test_primary_shift_takes_whole_target():
    primary = make_shift(10)
    others = [make_shift(8, day=1)]

    result = DistributionCoordinator().distribute(primary, 5, [primary] + others, RULES)

    assert result.errors == []
    assert result.succeeded
    assert primary.distributed_incentive == 5
    assert others[0].distributed_incentive == 0
    assert result.total_distributed == 5
    assert result.shift_results == [primary]


def test_primary_at_ceiling_stops_with_policy_error():
    primary = make_shift(10, incentive=10)
    second = make_shift(1, day=1)

    result = DistributionCoordinator().distribute(primary, 5, [primary, second], RULES)

    assert result.errors == [NOTHING_TO_DISTRIBUTE]
    assert primary.distributed_incentive == 0
    assert second.distributed_incentive == 0


def test_primary_at_ceiling_falls_through_when_skipping():
    primary = make_shift(10, incentive=10)
    second = make_shift(1, day=1)
    coordinator = DistributionCoordinator(policy=DistributionPolicy(abort_on_first_ineligible=False))

    result = coordinator.distribute(primary, 5, [primary, second], RULES)

    assert result.errors == []
    assert primary.distributed_incentive == 0
    assert second.distributed_incentive == 5


def test_secondary_pool_is_sized_from_primary_offer():
    primary = make_shift(8, incentive=8)
    second = make_shift(1, day=1)
    third = make_shift(1, day=2)

    result = DistributionCoordinator().distribute(primary, 5, [third, primary, second], RULES)

    # primary is clamped to 2; every later shift is offered from 5 - 2 = 3
    assert primary.distributed_incentive == 2
    assert third.distributed_incentive == 2
    assert second.distributed_incentive == 2
    assert result.total_distributed == 6
    assert result.shift_results == [primary, third, second]
    assert result.errors == [
        "Cannot distribute the rest of the incentive.  Distributed 6 out of 5 to the existing 3 shifts"
    ]


def test_fail_fast_on_first_ineligible_shift():
    primary = make_shift(8, incentive=8)
    blocked = make_shift(1, incentive=10, day=1)
    eligible = make_shift(1, day=2)

    result = DistributionCoordinator().distribute(primary, 5, [primary, blocked, eligible], RULES)

    assert primary.distributed_incentive == 2
    assert blocked.distributed_incentive == 0
    assert eligible.distributed_incentive == 0
    assert result.errors == [
        NOTHING_TO_DISTRIBUTE,
        "Cannot distribute the rest of the incentive.  Distributed 2 out of 5 to the existing 3 shifts",
    ]


def test_skip_policy_continues_past_ineligible_shift():
    primary = make_shift(8, incentive=8)
    blocked = make_shift(1, incentive=10, day=1)
    eligible = make_shift(1, day=2)
    coordinator = DistributionCoordinator(policy=DistributionPolicy(abort_on_first_ineligible=False))

    result = coordinator.distribute(primary, 5, [primary, blocked, eligible], RULES)

    assert eligible.distributed_incentive == 2
    assert result.errors == [
        "Cannot distribute the rest of the incentive.  Distributed 4 out of 5 to the existing 3 shifts"
    ]


def test_running_total_policy_shrinks_pool_as_shifts_are_credited():
    primary = make_shift(8, incentive=8)
    shifts = [primary, make_shift(1, day=1), make_shift(1, day=2)]
    coordinator = DistributionCoordinator(policy=DistributionPolicy(remaining_pool=RemainingPoolPolicy.RUNNING_TOTAL))

    result = coordinator.distribute(primary, 5, shifts, RULES)

    assert [s.distributed_incentive for s in shifts] == [2, 2, 1]
    assert result.errors == []


def test_primary_pool_is_target_times_hours():
    primary = make_shift(4)

    result = DistributionCoordinator().distribute(primary, 2, [primary], RULES)

    assert primary.distributed_incentive == 2
    assert result.succeeded


def test_rate_below_menu_surfaces_without_mutation():
    primary = make_shift(10)
    second = make_shift(4, day=1)

    result = DistributionCoordinator().distribute(primary, Decimal("0.5"), [primary, second], RULES)

    assert len(result.errors) == 1
    assert "0.5" in result.errors[0]
    assert primary.distributed_incentive == 0
    assert second.distributed_incentive == 0
    assert result.shift_results == []


def test_blank_shift_error_keeps_earlier_commits():
    primary = make_shift(8, incentive=8)
    blank = Shift()

    result = DistributionCoordinator().distribute(primary, 5, [primary, blank], RULES)

    assert result.errors == ["There isn't a start set for the shift"]
    assert primary.distributed_incentive == 2
    assert result.total_distributed == 2


def test_transactional_policy_rolls_back_on_failure():
    primary = make_shift(8, incentive=8)
    blank = Shift()
    coordinator = DistributionCoordinator(policy=DistributionPolicy(transactional=True))

    result = coordinator.distribute(primary, 5, [primary, blank], RULES)

    assert result.errors == ["There isn't a start set for the shift"]
    assert primary.distributed_incentive == 0
    assert result.total_distributed == 0


def test_transactional_policy_rolls_back_partial_distribution():
    primary = make_shift(8, incentive=8)
    blocked = make_shift(1, incentive=10, day=1)
    coordinator = DistributionCoordinator(policy=DistributionPolicy(transactional=True))

    result = coordinator.distribute(primary, 5, [primary, blocked], RULES)

    assert not result.succeeded
    assert primary.distributed_incentive == 0


def test_blank_primary_is_reported_not_raised():
    result = DistributionCoordinator().distribute(Shift(), 5, [], RULES)

    assert result.errors == ["There isn't a start set for the shift"]


def test_non_positive_target_is_nothing_to_distribute():
    primary = make_shift(8)

    result = DistributionCoordinator().distribute(primary, 0, [primary], RULES)

    assert result.errors == [NOTHING_TO_DISTRIBUTE]


def test_unexpected_errors_are_converted():
    class BrokenAllocator:
        def incentive_to_offer(self, *args, **kwargs):
            raise RuntimeError("boom")

    primary = make_shift(8)

    result = DistributionCoordinator(allocator=BrokenAllocator()).distribute(primary, 5, [primary], RULES)

    assert result.errors == ["boom"]


@pytest.mark.parametrize("target", [1, 2, 3, 5, 7, 10, 15])
def test_accumulators_never_decrease_and_success_conserves_target(target):
    shifts = [make_shift(h, incentive=i, day=d) for d, (h, i) in enumerate([(6, 3), (2, 0), (1, 5), (3, 0)])]
    before = {s.id: s.distributed_incentive for s in shifts}

    result = DistributionCoordinator().distribute(shifts[0], target, shifts, RULES)

    for s in shifts:
        assert s.distributed_incentive >= before[s.id]
    if result.succeeded:
        assert sum(s.distributed_incentive - before[s.id] for s in shifts) == target


def test_twenty_minute_shift_gets_full_target():
    primary = Shift(start=DAY, end=DAY + timedelta(minutes=20))

    result = DistributionCoordinator().distribute(primary, 5, [primary], RULES)

    assert result.errors == []
    assert primary.distributed_incentive == 5


def test_odd_shift_lengths_snap_to_exact_target():
    for minutes in range(15, 720, 5):
        for target in (1, 2, 5, 10):
            primary = Shift(start=DAY, end=DAY + timedelta(minutes=minutes))

            result = DistributionCoordinator().distribute(primary, target, [primary], RULES)

            assert result.errors == [], (minutes, target)
            assert primary.distributed_incentive == target, (minutes, target)


def test_negative_option_is_never_committed():
    rules = DistributionRules([-1, 5])
    primary = make_shift(10)

    result = DistributionCoordinator().distribute(primary, 2, [primary], rules)

    assert result.errors == [NOTHING_TO_DISTRIBUTE]
    assert primary.distributed_incentive == 0


def test_negative_option_on_secondary_shift_stops_distribution():
    rules = DistributionRules([-1, 2, 5])
    primary = make_shift(1)
    second = make_shift(1, day=1)

    result = DistributionCoordinator().distribute(primary, 3, [primary, second], rules)

    # primary snaps to 2, the 1 left over only matches -1 on the second shift
    assert primary.distributed_incentive == 2
    assert second.distributed_incentive == 0
    assert result.errors[0] == NOTHING_TO_DISTRIBUTE


def test_zero_option_counts_as_nothing_to_distribute():
    rules = DistributionRules([0, 5])
    primary = make_shift(10)

    result = DistributionCoordinator().distribute(primary, 2, [primary], rules)

    assert result.errors == [NOTHING_TO_DISTRIBUTE]
    assert primary.distributed_incentive == 0
    assert result.shift_results == []


def test_break_rule_snaps_primary_on_paid_hours():
    rules = DistributionRules([1, 2, 5, 10], break_threshold_hours=5, break_duration_minutes=30)
    primary = make_shift(5)

    result = DistributionCoordinator().distribute(primary, Decimal("1.8"), [primary], rules)

    # 1.8 * 5h = 9 over 4.5 paid hours is 2; over 5 hours it would be 1
    assert primary.distributed_incentive == 2
    assert result.errors == [
        "Cannot distribute the rest of the incentive.  Distributed 2 out of 1.8 to the existing 1 shifts"
    ]
