from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from ..core.enums import RemainingPoolPolicy
from ..shifts.model import Shift


@dataclass(frozen=True)
class DistributionPolicy:
    """Named switches for the behaviours callers may want to vary.

    Defaults reproduce the historical behaviour: fail fast on the first
    ineligible shift, size secondary pools from the primary offer, and keep
    partial commits when a run fails.
    """

    abort_on_first_ineligible: bool = True
    remaining_pool: RemainingPoolPolicy = RemainingPoolPolicy.PRIMARY_OFFER
    transactional: bool = False

    @classmethod
    def from_settings(cls, settings) -> "DistributionPolicy":
        return cls(
            abort_on_first_ineligible=bool(getattr(settings, "ABORT_ON_FIRST_INELIGIBLE", True)),
            remaining_pool=RemainingPoolPolicy(
                str(getattr(settings, "REMAINING_POOL_POLICY", RemainingPoolPolicy.PRIMARY_OFFER.value)).upper()
            ),
            transactional=bool(getattr(settings, "TRANSACTIONAL_DISTRIBUTION", False)),
        )


@dataclass
class DistributionResult:
    """Outcome of one ``distribute`` call: error messages plus the shifts that were credited."""

    errors: list[str] = field(default_factory=list)
    shift_results: list[Shift] = field(default_factory=list)
    total_distributed: Decimal = Decimal(0)

    @property
    def succeeded(self) -> bool:
        return not self.errors
