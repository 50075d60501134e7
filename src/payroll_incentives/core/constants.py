"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

MINUTES_PER_HOUR = Decimal(60)
SECONDS_PER_HOUR = Decimal(3600)
# Hours are kept to the micro-hour so pool / hours round-trips exactly
HOURS_QUANTUM = Decimal("0.000001")

DEFAULT_RATE_OPTIONS = (1, 2, 5, 10)

NOTHING_TO_DISTRIBUTE = "There is nothing we can distribute based on the rules"
