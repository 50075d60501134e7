import os

from . import parse_rate_options

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

RATE_OPTIONS = parse_rate_options(os.getenv("INCENTIVE_RATE_OPTIONS", "1,2,5,10"))
# Break rule is off unless both values are set
BREAK_THRESHOLD_HOURS = os.getenv("BREAK_THRESHOLD_HOURS") or None
BREAK_DURATION_MINUTES = os.getenv("BREAK_DURATION_MINUTES") or None

ABORT_ON_FIRST_INELIGIBLE = bool(int(os.getenv("ABORT_ON_FIRST_INELIGIBLE", "1")))
REMAINING_POOL_POLICY = os.getenv("REMAINING_POOL_POLICY", "PRIMARY_OFFER")
TRANSACTIONAL_DISTRIBUTION = bool(int(os.getenv("TRANSACTIONAL_DISTRIBUTION", "0")))
