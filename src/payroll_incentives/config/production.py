import os

from . import parse_rate_options

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

RATE_OPTIONS = parse_rate_options(os.getenv("INCENTIVE_RATE_OPTIONS", "1,2,5,10"))
BREAK_THRESHOLD_HOURS = os.getenv("BREAK_THRESHOLD_HOURS", "5")
BREAK_DURATION_MINUTES = os.getenv("BREAK_DURATION_MINUTES", "30")

ABORT_ON_FIRST_INELIGIBLE = bool(int(os.getenv("ABORT_ON_FIRST_INELIGIBLE", "1")))
REMAINING_POOL_POLICY = os.getenv("REMAINING_POOL_POLICY", "PRIMARY_OFFER")
TRANSACTIONAL_DISTRIBUTION = bool(int(os.getenv("TRANSACTIONAL_DISTRIBUTION", "0")))
