SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

RATE_OPTIONS = (1, 2, 5, 10)
BREAK_THRESHOLD_HOURS = None
BREAK_DURATION_MINUTES = None

ABORT_ON_FIRST_INELIGIBLE = True
REMAINING_POOL_POLICY = "PRIMARY_OFFER"
TRANSACTIONAL_DISTRIBUTION = False
