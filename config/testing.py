SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

TIMEZONE = "UTC"

LEAVE_DAYS_PER_YEAR = 15
GRACE_PERIOD_MINUTES = 5
LATE_ALERT_GRACE_MINUTES = 10
MAX_ACTIVITY_SECONDS = 3600

SEED_DEMO_DATA = True
