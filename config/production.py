import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False

TIMEZONE = os.getenv("TIMEZONE", "UTC")

LEAVE_DAYS_PER_YEAR = float(os.getenv("LEAVE_DAYS_PER_YEAR", "15"))
GRACE_PERIOD_MINUTES = int(os.getenv("GRACE_PERIOD_MINUTES", "5"))
LATE_ALERT_GRACE_MINUTES = int(os.getenv("LATE_ALERT_GRACE_MINUTES", "10"))
MAX_ACTIVITY_SECONDS = int(os.getenv("MAX_ACTIVITY_SECONDS", "3600"))

SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "0")))
