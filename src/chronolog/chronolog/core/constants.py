"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

WORKING_LABEL = "Working"
CLOCKED_OUT_STATUS = "Clocked Out"

DEFAULT_WORKING_COLOR = "#91A673"
DEFAULT_ACTIVITY_COLOR = "#A0A0A0"

# 30/360 leave accounting
ACCOUNTING_DAYS_PER_YEAR = 360
ACCOUNTING_DAYS_PER_MONTH = 30
DEFAULT_LEAVE_DAYS_PER_YEAR = 15

DEFAULT_GRACE_PERIOD_MINUTES = 5
DEFAULT_LATE_ALERT_GRACE_MINUTES = 10
DEFAULT_MAX_ACTIVITY_SECONDS = 3600
DEFAULT_REPORT_DAYS = 7
