"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_PAID_REST_MINUTES = 10
MIN_PAID_REST_MINUTES = 10
MAX_PAID_REST_MINUTES = 30
UNPAID_MEAL_MINUTES = 30

# Entitlements repeat every 8 hours once a shift reaches 16 hours.
ENTITLEMENT_CYCLE_HOURS = 8
ENTITLEMENT_CYCLE_START_HOURS = 16

DEFAULT_PAY_WEEK_END_DAY = 0
DEFAULT_TIMEZONE = "Pacific/Auckland"

WEEKDAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")

DEFAULT_FIELD1_LABEL = "Notes"
DEFAULT_FIELD2_LABEL = "Materials"
DEFAULT_FIELD3_LABEL = "Other"
DEFAULT_MANAGER_DISPLAY_NAME = "Manager"
