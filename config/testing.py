COMPANY_SETTINGS = {
    "paid_rest_minutes": 10,
    "pay_week_end_day": 0,
    "timezone": "Pacific/Auckland",
}

LOG_LEVEL = "WARNING"

DEBUG = False
TESTING = True
