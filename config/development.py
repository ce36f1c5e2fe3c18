import os

COMPANY_SETTINGS = {
    "paid_rest_minutes": os.getenv("PAID_REST_MINUTES", "10"),
    "pay_week_end_day": os.getenv("PAY_WEEK_END_DAY", "0"),
    "timezone": os.getenv("COMPANY_TIMEZONE", "Pacific/Auckland"),
}

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

DEBUG = True
