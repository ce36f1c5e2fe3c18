from datetime import datetime

import pytest

from src.timetrack_nz.timetrack_nz.settings.model import CompanySettings


@pytest.fixture
def fixed_now():
    return datetime(2025, 2, 3, 17, 0)


@pytest.fixture
def settings():
    return CompanySettings()


@pytest.fixture
def utc_host():
    """Run with the process local zone set to UTC."""
    import os
    import time

    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset not available")

    previous = os.environ.get("TZ")
    os.environ["TZ"] = "UTC"
    time.tzset()
    yield
    if previous is None:
        os.environ.pop("TZ", None)
    else:
        os.environ["TZ"] = previous
    time.tzset()
