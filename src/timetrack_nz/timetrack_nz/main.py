from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from .container import Container, build_container
from .settings.loader import configure_logging, load_company_settings, load_settings_module
from .shifts.repository import ShiftRepository

logger = logging.getLogger(__name__)


def bootstrap(
    shifts_repo: ShiftRepository,
    *,
    company_overrides: Optional[Mapping[str, Any]] = None,
) -> Container:
    """Load settings for the current APP_ENV, set up logging and wire services."""
    settings_module = load_settings_module()
    configure_logging(getattr(settings_module, "LOG_LEVEL", "INFO"))

    company = load_company_settings(company_overrides, settings_module=settings_module)
    logger.info(
        "timetrack-nz settings=%s paid_rest=%smin week_ends=%s",
        settings_module.__name__,
        company.paid_rest_minutes,
        company.pay_week_end_day,
    )
    return build_container(shifts_repo=shifts_repo, settings=company)
