from __future__ import annotations

import importlib
import logging
from types import ModuleType
from typing import Any, Mapping, Optional

from dotenv import load_dotenv

from config import get_settings_module

from .model import CompanySettings

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, str(level).upper(), logging.INFO), format=_LOG_FORMAT)


def load_settings_module():
    load_dotenv(override=False)
    return importlib.import_module(get_settings_module())


def load_company_settings(
    overrides: Optional[Mapping[str, Any]] = None,
    *,
    settings_module: Optional[ModuleType] = None,
) -> CompanySettings:
    """Company settings from the active settings module, optionally overridden by a stored document."""
    settings = settings_module or load_settings_module()
    data: dict[str, Any] = dict(getattr(settings, "COMPANY_SETTINGS", {}))
    if overrides:
        data.update(overrides)
    company = CompanySettings.from_mapping(data)
    logger.debug(
        "Company settings: paid_rest_minutes=%s pay_week_end_day=%s timezone=%s",
        company.paid_rest_minutes,
        company.pay_week_end_day,
        company.timezone,
    )
    return company
