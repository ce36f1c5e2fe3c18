import logging
import os

logger = logging.getLogger(__name__)


def get_settings_module() -> str:
    # APP_ENV picks the settings module, 'development' by default
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "config.production"

    if env in {"test", "testing"}:
        return "config.testing"

    if env not in {"dev", "development"}:
        logger.warning("Unknown APP_ENV %r, using development settings", env)
    return "config.development"
