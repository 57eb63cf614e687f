# Standard library imports
import os

# Local application imports
from app.settings.dev import DevSettings
from app.settings.production import ProductionSettings

# Environments that run with production defaults (no debug logging)
PRODUCTION_LIKE = {"staging", "production"}


def get_settings() -> DevSettings | ProductionSettings:
    """
    Return the settings class matching the ENVIRONMENT variable (dev by default).
    """
    env = os.environ.get("ENVIRONMENT", "dev").lower()
    if env in PRODUCTION_LIKE:
        return ProductionSettings()  # type: ignore[call-arg]
    return DevSettings()  # type: ignore[call-arg]


settings = get_settings()
