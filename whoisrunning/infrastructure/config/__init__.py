"""Configuration module.

settings.py is the single entry point for configuration values.
"""

from whoisrunning.infrastructure.config.settings import (
    PaymentSettings,
    ResearchApiSettings,
    Settings,
    get_settings,
    reload_settings,
)


__all__ = [
    "PaymentSettings",
    "ResearchApiSettings",
    "Settings",
    "get_settings",
    "reload_settings",
]
