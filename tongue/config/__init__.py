"""Configuration module for tongue"""

from .settings import (
    AppSettings,
    DisplaySettings,
    LoggingSettings,
    StoreSettings,
    settings,
)

__all__ = [
    "AppSettings",
    "StoreSettings",
    "DisplaySettings",
    "LoggingSettings",
    "settings",
]
