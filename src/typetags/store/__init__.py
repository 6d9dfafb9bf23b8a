"""Settings storage for typetags."""

from .database import Database
from .settings import JsonSetting, SettingsRepository

__all__ = [
    "Database",
    "SettingsRepository",
    "JsonSetting",
]
