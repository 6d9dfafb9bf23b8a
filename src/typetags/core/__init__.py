"""Core configuration and exceptions for typetags."""

from .config import DEFAULT_ROOT_TAG, DEFAULT_SETTINGS_KEY, Config
from .exceptions import (
    DatabaseError,
    InvalidHierarchyError,
    PersistenceUnavailableError,
    SettingValueError,
    TypeTagsError,
)

__all__ = [
    "Config",
    "DEFAULT_ROOT_TAG",
    "DEFAULT_SETTINGS_KEY",
    "TypeTagsError",
    "InvalidHierarchyError",
    "PersistenceUnavailableError",
    "DatabaseError",
    "SettingValueError",
]
