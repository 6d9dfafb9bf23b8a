"""Configuration management for typetags."""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_ROOT_TAG = "type/*"
DEFAULT_SETTINGS_KEY = "custom-types"


def _default_db_path() -> Path:
    """Get default settings database path."""
    cache_dir = Path(os.environ.get("XDG_CACHE_HOME", Path.home() / ".cache"))
    return cache_dir / "typetags" / "settings.db"


@dataclass
class Config:
    """Main application configuration."""

    db_path: Path = field(default_factory=_default_db_path)
    settings_key: str = DEFAULT_SETTINGS_KEY
    root_tag: str = DEFAULT_ROOT_TAG
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        config = cls()
        config._apply_env()
        return config

    @classmethod
    def from_file(cls, path: Path | str) -> "Config":
        """Load configuration from a TOML file, then apply env overrides.

        Args:
            path: Path to the TOML configuration file.

        Returns:
            Config with file values and environment overrides applied.
        """
        with open(path, "rb") as f:
            data = tomllib.load(f)

        config = cls()
        if db_path := data.get("db_path"):
            config.db_path = Path(db_path)
        if settings_key := data.get("settings_key"):
            config.settings_key = settings_key
        if root_tag := data.get("root_tag"):
            config.root_tag = root_tag
        if log_level := data.get("log_level"):
            config.log_level = log_level

        config._apply_env()
        return config

    @classmethod
    def from_env_or_file(cls, path: Path | str | None = None) -> "Config":
        """Load from an explicit path, TYPETAGS_CONFIG, or the environment."""
        path = path or os.environ.get("TYPETAGS_CONFIG")
        if path:
            return cls.from_file(path)
        return cls.from_env()

    def _apply_env(self) -> None:
        if path := os.environ.get("TYPETAGS_DB_PATH"):
            self.db_path = Path(path)

        if key := os.environ.get("TYPETAGS_SETTINGS_KEY"):
            self.settings_key = key

        if level := os.environ.get("TYPETAGS_LOG_LEVEL"):
            self.log_level = level.upper()
