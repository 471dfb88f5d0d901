"""Configuration service for managing FocusCard configuration.

This module provides the ConfigService class, the single source of truth for
settings. It handles:

- Loading and saving config.json
- Config file initialization with sensible defaults
- Setting individual values by dotted key (``timer.focus_minutes``)
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir
from pydantic import ValidationError

from focuscard.models.config_models import AppConfig


class ConfigError(RuntimeError):
    """The config file exists but cannot be read or validated."""


class ConfigService:
    """Service for managing application configuration."""

    def __init__(self, config_dir: Path | None = None):
        """Initialize the config service."""
        self.config_dir = config_dir or Path(user_config_dir("focuscard"))
        self.config_path = self.config_dir / "config.json"
        self.config_dir.mkdir(parents=True, exist_ok=True)

        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> AppConfig:
        """Load configuration from storage, creating defaults on first run."""
        if self._config is not None:
            return self._config

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            # First run
            self._config = AppConfig()
            self.save_config()
        except Exception as e:
            raise ConfigError(f"Failed to load config: {e}") from e

        return self._config

    def save_config(self):
        """Save the current configuration to storage."""
        if self._config is None:
            raise RuntimeError("No configuration to save")

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self._config.model_dump_json(indent=4))
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}") from e

    def reset_config(self) -> AppConfig:
        """Reset configuration to defaults."""
        if self.config_path.exists():
            self.config_path.unlink()
        self._config = AppConfig()
        self.save_config()
        return self._config

    def get_value(self, key: str) -> Any:
        """Read a value by dotted key, e.g. ``ui.start_tab``."""
        data: Any = self.config.model_dump()
        for part in key.split("."):
            if not isinstance(data, dict) or part not in data:
                raise KeyError(key)
            data = data[part]
        return data

    def set_value(self, key: str, raw_value: str) -> AppConfig:
        """Set a value by dotted key and save.

        ``raw_value`` is parsed as JSON when possible (numbers, booleans,
        lists), otherwise used as a plain string. The result is validated
        against the config models before anything is written.

        Raises:
            KeyError: If the key does not exist
            ValueError: If the value does not validate
        """
        self.get_value(key)

        try:
            value = json.loads(raw_value)
        except json.JSONDecodeError:
            value = raw_value

        data = self.config.model_dump()
        target = data
        *parents, leaf = key.split(".")
        for part in parents:
            target = target[part]
        target[leaf] = value

        try:
            new_config = AppConfig.model_validate(data)
        except ValidationError as e:
            raise ValueError(f"Invalid value for '{key}': {raw_value}") from e

        self._config = new_config
        self.save_config()
        return new_config

    def rename_label(self, index: int, name: str) -> AppConfig:
        """Rename a configured default label and save.

        Raises:
            IndexError: If there is no label at *index*
        """
        current = self.config
        labels = list(current.board.labels)
        if not 0 <= index < len(labels):
            raise IndexError(f"No label at index {index}")
        labels[index] = name

        new_config = current.model_copy(
            update={"board": current.board.model_copy(update={"labels": labels})}
        )
        self._config = new_config
        try:
            self.save_config()
        except RuntimeError:
            self._config = current
            raise
        return new_config


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get a cached ConfigService instance."""
    config_service = ConfigService()
    config_service.load_config()
    return config_service
