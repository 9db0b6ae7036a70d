#!/usr/bin/env python3
"""
Settings store for the preflop advisor.

Values are addressed with dot notation ("advisor.preflop.currency_symbol"),
registered with a default by the component that owns them, and persisted to a
JSON file so a user can override them between runs.

Usage:
    from preflop_advisor.config.settings import Settings

    settings = Settings()
    settings.create("advisor.preflop.currency_symbol", default="$")
    symbol = settings.get("advisor.preflop.currency_symbol")

    settings.update("cli.logging.level", "DEBUG")
    settings.reset_group("parser.money")
"""

import json
import os
from datetime import datetime
from pathlib import Path
from threading import Lock
from typing import Any, Dict, Optional
import logging
from box import Box

logger = logging.getLogger(__name__)

SETTINGS_ENV_VAR = "PREFLOP_ADVISOR_SETTINGS"


def default_settings_file() -> Path:
    """Per-user settings file under $XDG_CONFIG_HOME (or ~/.config)."""
    config_home = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(config_home) / "preflop_advisor" / "settings.json"


def _new_box(data: Optional[Dict[str, Any]] = None) -> Box:
    return Box(data or {}, default_box=True, box_dots=True)


class Settings:
    """
    Process-wide hierarchical settings backed by a JSON file.

    Thread-safe singleton: every component calling ``Settings()`` shares the
    same instance, so a default registered by one is visible to the others.
    """

    _instance = None
    _lock = Lock()

    def __new__(cls, settings_file: Optional[Path] = None):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super(Settings, cls).__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self, settings_file: Optional[Path] = None):
        """
        Args:
            settings_file: JSON file to load from and save to. Falls back to
                $PREFLOP_ADVISOR_SETTINGS, then the per-user file from
                default_settings_file().
        """
        if self._initialized:
            return

        self._initialized = True

        if settings_file is None:
            env_path = os.environ.get(SETTINGS_ENV_VAR)
            if env_path:
                settings_file = Path(env_path)
            else:
                settings_file = default_settings_file()
        self.settings_file = Path(settings_file)

        self._settings = _new_box()
        self._defaults = _new_box()
        self._load_from_file()

        logger.info(f"Settings initialized from {self.settings_file}")

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the shared instance so the next ``Settings()`` reloads from disk."""
        with cls._lock:
            cls._instance = None

    def create(self, setting_name: str, default: Any) -> None:
        """
        Register a setting and its default.

        A value already present in the settings file wins over the default.
        """
        self._set_nested(self._defaults, setting_name, default)

        existing_value = self._get_nested(self._settings, setting_name)
        if existing_value is None:
            self._set_nested(self._settings, setting_name, default)
            self._save_to_file()
            logger.debug(f"Created setting '{setting_name}' with default value: {default}")
        else:
            logger.debug(f"Setting '{setting_name}' kept file value: {existing_value} (default: {default})")

    def update(self, setting_name: str, value: Any) -> None:
        """
        Change the value of an existing setting.

        Raises:
            KeyError: If the setting was never created
        """
        old_value = self._get_nested(self._settings, setting_name)
        if old_value is None:
            raise KeyError(f"Setting '{setting_name}' does not exist. Use create() first.")

        self._set_nested(self._settings, setting_name, value)
        self._save_to_file()

        logger.debug(f"Updated setting '{setting_name}': {old_value} -> {value}")

    def get(self, setting_name: str, fallback: Any = None) -> Any:
        """Return a setting's value, its default, or ``fallback``."""
        value = self._get_nested(self._settings, setting_name)
        if value is not None:
            return value

        if fallback is not None:
            return fallback
        default = self._get_nested(self._defaults, setting_name)
        return default if default is not None else fallback

    def get_group(self, group_path: str) -> Dict[str, Any]:
        """Return every setting below ``group_path`` as a plain dict."""
        group_data = self._get_nested(self._settings, group_path)

        if group_data is None:
            logger.warning(f"Group '{group_path}' not found")
            return {}

        if isinstance(group_data, Box):
            return group_data.to_dict()
        return group_data if isinstance(group_data, dict) else {}

    def exists(self, setting_name: str) -> bool:
        return self._get_nested(self._settings, setting_name) is not None

    def reset(self, setting_name: str) -> None:
        """
        Restore a setting to the default it was created with.

        Raises:
            KeyError: If the setting has no registered default
        """
        default_value = self._get_nested(self._defaults, setting_name)
        if default_value is None:
            raise KeyError(f"Setting '{setting_name}' has no default value")

        self._set_nested(self._settings, setting_name, default_value)
        self._save_to_file()

        logger.info(f"Reset setting '{setting_name}' to default: {default_value}")

    def reset_group(self, group_path: str) -> None:
        """Restore every setting below ``group_path`` to its default."""
        defaults_group = self._get_nested(self._defaults, group_path)
        if not isinstance(defaults_group, dict):
            logger.warning(f"No defaults found for group '{group_path}'")
            return

        for key, value in self._flatten(defaults_group, group_path).items():
            self._set_nested(self._settings, key, value)
        self._save_to_file()

        logger.info(f"Reset group '{group_path}' to defaults")

    def delete(self, setting_name: str) -> None:
        self._delete_nested(self._settings, setting_name)
        self._delete_nested(self._defaults, setting_name)
        self._save_to_file()

        logger.info(f"Deleted setting '{setting_name}'")

    def _flatten(self, data: Dict[str, Any], prefix: str) -> Dict[str, Any]:
        flat = {}
        for key, value in data.items():
            path = f"{prefix}.{key}" if prefix else key
            if isinstance(value, dict):
                flat.update(self._flatten(value, path))
            else:
                flat[path] = value
        return flat

    def _get_nested(self, data: Box, path: str) -> Any:
        """Walk ``path`` through nested boxes; empty groups count as missing."""
        current: Any = data
        for key in path.split('.'):
            # membership test, not get(): a default_box would create the key
            if not isinstance(current, dict) or key not in current:
                return None
            current = current[key]

        if isinstance(current, dict) and len(current) == 0:
            return None
        return current

    def _set_nested(self, data: Box, path: str, value: Any) -> None:
        keys = path.split('.')
        current = data
        for key in keys[:-1]:
            if key not in current or not isinstance(current[key], dict):
                current[key] = _new_box()
            current = current[key]
        current[keys[-1]] = value

    def _delete_nested(self, data: Box, path: str) -> None:
        keys = path.split('.')
        current = data
        for key in keys[:-1]:
            if key not in current or not isinstance(current[key], dict):
                return
            current = current[key]
        if keys[-1] in current:
            del current[keys[-1]]

    def _load_from_file(self) -> None:
        if not self.settings_file.exists():
            logger.info(f"Settings file not found, creating new: {self.settings_file}")
            self._save_to_file()
            return

        try:
            with open(self.settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse settings file: {e}")
            logger.warning("Using empty settings")
            return

        if isinstance(data, dict) and "settings" in data:
            data = data["settings"]
        if not isinstance(data, dict):
            logger.warning(f"Ignoring malformed settings file: {self.settings_file}")
            return

        self._settings = _new_box(data)
        logger.info(f"Loaded settings from {self.settings_file}")

    def _save_to_file(self) -> None:
        try:
            self.settings_file.parent.mkdir(parents=True, exist_ok=True)

            data = {
                "settings": self._settings.to_dict(),
                "metadata": {
                    "version": "1.0",
                    "last_modified": datetime.now().isoformat()
                }
            }

            with open(self.settings_file, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2)

            logger.debug(f"Settings saved to {self.settings_file}")
        except OSError as e:
            logger.error(f"Failed to save settings to {self.settings_file}: {e}")
            raise
