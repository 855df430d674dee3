"""Settings persistence for user preferences.

Settings are stored in an OS-appropriate location and survive application
restarts. Failures to read or write them are logged and never interrupt
editing.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import EditorConstants

logger = logging.getLogger(__name__)


class SettingsPersistence:
    """Manages persistent storage of application settings.

    Settings are stored as a JSON object in the user's config directory.
    """

    def __init__(self, config_dir: Optional[Path] = None):
        """Initialize settings persistence.

        Args:
            config_dir: Directory holding the settings file. Defaults to the
                platform config directory for textpad.
        """
        if config_dir is None:
            config_dir = Path(platformdirs.user_config_dir(EditorConstants.APP_NAME,
                                                           EditorConstants.APP_AUTHOR))
        self._config_dir = Path(config_dir)
        self._settings_file = self._config_dir / "settings.json"
        self._settings_cache: Optional[Dict[str, Any]] = None

    @property
    def settings_file(self) -> Path:
        return self._settings_file

    def _ensure_config_dir(self) -> None:
        """Ensure the config directory exists."""
        try:
            self._config_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning(f"Could not create config directory {self._config_dir}: {e}")

    def _load_all_settings(self) -> Dict[str, Any]:
        """Load settings from disk.

        Returns:
            Dictionary of settings. Empty if the file doesn't exist or can't
            be read.
        """
        if self._settings_cache is not None:
            return self._settings_cache

        if not self._settings_file.exists():
            self._settings_cache = {}
            return self._settings_cache

        try:
            with open(self._settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Could not load settings from {self._settings_file}: {e}")
            self._settings_cache = {}
            return self._settings_cache

        if not isinstance(data, dict):
            logger.warning("Settings file has invalid format (not a dict), ignoring")
            data = {}

        self._settings_cache = data
        return self._settings_cache

    def _save_all_settings(self, settings: Dict[str, Any]) -> bool:
        """Save settings to disk atomically (temp file + rename).

        Returns:
            True if save was successful, False otherwise.
        """
        self._ensure_config_dir()
        temp_file = self._settings_file.with_suffix('.tmp')

        try:
            with open(temp_file, 'w', encoding='utf-8') as f:
                json.dump(settings, f, indent=2)
            temp_file.replace(self._settings_file)
            self._settings_cache = settings
            return True
        except OSError as e:
            logger.warning(f"Could not save settings to {self._settings_file}: {e}")
            try:
                if temp_file.exists():
                    temp_file.unlink()
            except OSError:
                pass
            return False

    def get(self, key: str, default: Any = None) -> Any:
        """Get a setting, falling back to default when missing or invalid."""
        value = self._load_all_settings().get(key, default)
        if not self.validate_setting(key, value):
            logger.warning(f"Ignoring invalid value for setting {key!r}: {value!r}")
            return default
        return value

    def set(self, key: str, value: Any) -> bool:
        """Store a setting and write all settings to disk.

        Returns:
            True if save was successful, False otherwise.
        """
        if not self.validate_setting(key, value):
            logger.warning(f"Refusing to store invalid value for setting {key!r}: {value!r}")
            return False
        settings = dict(self._load_all_settings())
        settings[key] = value
        return self._save_all_settings(settings)

    def get_last_directory(self) -> Optional[Path]:
        """Directory of the last opened or saved file, if it still exists."""
        value = self.get(EditorConstants.LAST_DIRECTORY)
        if value and os.path.isdir(value):
            return Path(value)
        return None

    def remember_directory(self, path: Path) -> bool:
        """Record the directory containing path for the next file dialog."""
        directory = os.path.dirname(os.path.abspath(path))
        return self.set(EditorConstants.LAST_DIRECTORY, directory)

    def validate_setting(self, key: str, value: Any) -> bool:
        """Validate a setting value.

        Args:
            key: Setting key name.
            value: Setting value to validate.

        Returns:
            True if setting is valid, False otherwise.
        """
        if value is None:
            return True  # None is valid (means "not set")

        if key == EditorConstants.LAST_DIRECTORY:
            return isinstance(value, str)

        # Unknown settings are considered valid (forward compatibility)
        return True

    def clear_cache(self) -> None:
        """Clear the in-memory cache of settings."""
        self._settings_cache = None


# Global instance
_persistence: Optional[SettingsPersistence] = None


def get_persistence() -> SettingsPersistence:
    """Get the global settings persistence instance.

    Returns:
        The singleton SettingsPersistence instance.
    """
    global _persistence
    if _persistence is None:
        _persistence = SettingsPersistence()
    return _persistence
