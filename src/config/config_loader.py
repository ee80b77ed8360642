"""Settings providers backed by in-memory mappings and YAML files."""

import yaml
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Mapping, Optional


class BaseSettingsProvider(ABC):
    """Abstract source of named settings.

    Any object with a ``get_setting(key)`` method can be handed to the
    validator; this base class is for providers defined in this package.
    """

    @abstractmethod
    def get_setting(self, key: str) -> Optional[str]:
        """
        Look up a setting by name.

        Args:
            key: Setting name

        Returns:
            Setting value, or None if not set
        """
        pass


class MappingSettingsProvider(BaseSettingsProvider):
    """Settings provider over a plain mapping."""

    def __init__(self, values: Optional[Mapping[str, Any]] = None):
        self._values: Dict[str, str] = {}
        for key, value in (values or {}).items():
            if value is None:
                continue
            if isinstance(value, (dict, list, tuple, set)):
                raise ValueError(
                    f"Setting '{key}' must be a single value, got {type(value).__name__}"
                )
            self._values[str(key)] = value if isinstance(value, str) else str(value)

    def get_setting(self, key: str) -> Optional[str]:
        return self._values.get(key)


class YamlSettingsProvider(MappingSettingsProvider):
    """Settings provider loaded from a flat YAML mapping.

    Scalars are read verbatim as strings; an empty value reads as an empty
    string, which the validator treats the same as an unset one.
    """

    def __init__(self, values: Optional[Mapping[str, Any]] = None, path: Optional[Path] = None):
        super().__init__(values)
        self.path = path

    @classmethod
    def from_file(cls, path: str) -> "YamlSettingsProvider":
        """
        Load settings from a YAML file.

        Args:
            path: Path to settings file

        Returns:
            Provider holding the file's settings

        Raises:
            FileNotFoundError: If the settings file doesn't exist
            ValueError: If the top level of the file is not a mapping, or a
                setting holds a nested mapping or list
        """
        settings_path = Path(path)
        if not settings_path.exists():
            raise FileNotFoundError(f"Settings file not found: {path}")

        with open(settings_path, "r", encoding="utf-8") as f:
            # Every scalar stays a string; 0x... is not read as an int
            data = yaml.load(f, Loader=yaml.BaseLoader)

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(
                f"Settings file must contain a mapping, got {type(data).__name__}"
            )

        return cls(data, path=settings_path)


def load_settings(path: str) -> YamlSettingsProvider:
    """Convenience function to load a YAML settings file."""
    return YamlSettingsProvider.from_file(path)
