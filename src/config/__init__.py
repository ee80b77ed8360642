"""Cronos zkEVM plugin configuration module."""

from .config_loader import BaseSettingsProvider, MappingSettingsProvider, YamlSettingsProvider, load_settings
from .config_schema import ADDRESS_KEY, PRIVATE_KEY_KEY, CronosZkEVMConfig
from .validator import (
    ConfigValidationError,
    ConfigValidationResult,
    FieldError,
    check_config,
    validate_cronoszkevm_config,
)

__all__ = [
    "ADDRESS_KEY",
    "PRIVATE_KEY_KEY",
    "BaseSettingsProvider",
    "MappingSettingsProvider",
    "YamlSettingsProvider",
    "load_settings",
    "CronosZkEVMConfig",
    "ConfigValidationError",
    "ConfigValidationResult",
    "FieldError",
    "check_config",
    "validate_cronoszkevm_config",
]
