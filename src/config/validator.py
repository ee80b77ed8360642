"""Validation of the Cronos zkEVM plugin configuration.

Values are looked up in the host runtime's settings first and in the
environment second, then checked against ``CronosZkEVMConfig``. Every failed
field is reported together in a single ``ConfigValidationError``.
"""

import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from pydantic import ValidationError

from .config_schema import REQUIRED_KEYS, CronosZkEVMConfig

logger = logging.getLogger(__name__)

ERROR_HEADER = "CronosZkEVM configuration validation failed:"


@dataclass(frozen=True)
class FieldError:
    """A single failed field."""

    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


def format_validation_errors(errors: List[FieldError]) -> str:
    """Join field errors into one line per field."""
    return "\n".join(str(error) for error in errors)


class ConfigValidationError(ValueError):
    """Raised when one or more configuration fields are missing or invalid."""

    def __init__(self, errors: List[FieldError]):
        self.errors = list(errors)
        super().__init__(f"{ERROR_HEADER}\n{format_validation_errors(self.errors)}")


class ValidationStatus(Enum):
    """Outcome of a configuration check."""

    VALID = "valid"
    INVALID = "invalid"
    FAULT = "fault"


@dataclass(frozen=True)
class ConfigValidationResult:
    """Result of checking a raw configuration.

    Exactly one of ``config``, ``errors`` or ``fault`` is meaningful,
    depending on ``status``.
    """

    status: ValidationStatus
    config: Optional[CronosZkEVMConfig] = None
    errors: List[FieldError] = field(default_factory=list)
    fault: Optional[Exception] = None

    def __post_init__(self):
        if self.status is ValidationStatus.VALID and self.config is None:
            raise ValueError("A valid result must carry a config")
        if self.status is ValidationStatus.FAULT and self.fault is None:
            raise ValueError("A fault result must carry the exception")

    @classmethod
    def valid(cls, config: CronosZkEVMConfig) -> "ConfigValidationResult":
        return cls(status=ValidationStatus.VALID, config=config)

    @classmethod
    def invalid(cls, errors: List[FieldError]) -> "ConfigValidationResult":
        return cls(status=ValidationStatus.INVALID, errors=list(errors))

    @classmethod
    def faulted(cls, fault: Exception) -> "ConfigValidationResult":
        return cls(status=ValidationStatus.FAULT, fault=fault)

    @property
    def success(self) -> bool:
        return self.status is ValidationStatus.VALID

    def unwrap(self) -> CronosZkEVMConfig:
        """
        Return the validated config or raise.

        Raises:
            ConfigValidationError: If any field failed validation
            Exception: The original fault, unchanged
        """
        if self.status is ValidationStatus.FAULT:
            raise self.fault
        if self.status is ValidationStatus.INVALID:
            raise ConfigValidationError(self.errors)
        return self.config


def resolve_raw_config(
    runtime: Any, env: Optional[Mapping[str, str]] = None
) -> Dict[str, Optional[str]]:
    """
    Collect the raw setting values for every required key.

    A value from the runtime settings wins; an absent or empty one falls back
    to the same-named environment variable.

    Args:
        runtime: Object exposing ``get_setting(key)``
        env: Environment mapping (defaults to ``os.environ``)

    Returns:
        Mapping of setting name to raw value (None when unset everywhere)
    """
    if env is None:
        env = os.environ

    raw: Dict[str, Optional[str]] = {}
    for key in REQUIRED_KEYS:
        value = runtime.get_setting(key)
        source = "settings"
        if not value:
            value = env.get(key)
            source = "environment" if value else "unset"
        logger.debug(f"{key} resolved from {source}")
        raw[key] = value
    return raw


def _field_errors(exc: ValidationError) -> List[FieldError]:
    errors = []
    for err in exc.errors():
        path = ".".join(str(part) for part in err["loc"])
        errors.append(FieldError(field=path, message=err["msg"]))
    return errors


def check_config(raw: Mapping[str, Any]) -> ConfigValidationResult:
    """
    Check a raw configuration without raising.

    Args:
        raw: Mapping of setting name to raw value

    Returns:
        ConfigValidationResult with the config, the field errors, or the fault
    """
    values = {key: raw.get(key) for key in REQUIRED_KEYS}
    try:
        config = CronosZkEVMConfig.model_validate(values)
    except ValidationError as e:
        return ConfigValidationResult.invalid(_field_errors(e))
    except Exception as e:
        return ConfigValidationResult.faulted(e)
    return ConfigValidationResult.valid(config)


async def validate_cronoszkevm_config(
    runtime: Any, env: Optional[Mapping[str, str]] = None
) -> CronosZkEVMConfig:
    """
    Validate the Cronos zkEVM configuration from runtime settings and environment.

    Args:
        runtime: Host runtime exposing ``get_setting(key)``
        env: Environment mapping (defaults to ``os.environ``)

    Returns:
        Validated CronosZkEVMConfig

    Raises:
        ConfigValidationError: If any required setting is missing or empty
    """
    raw = resolve_raw_config(runtime, env)
    return check_config(raw).unwrap()
