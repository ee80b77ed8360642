"""Pydantic model for the Cronos zkEVM plugin configuration."""

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

ADDRESS_KEY = "CRONOSZKEVM_ADDRESS"
PRIVATE_KEY_KEY = "CRONOSZKEVM_PRIVATE_KEY"

# Order matters: errors are reported in this order.
REQUIRED_KEYS = (ADDRESS_KEY, PRIVATE_KEY_KEY)

_REQUIRED_MESSAGES = {
    "address": "Cronos zkEVM address is required",
    "private_key": "Cronos zkEVM private key is required",
}


class CronosZkEVMConfig(BaseModel):
    """Validated Cronos zkEVM configuration.

    Instances are immutable and always hold two non-empty strings. Fields are
    read from their environment-style aliases (``CRONOSZKEVM_ADDRESS``,
    ``CRONOSZKEVM_PRIVATE_KEY``) but may also be populated by field name.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, strict=True)

    address: str = Field(
        ..., alias=ADDRESS_KEY, min_length=1, description="Cronos zkEVM wallet address"
    )
    private_key: str = Field(
        ...,
        alias=PRIVATE_KEY_KEY,
        min_length=1,
        repr=False,
        description="Private key for the wallet address",
    )

    @field_validator("address", "private_key", mode="before")
    @classmethod
    def require_value(cls, v: object, info: ValidationInfo) -> object:
        """Reject absent and empty values with a readable message."""
        if v is None or v == "":
            raise PydanticCustomError("required", _REQUIRED_MESSAGES[info.field_name])
        return v

    def to_settings(self) -> Dict[str, str]:
        """Return the configuration keyed by setting name."""
        return self.model_dump(by_alias=True)
