"""Client settings loaded from environment variables."""

import json
import logging
from typing import Annotated, Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode

from az_arm._auth import DEFAULT_ENDPOINT

logger = logging.getLogger(__name__)


class ArmSettings(BaseSettings):
    """Configuration for an :class:`~az_arm.client.ArmClient`.

    Values are read from environment variables (case-insensitive) and
    optionally from a ``.env`` file in the working directory.  ``ARM_SCOPES``
    takes a comma-separated list (``https://x/.default,https://y/.default``)
    or a JSON array.
    """

    arm_endpoint: str = DEFAULT_ENDPOINT
    arm_scopes: Annotated[list[str], NoDecode] = []
    arm_tenant_id: str = ""
    arm_timeout: int = 30

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    @field_validator("arm_scopes", mode="before")
    @classmethod
    def _split_scopes(cls, value: Any) -> Any:
        if not isinstance(value, str):
            return value
        value = value.strip()
        if value.startswith("["):
            return json.loads(value)
        return [scope.strip() for scope in value.split(",") if scope.strip()]

    @field_validator("arm_endpoint")
    @classmethod
    def _validate_endpoint(cls, value: str) -> str:
        value = value.rstrip("/")
        if not value.startswith(("https://", "http://")):
            raise ValueError(
                f"ARM_ENDPOINT must be an http(s) URL, got {value!r}. "
                f"Leave it unset to use {DEFAULT_ENDPOINT}."
            )
        return value

    @field_validator("arm_timeout")
    @classmethod
    def _validate_timeout(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("ARM_TIMEOUT must be a positive number of seconds")
        return value
