"""Client configuration sourced from explicit arguments or the environment."""
import os
from typing import Optional

from pydantic import BaseModel, Field

from .exceptions import DashXConfigurationError


DEFAULT_BASE_URI = "https://api.dashx.com/graphql"

ENV_VARS = {
    "base_uri": "DASHX_BASE_URI",
    "public_key": "DASHX_PUBLIC_KEY",
    "private_key": "DASHX_PRIVATE_KEY",
    "target_environment": "DASHX_TARGET_ENVIRONMENT",
    "target_installation": "DASHX_TARGET_INSTALLATION",
}

REQUIRED_FIELDS = ("base_uri", "public_key", "private_key", "target_environment")


def _check_fields(overrides: dict) -> None:
    unknown = set(overrides) - set(ENV_VARS)
    if unknown:
        raise TypeError(f"Unknown config fields: {', '.join(sorted(unknown))}")


class ClientConfig(BaseModel):
    """Connection settings for a DashX client."""

    base_uri: str = Field(DEFAULT_BASE_URI, description="GraphQL endpoint URL")
    public_key: Optional[str] = Field(None, description="Sent as X-Public-Key")
    private_key: Optional[str] = Field(
        None, description="Sent as X-Private-Key; also the identity token key", repr=False
    )
    target_environment: Optional[str] = Field(
        None, description="Sent as X-Target-Environment"
    )
    target_installation: Optional[str] = Field(
        None, description="Sent as X-Target-Installation when set"
    )

    @classmethod
    def from_env(cls, **overrides: Optional[str]) -> "ClientConfig":
        """Build a config, defaulting each unset field from its DASHX_* variable.

        The environment is read once, here. Overrides that are None or empty
        fall back to the environment.
        """
        _check_fields(overrides)

        values = {}
        for field_name, env_var in ENV_VARS.items():
            # Empty strings count as unset, like blank entries in .env files
            value = overrides.get(field_name) or os.getenv(env_var)
            if value:
                values[field_name] = value

        return cls(**values)

    def with_overrides(self, **overrides: Optional[str]) -> "ClientConfig":
        """Return a copy with the non-empty overrides applied."""
        _check_fields(overrides)
        return self.model_copy(update={k: v for k, v in overrides.items() if v})

    def missing_fields(self) -> list[str]:
        return [name for name in REQUIRED_FIELDS if not getattr(self, name)]

    def require(self) -> "ClientConfig":
        """Raise DashXConfigurationError if any required field is unset."""
        missing = self.missing_fields()
        if missing:
            raise DashXConfigurationError(missing)
        return self
