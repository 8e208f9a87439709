# src/snouty/core/config.py
"""API configuration loaded from the environment.

Settings are read once when a command starts, validated by Pydantic and
frozen. They are passed explicitly to the API client; nothing reads the
environment after this point.

Environment variables:
    ANTITHESIS_USERNAME  - Basic auth user (required)
    ANTITHESIS_PASSWORD  - Basic auth password (required)
    ANTITHESIS_TENANT    - tenant name, selects https://<tenant>.antithesis.com (required)
    ANTITHESIS_BASE_URL  - full API base URL override (optional)
"""

import os
from collections.abc import Mapping

from pydantic import BaseModel, Field, field_validator

from snouty.contracts import MissingConfigError

ENV_USERNAME = "ANTITHESIS_USERNAME"
ENV_PASSWORD = "ANTITHESIS_PASSWORD"
ENV_TENANT = "ANTITHESIS_TENANT"
ENV_BASE_URL = "ANTITHESIS_BASE_URL"

HOST_SUFFIX = "antithesis.com"
DEFAULT_TIMEOUT_SECONDS = 30.0


class ApiSettings(BaseModel):
    """Credentials and endpoint for the Antithesis API."""

    model_config = {"frozen": True}

    username: str = Field(description="Basic auth username")
    password: str = Field(description="Basic auth password", repr=False)
    tenant: str = Field(description="Tenant name used to build the base URL")
    base_url: str | None = Field(
        default=None,
        description="Override for the API base URL (tests, proxies)",
    )
    timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        gt=0,
        description="Request timeout",
    )

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str | None) -> str | None:
        if v is None:
            return v
        return v.rstrip("/")

    @property
    def api_base_url(self) -> str:
        """Base URL all API paths are appended to."""
        if self.base_url:
            return self.base_url
        return f"https://{self.tenant}.{HOST_SUFFIX}/api/v1"


def _required(environ: Mapping[str, str], name: str) -> str:
    try:
        value = environ[name]
    except KeyError:
        raise MissingConfigError(name) from None
    if not value:
        raise MissingConfigError(name, "empty value")
    return value


def load_settings(environ: Mapping[str, str] | None = None) -> ApiSettings:
    """Build ApiSettings from environment variables.

    Args:
        environ: Mapping to read from. Defaults to ``os.environ``.

    Returns:
        Frozen ApiSettings.

    Raises:
        MissingConfigError: If a required variable is absent or empty.
    """
    if environ is None:
        environ = os.environ

    return ApiSettings(
        username=_required(environ, ENV_USERNAME),
        password=_required(environ, ENV_PASSWORD),
        tenant=_required(environ, ENV_TENANT),
        base_url=environ.get(ENV_BASE_URL) or None,
    )
