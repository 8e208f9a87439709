# src/snouty/core/profiles.py
"""Static rule sets for the two launch parameter profiles.

Each profile is a frozen, strict Pydantic model whose fields are keyed
by the dotted parameter name (via alias). Profiles differ in how they
treat undeclared keys:

- testParams (RunParams): open. Undeclared keys are custom metadata and
  pass through. Integration keys under ``antithesis.integrations.`` are
  always allowed and type-checked by the validator.
- debuggingParams (DebuggingParams): closed. Any undeclared key is an
  error.

All values are strings on the wire, so numeric and boolean fields are
checked for their textual form.
"""

import re
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

_INTEGER = re.compile(r"[0-9]+")
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_BOOLEAN_VALUES = ("true", "false")

# Keys that the open profile always accepts, with their own type rules
INTEGRATION_BLOCK_KEY = re.compile(r"^antithesis\.integrations\.[^.]+$")
INTEGRATION_FIELD_KEY = re.compile(r"^antithesis\.integrations\.[^.]+\.[^.]+$")


class Profile(str, Enum):
    """Named validation targets."""

    TEST = "testParams"
    DEBUGGING = "debuggingParams"


class RunParams(BaseModel):
    """Rules for ``snouty run`` (testParams)."""

    model_config = ConfigDict(frozen=True, strict=True, extra="allow")

    duration: str = Field(alias="antithesis.duration")
    description: str | None = Field(default=None, alias="antithesis.description")
    test_name: str | None = Field(default=None, alias="antithesis.test_name")
    config_image: str | None = Field(default=None, alias="antithesis.config_image")
    images: str | None = Field(default=None, alias="antithesis.images")
    source: str | None = Field(default=None, alias="antithesis.source")
    is_ephemeral: str | None = Field(default=None, alias="antithesis.is_ephemeral")
    report_recipients: str | None = Field(
        default=None, alias="antithesis.report.recipients"
    )

    @field_validator("duration")
    @classmethod
    def validate_duration(cls, v: str) -> str:
        """Duration is a whole number of minutes."""
        if not _INTEGER.fullmatch(v):
            raise ValueError(f"expected an integer string, got {v!r}")
        return v

    @field_validator("is_ephemeral")
    @classmethod
    def validate_is_ephemeral(cls, v: str | None) -> str | None:
        if v is not None and v not in _BOOLEAN_VALUES:
            raise ValueError(f"expected 'true' or 'false', got {v!r}")
        return v


class DebuggingParams(BaseModel):
    """Rules for ``snouty debug`` (debuggingParams)."""

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    session_id: str = Field(alias="antithesis.debugging.session_id")
    input_hash: str = Field(alias="antithesis.debugging.input_hash")
    vtime: str = Field(alias="antithesis.debugging.vtime")
    report_recipients: str | None = Field(
        default=None, alias="antithesis.report.recipients"
    )

    @field_validator("session_id", "input_hash")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("expected a non-empty string")
        return v

    @field_validator("vtime")
    @classmethod
    def validate_vtime(cls, v: str) -> str:
        """Virtual time is a decimal number of seconds."""
        if not _DECIMAL.fullmatch(v):
            raise ValueError(f"expected a decimal number string, got {v!r}")
        return v


PROFILE_MODELS: dict[Profile, type[BaseModel]] = {
    Profile.TEST: RunParams,
    Profile.DEBUGGING: DebuggingParams,
}

# Profiles whose integration keys get checked on top of the model
INTEGRATION_PROFILES: frozenset[Profile] = frozenset({Profile.TEST})
