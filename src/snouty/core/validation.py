# src/snouty/core/validation.py
"""Validate a ParameterSet against a launch profile.

``validate`` is a pure function: it never mutates its input and it
collects every violation before returning, so the CLI can show the whole
list at once.
"""

import structlog
from pydantic import ValidationError
from pydantic_core import ErrorDetails

from snouty.contracts import ParameterSet, ValidationFailedError
from snouty.core.profiles import (
    INTEGRATION_BLOCK_KEY,
    INTEGRATION_FIELD_KEY,
    INTEGRATION_PROFILES,
    PROFILE_MODELS,
    Profile,
)

logger = structlog.get_logger(__name__)


def _format_error(error: ErrorDetails) -> str:
    key = ".".join(str(part) for part in error["loc"])
    error_type = error["type"]
    if error_type == "missing":
        return f"missing required property '{key}'"
    if error_type == "extra_forbidden":
        return f"additional property '{key}' not allowed"
    if error_type == "value_error":
        return f"{key}: {error['ctx']['error']}"
    return f"{key}: {error['msg'].lower()}"


def _check_integrations(params: ParameterSet) -> list[str]:
    violations: list[str] = []
    for key in params:
        value = params[key]
        if INTEGRATION_BLOCK_KEY.match(key):
            if not isinstance(value, dict):
                violations.append(f"{key}: expected an object of string fields")
                continue
            for member, member_value in value.items():
                if not isinstance(member_value, str):
                    violations.append(f"{key}.{member}: expected a string")
        elif INTEGRATION_FIELD_KEY.match(key) and not isinstance(value, str):
            violations.append(f"{key}: expected a string")
    return violations


def validate(params: ParameterSet, profile: Profile) -> list[str]:
    """Check ``params`` against ``profile``.

    Args:
        params: Parameters to check. Not modified.
        profile: Which rule set to apply.

    Returns:
        Human-readable violations in a stable order; empty when valid.
    """
    model = PROFILE_MODELS[profile]
    violations: list[str] = []

    try:
        model.model_validate(params.to_wire())
    except ValidationError as e:
        violations.extend(_format_error(error) for error in e.errors())

    if profile in INTEGRATION_PROFILES:
        violations.extend(_check_integrations(params))

    if violations:
        logger.debug(
            "validation failed",
            profile=profile.value,
            violation_count=len(violations),
        )
    else:
        logger.debug("validation passed", profile=profile.value)
    return violations


def require_valid(params: ParameterSet, profile: Profile) -> None:
    """Raise ValidationFailedError unless ``params`` satisfies ``profile``."""
    violations = validate(params, profile)
    if violations:
        raise ValidationFailedError(violations)
