"""Shared contracts for types that cross module boundaries.

Import pattern:
    from snouty.contracts import ParameterSet, ValidationFailedError
"""

from snouty.contracts.errors import (
    ApiError,
    InvalidArgumentsError,
    MissingConfigError,
    SnoutyError,
    TransportError,
    ValidationFailedError,
)
from snouty.contracts.params import (
    REDACTED,
    ParameterSet,
    is_sensitive_key,
)

__all__ = [
    # errors
    "ApiError",
    "InvalidArgumentsError",
    "MissingConfigError",
    "SnoutyError",
    "TransportError",
    "ValidationFailedError",
    # params
    "REDACTED",
    "ParameterSet",
    "is_sensitive_key",
]
