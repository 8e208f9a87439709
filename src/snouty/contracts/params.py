# src/snouty/contracts/params.py
"""ParameterSet: the unified in-memory representation of launch parameters.

A ParameterSet maps dotted keys (``antithesis.duration``) to JSON-like
values. Values parsed from CLI arguments are always strings; integration
blocks grouped by the argument parser are dicts of strings. Type
semantics are enforced by the validator, not here.

Lifecycle:
    params = parse_args(tokens)      # or from_json / parse_moment
    params.merge(overlay)            # optional, right-biased
    violations = validate(params, Profile.TEST)
    body = {"params": params.to_wire()}
"""

import copy
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from snouty.contracts.errors import InvalidArgumentsError

REDACTED = "[REDACTED]"

# Keys whose values must never be displayed
SENSITIVE_SUFFIXES: tuple[str, ...] = (".token",)
SENSITIVE_KEYS: frozenset[str] = frozenset({"antithesis.report.recipients"})


def is_sensitive_key(key: str) -> bool:
    """Return True if the value stored under ``key`` must be redacted."""
    return key.endswith(SENSITIVE_SUFFIXES) or key in SENSITIVE_KEYS


def _redact_value(key: str, value: Any) -> Any:
    if is_sensitive_key(key):
        return REDACTED
    if isinstance(value, Mapping):
        # Integration blocks: members are checked under their composite key
        return {
            member: _redact_value(f"{key}.{member}", member_value)
            for member, member_value in value.items()
        }
    return copy.deepcopy(value)


@dataclass
class ParameterSet:
    """Mapping of dotted parameter keys to values for one invocation."""

    values: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_json(cls, value: Any) -> "ParameterSet":
        """Create a ParameterSet from a decoded JSON document.

        Args:
            value: Decoded JSON value. Must be an object.

        Returns:
            ParameterSet holding a copy of the object's members.

        Raises:
            InvalidArgumentsError: If value is not a JSON object.
        """
        if not isinstance(value, dict):
            raise InvalidArgumentsError("expected JSON object")
        return cls(values=copy.deepcopy(value))

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __contains__(self, key: object) -> bool:
        return key in self.values

    def __getitem__(self, key: str) -> Any:
        return self.values[key]

    def get(self, key: str, default: Any = None) -> Any:
        return self.values.get(key, default)

    def merge(self, overlay: "ParameterSet") -> None:
        """Merge ``overlay`` into this set; overlay wins on every shared key.

        The merge is key-wise: an overlay value replaces the base value
        wholesale, even when both are integration blocks.
        """
        for key, value in overlay.values.items():
            self.values[key] = copy.deepcopy(value)

    def redact(self) -> dict[str, Any]:
        """Return a display copy with sensitive values replaced.

        Only for showing the user what is about to be sent. The key set is
        unchanged and redacting an already redacted copy is a no-op.
        """
        return {key: _redact_value(key, value) for key, value in self.values.items()}

    def to_wire(self) -> dict[str, Any]:
        """Return the full, unredacted value sent as the ``params`` field."""
        return copy.deepcopy(self.values)
