# src/snouty/core/moment.py
"""Parser for ``Moment.from({...})`` snippets copied from triage reports.

A triage report identifies a moment in a test run with a JavaScript-style
call::

    Moment.from({ session_id: "f89d...-44-22", input_hash: "6057726200491963783", vtime: 329.8037810830865 })

The object literal is read as JSON5, so keys may be bare identifiers,
strings may use either quote style and trailing commas are accepted.

Every value is stored as a string. Numbers keep their literal text, so
``329.8037810830865`` becomes ``"329.8037810830865"``.

The format only ever describes a debugging session, so the recognised
keys are remapped under ``antithesis.debugging.`` and any other key is
rejected.
"""

from typing import Any

import json5
import structlog

from snouty.contracts import InvalidArgumentsError, ParameterSet

logger = structlog.get_logger(__name__)

MOMENT_PREFIX = "Moment.from("
DEBUGGING_NAMESPACE = "antithesis.debugging"
MOMENT_KEYS: frozenset[str] = frozenset({"session_id", "input_hash", "vtime"})


def is_moment_format(text: str) -> bool:
    """Cheap shape check: ``Moment.from(`` prefix and a closing ``)``.

    Does not parse the body.
    """
    stripped = text.strip()
    return stripped.startswith(MOMENT_PREFIX) and stripped.endswith(")")


def _literal(text: str, base: int = 10) -> str:
    # json5 passes hex literals with base=16
    return text


def _parse_object(body: str) -> dict[str, str]:
    try:
        value: Any = json5.loads(
            body,
            parse_int=_literal,
            parse_float=_literal,
            parse_constant=_literal,
            allow_duplicate_keys=False,
        )
    except ValueError as e:
        raise InvalidArgumentsError(f"invalid Moment.from input: {e}") from e

    if not isinstance(value, dict):
        raise InvalidArgumentsError(
            f"invalid Moment.from input: expected an object, got {type(value).__name__}"
        )
    for key, member in value.items():
        if not isinstance(member, str):
            raise InvalidArgumentsError(
                f"invalid Moment.from input: {key!r} must be a string or number"
            )
    return value


def parse_moment(text: str) -> ParameterSet:
    """Parse a ``Moment.from({...})`` snippet into debugging parameters.

    Args:
        text: The snippet, surrounding whitespace allowed.

    Returns:
        ParameterSet keyed under ``antithesis.debugging.``.

    Raises:
        InvalidArgumentsError: If the text is not a Moment.from call, the
            object literal is malformed, or it holds an unrecognised key.
    """
    stripped = text.strip()
    if not is_moment_format(stripped):
        raise InvalidArgumentsError("input is not in Moment.from format")

    body = stripped[len(MOMENT_PREFIX) : -1]
    members = _parse_object(body)

    values: dict[str, str] = {}
    for key, value in members.items():
        if key not in MOMENT_KEYS:
            raise InvalidArgumentsError(
                f"unrecognized key in Moment.from: {key!r} "
                f"(expected one of {', '.join(sorted(MOMENT_KEYS))})"
            )
        values[f"{DEBUGGING_NAMESPACE}.{key}"] = value

    logger.debug("parsed params from Moment.from", count=len(values))
    return ParameterSet(values=values)
