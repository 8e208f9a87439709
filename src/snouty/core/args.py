# src/snouty/core/args.py
"""Parse trailing ``--key value`` command-line tokens into a ParameterSet.

Tokens are consumed pairwise. Values are kept verbatim as strings; the
validator decides what they must look like.

Integration settings are grouped: a key of the form
``<namespace>.integrations.<provider>.<field>`` is stored as member
``<field>`` of an object under ``<namespace>.integrations.<provider>``.
Every other key, dotted or not, is stored flat.

Example:
    >>> parse_args(["--antithesis.duration", "30"]).to_wire()
    {'antithesis.duration': '30'}
    >>> parse_args(["--ns.integrations.gh.token", "t"]).to_wire()
    {'ns.integrations.gh': {'token': 't'}}
"""

import re
from collections.abc import Iterable
from typing import Any

import structlog

from snouty.contracts import InvalidArgumentsError, ParameterSet

logger = structlog.get_logger(__name__)

FLAG_MARKER = "--"

_INTEGRATION_KEY = re.compile(
    r"^(?P<block>[^.]+\.integrations\.[^.]+)\.(?P<field>[^.]+)$"
)


def split_integration_key(key: str) -> tuple[str, str] | None:
    """Split an integration key into (block key, field name).

    Returns None when ``key`` is not an integration field key.
    """
    match = _INTEGRATION_KEY.match(key)
    if match is None:
        return None
    return match.group("block"), match.group("field")


def _insert(values: dict[str, Any], key: str, value: str) -> None:
    split = split_integration_key(key)
    if split is None:
        values[key] = value
        return

    block_key, field_name = split
    block = values.get(block_key)
    if not isinstance(block, dict):
        block = {}
        values[block_key] = block
    block[field_name] = value


def parse_args(tokens: Iterable[str]) -> ParameterSet:
    """Parse ``--key value`` pairs.

    Args:
        tokens: Raw command-line tokens, e.g. ``["--a", "1", "--b", "2"]``.

    Returns:
        ParameterSet with one entry per key (integration fields grouped).

    Raises:
        InvalidArgumentsError: On a bare ``--``, a key without a value, or a
            token without the ``--`` marker where a key was expected.
    """
    values: dict[str, Any] = {}
    iterator = iter(tokens)

    for token in iterator:
        if not token.startswith(FLAG_MARKER):
            raise InvalidArgumentsError(f"unexpected argument: {token}")

        key = token[len(FLAG_MARKER) :]
        if not key:
            raise InvalidArgumentsError(f"empty key after {FLAG_MARKER}")

        try:
            value = next(iterator)
        except StopIteration:
            raise InvalidArgumentsError(
                f"missing value for {FLAG_MARKER}{key}"
            ) from None

        _insert(values, key, value)

    logger.debug("parsed params from arguments", count=len(values))
    return ParameterSet(values=values)
