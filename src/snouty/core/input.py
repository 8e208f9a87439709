# src/snouty/core/input.py
"""Collect parameters for one invocation from stdin and trailing arguments.

Stdin is only consulted when the user passes ``--stdin``. It may hold a
JSON document (JSON5 relaxations such as comments and trailing commas are
accepted) or, for debugging sessions, a ``Moment.from({...})`` snippet.
When both stdin and arguments are given, stdin is the base and the
arguments are merged on top.
"""

from collections.abc import Sequence
from typing import Any

import json5
import structlog

from snouty.contracts import InvalidArgumentsError, ParameterSet
from snouty.core.args import parse_args
from snouty.core.moment import is_moment_format, parse_moment

logger = structlog.get_logger(__name__)


def parse_json(text: str) -> ParameterSet:
    """Parse a JSON5-tolerant object into a ParameterSet.

    Raises:
        InvalidArgumentsError: If the text is not valid JSON or not an object.
    """
    try:
        value: Any = json5.loads(text)
    except ValueError as e:
        raise InvalidArgumentsError(f"invalid JSON: {e}") from e
    params = ParameterSet.from_json(value)
    logger.debug("parsed params from JSON", count=len(params))
    return params


def parse_stdin_text(text: str, *, allow_moment: bool) -> ParameterSet:
    """Parse the text read from stdin.

    Args:
        text: Raw stdin contents.
        allow_moment: Whether ``Moment.from`` input is accepted (debug only).
    """
    stripped = text.strip()
    if allow_moment and is_moment_format(stripped):
        logger.debug("detected Moment.from on stdin")
        return parse_moment(stripped)
    logger.debug("parsing stdin as JSON")
    return parse_json(stripped)


def collect_params(
    args: Sequence[str],
    *,
    stdin_text: str | None,
    allow_moment: bool,
) -> ParameterSet:
    """Build the ParameterSet for one command.

    Args:
        args: Trailing ``--key value`` tokens.
        stdin_text: Contents of stdin when ``--stdin`` was given, else None.
        allow_moment: Whether stdin may use the Moment.from format.

    Returns:
        The stdin parameters with argument parameters merged on top, or the
        argument parameters alone.

    Raises:
        InvalidArgumentsError: If nothing was supplied or any input is malformed.
    """
    if stdin_text is None:
        if not args:
            raise InvalidArgumentsError("no parameters provided")
        return parse_args(args)

    params = parse_stdin_text(stdin_text, allow_moment=allow_moment)
    if args:
        overlay = parse_args(args)
        logger.debug("merging argument params over stdin params", count=len(overlay))
        params.merge(overlay)
    return params
