# src/snouty/cli.py
"""snouty Command Line Interface.

Entry point for the snouty CLI tool.
"""

import json
import sys
from datetime import datetime, timedelta
from typing import NoReturn

import structlog
import typer

from snouty import __version__
from snouty.clients import DEBUGGING_ENDPOINT, AntithesisClient
from snouty.contracts import InvalidArgumentsError, ParameterSet, SnoutyError
from snouty.core.config import load_settings
from snouty.core.input import collect_params
from snouty.core.logging import configure_logging
from snouty.core.profiles import Profile
from snouty.core.validation import require_valid

logger = structlog.get_logger(__name__)

# Trailing `--key value` pairs are not declared options
_PASSTHROUGH_CONTEXT = {"allow_extra_args": True, "ignore_unknown_options": True}

# Reports arrive some time after the requested run duration
REPORT_DELAY_MINUTES = 10

app = typer.Typer(
    name="snouty",
    help="CLI for the Antithesis API.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"snouty {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging on stderr.",
    ),
) -> None:
    """CLI for the Antithesis API."""
    configure_logging(verbose=verbose)


@app.command(context_settings=_PASSTHROUGH_CONTEXT)
def run(
    ctx: typer.Context,
    webhook: str | None = typer.Option(
        None,
        "--webhook",
        "-w",
        help="Webhook endpoint name (e.g., basic_test, basic_k8s_test).",
    ),
    stdin: bool = typer.Option(
        False,
        "--stdin",
        help="Read parameters from stdin as JSON.",
    ),
) -> None:
    """Launch a test run.

    Parameters are given as trailing `--key value` pairs, e.g.

        snouty run -w basic_test --antithesis.duration 30 --antithesis.images app:latest

    A bare `--` is skipped. A value spelled like one of this command's own
    options (`--stdin`, `-w`, `--help`) is taken as that option; pass such
    values through `--stdin` JSON instead.
    """
    try:
        if webhook is None:
            raise InvalidArgumentsError("missing required option --webhook")
        logger.info("running test", webhook=webhook)
        params = _read_params(ctx.args, use_stdin=stdin, allow_moment=False)
        require_valid(params, Profile.TEST)
        _show_params("Requesting Antithesis test run with params:", params)

        client = AntithesisClient(load_settings())
        body = client.launch(webhook, params)
    except SnoutyError as e:
        _fail(e)

    typer.echo(body)
    eta = datetime.now() + timedelta(
        minutes=_duration_minutes(params) + REPORT_DELAY_MINUTES
    )
    typer.echo(
        f"\nExpect a report email from Antithesis around {_format_eta(eta)}",
        err=True,
    )


@app.command(context_settings=_PASSTHROUGH_CONTEXT)
def debug(
    ctx: typer.Context,
    stdin: bool = typer.Option(
        False,
        "--stdin",
        help="Read parameters from stdin (JSON or Moment.from format).",
    ),
) -> None:
    """Launch a debugging session.

    Copy the Moment.from snippet from a triage report:

        echo 'Moment.from({ session_id: "...", input_hash: "...", vtime: ... })' | snouty debug --stdin

    Trailing `--key value` pairs are merged over stdin. A bare `--` is
    skipped, and a value spelled like `--stdin` or `--help` is taken as that
    option.
    """
    try:
        logger.info("starting debug session")
        params = _read_params(ctx.args, use_stdin=stdin, allow_moment=True)
        require_valid(params, Profile.DEBUGGING)
        _show_params(
            "Requesting the Antithesis multiverse debugger with params:", params
        )

        client = AntithesisClient(load_settings())
        body = client.launch(DEBUGGING_ENDPOINT, params)
    except SnoutyError as e:
        _fail(e)

    typer.echo(body)
    eta = datetime.now() + timedelta(minutes=REPORT_DELAY_MINUTES)
    typer.echo(
        f"\nExpect a debugging session email from Antithesis around {_format_eta(eta)}",
        err=True,
    )


@app.command()
def version() -> None:
    """Print version information."""
    typer.echo(f"snouty {__version__}")


def _read_params(
    args: list[str], *, use_stdin: bool, allow_moment: bool
) -> ParameterSet:
    stdin_text: str | None = None
    if use_stdin:
        try:
            stdin_text = sys.stdin.read()
        except (OSError, UnicodeDecodeError) as e:
            raise InvalidArgumentsError(f"failed to read stdin: {e}") from e
    return collect_params(args, stdin_text=stdin_text, allow_moment=allow_moment)


def _show_params(heading: str, params: ParameterSet) -> None:
    """Print the redacted parameters to stderr before sending."""
    rendered = json.dumps(params.redact(), indent=2)
    typer.echo(f"\n{heading}\n{rendered}", err=True)


def _duration_minutes(params: ParameterSet) -> int:
    value = params.get("antithesis.duration")
    if isinstance(value, str) and value.isdigit():
        return int(value)
    return 0


def _format_eta(eta: datetime) -> str:
    """Format like 'Mar 4 at 2:05 PM'."""
    hour = eta.hour % 12 or 12
    return f"{eta:%b} {eta.day} at {hour}:{eta:%M %p}"


def _fail(error: SnoutyError) -> NoReturn:
    typer.echo(f"error: {error}", err=True)
    raise typer.Exit(1) from None


if __name__ == "__main__":
    app()
