from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from . import __version__
from .exit_codes import ExitCode
from .orchestration import run_decode, run_parse
from .reporting import SummaryRenderOptions, render_summary
from .robocopy import HeaderMatch

APP_NAME = "robolog"
_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

app = typer.Typer(
    name=APP_NAME,
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def configure_logging(*, quiet: bool = False) -> None:
    """Initialise application-wide logging."""

    level = logging.WARNING if quiet else logging.INFO
    root = logging.getLogger()

    if getattr(configure_logging, "_configured", False):
        root.setLevel(level)
        for handler in root.handlers:
            handler.setLevel(level)
        return

    # Logs go to stderr so that --json output on stdout stays machine readable.
    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_path=False,
        markup=False,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))

    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    configure_logging._configured = True


def _quote_path(path: Path) -> str:
    """Return a quoted string representation when spaces are present."""

    value = str(path)
    if " " in value:
        return f'"{value}"'
    return value


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    quiet: bool = typer.Option(
        False,
        "--quiet",
        help="Reduce log output to warnings and errors.",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the robolog version and exit.",
    ),
) -> None:
    """Configure logging and handle global options."""

    configure_logging(quiet=quiet)

    if version:
        typer.echo(__version__)
        raise typer.Exit(code=int(ExitCode.SUCCESS))

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=int(ExitCode.SUCCESS))


@app.command("decode")
def decode(
    code: int = typer.Argument(
        ...,
        help="Robocopy process exit code (use `--` before negative values).",
    ),
    fail_on_error: bool = typer.Option(
        False,
        "--fail-on-error",
        help="Exit with a non-zero status when the code reports failed copies.",
    ),
) -> None:
    """Print the label for a Robocopy exit code."""

    outcome = run_decode(code, fail_on_error=fail_on_error)
    if outcome.message:
        typer.echo(outcome.message)
    raise typer.Exit(code=int(outcome.exit_code))


@app.command("parse")
def parse(
    log: Path = typer.Argument(
        ...,
        help="Path to the Robocopy log file.",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit the summary as JSON instead of a table.",
    ),
    labels: list[Path] = typer.Option(
        [],
        "--labels",
        "-l",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="Additional label YAML files to merge (pass multiple times).",
    ),
    header_match: HeaderMatch = typer.Option(
        HeaderMatch.FIRST,
        "--header-match",
        case_sensitive=False,
        help="Keep the first or the last header line matching a label.",
        show_default=True,
    ),
) -> None:
    """Summarise the header and footer of a Robocopy log."""

    logger = logging.getLogger("robolog.cli")
    resolved = log.expanduser()
    logger.info("Parsing %s", _quote_path(resolved))

    outcome = run_parse(resolved, label_paths=labels, header_match=header_match)
    if outcome.summary is not None:
        options = SummaryRenderOptions(json=json_output, display_name=resolved.name)
        typer.echo(render_summary(outcome.summary, options))

    raise typer.Exit(code=int(outcome.exit_code))


def entrypoint() -> None:
    """Execute the Typer application."""

    app()


__all__ = ["app", "entrypoint", "configure_logging", "ExitCode"]
