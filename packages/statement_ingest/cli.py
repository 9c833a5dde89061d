"""CLI for the ``statement_ingest`` package.

Exposes a Typer app with a single ``validate`` command. Environment
variables are loaded from a local ``.env`` using ``python-dotenv`` before
settings are resolved; the pipeline itself lives in
:mod:`statement_ingest.batch`.
"""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console

from .batch import StatementFile, process_files
from .config import IngestSettings
from .display import render_results
from .logging_setup import configure_logging
from .notify import Severity

app = typer.Typer(
    name="statement-ingest",
    no_args_is_help=True,
    add_completion=False,
    help="Validate XML/CSV bank-statement exports for duplicate references and balance errors.",
)


class ConsoleSink:
    """Prints notifications to a rich console, colored by severity."""

    def __init__(self, console: Console) -> None:
        self._console = console
        self.errors = 0

    def notify(self, message: str, severity: Severity) -> None:
        if severity == "error":
            self.errors += 1
            self._console.print(f"[red]Error:[/red] {message}", highlight=False)
        else:
            self._console.print(f"[green]OK:[/green] {message}", highlight=False)


def _load_settings() -> IngestSettings:
    try:
        return IngestSettings.from_env()
    except ValueError as e:
        Console(stderr=True).print(f"[red]Error:[/red] {e}", highlight=False)
        raise typer.Exit(2) from e


def _json_default(value: object) -> str:
    if isinstance(value, Decimal):
        return format(value, "f")
    raise TypeError(f"not JSON serializable: {type(value).__name__}")


@app.callback()
def _root() -> None:
    """Load ``.env`` (without overriding the environment) and configure logging."""

    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)
    configure_logging(_load_settings())


@app.command("validate")
def validate_cmd(
    files: Annotated[
        list[Path],
        typer.Argument(help="Statement files (.xml or .csv) to validate", dir_okay=False),
    ],
    as_json: Annotated[
        bool, typer.Option("--json", help="Print results as JSON instead of tables.")
    ] = False,
    strict: Annotated[
        bool, typer.Option(help="Exit non-zero when any record is flagged.")
    ] = True,
) -> None:
    """Read, validate and display one selection of statement files."""

    settings = _load_settings()
    # Notifications go to stderr so --json output stays machine-readable.
    sink = ConsoleSink(Console(stderr=True))
    results = process_files([StatementFile.from_path(p) for p in files], sink, settings)

    if as_json:
        typer.echo(json.dumps([r.to_dict() for r in results], default=_json_default, indent=2))
    else:
        render_results(results, Console())

    flagged = any(r.invalid for result in results for r in result.records)
    if sink.errors or (strict and flagged):
        raise typer.Exit(1)


def main() -> None:
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
