"""CLI interface for depverify using Typer framework."""

import csv
import json as jsonlib
import logging
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from depverify import __description__, __version__
from depverify.config import LogLevel, VerifyConfig, load_config
from depverify.errors import (
    EXIT_CONFIGURATION_FAILURE,
    ValidationFailure,
    VerificationError,
)
from depverify.models.report import Classification, VerificationReport
from depverify.verifier import Verifier

app = typer.Typer(
    name="depverify",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()

EXIT_USAGE = 2

_LOG_LEVELS = {
    LogLevel.ERROR.value: logging.ERROR,
    LogLevel.WARN.value: logging.WARNING,
    LogLevel.INFO.value: logging.INFO,
    LogLevel.DEBUG.value: logging.DEBUG,
}


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"depverify version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-V", callback=version_callback, help="Show version and exit")
    ] = False,
) -> None:
    """depverify - Productized dependency verification for build pipelines."""


def configure_logging(level: str) -> None:
    """Send depverify log records to stderr through Rich."""
    package_logger = logging.getLogger("depverify")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    handler = RichHandler(console=Console(stderr=True), show_time=False, show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(_LOG_LEVELS.get(level, logging.INFO))


def _print_error(message: str) -> None:
    console.print(f"[red]Error:[/red] {escape(message)}", soft_wrap=True)


def _build_config(
    config_path: Path | None,
    directories: list[Path] | None,
    distributions: list[Path] | None,
    file_types: list[str] | None,
    ignore_files: list[str] | None,
    verbose: bool,
) -> VerifyConfig:
    """Load the config file and apply command line overrides.

    Raises:
        typer.Exit: If the config file is missing or invalid
    """
    try:
        config = load_config(config_path)
        return config.merged(
            directories=directories or None,
            distributions=distributions or None,
            file_types=file_types or None,
            ignore_files=ignore_files or None,
            verbose=True if verbose else None,
        )
    except (FileNotFoundError, ValueError) as e:
        _print_error(str(e))
        raise typer.Exit(EXIT_CONFIGURATION_FAILURE)


DirectoriesOption = Annotated[
    Optional[list[Path]],
    typer.Option("--directory", "-d", help="Directory whose files are verified (repeatable)")
]
DistributionsOption = Annotated[
    Optional[list[Path]],
    typer.Option("--distribution", "-z", help="Distribution archive whose entries are verified (repeatable)")
]
FileTypesOption = Annotated[
    Optional[list[str]],
    typer.Option("--file-type", "-t", help="File extension to verify (repeatable, default: jar)")
]
IgnoreOption = Annotated[
    Optional[list[str]],
    typer.Option("--ignore", "-i", help="Glob pattern of artifact identities to ignore (repeatable)")
]
ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Configuration file path (default: search for .depverify.json)")
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", envvar="DEPVERIFY_VERBOSE", help="Log step-by-step diagnostic trace")
]


def _output_report_table(report: VerificationReport) -> None:
    """Output verification counts in table format."""
    status_color = "green" if report.passed else "red"
    status = "PASS" if report.passed else "FAIL"
    console.print(f"[{status_color}]Verification Status: {status}[/{status_color}]")

    table = Table(title=f"Dependencies ({report.total} verified)")
    table.add_column("Result", style="cyan")
    table.add_column("Count", style="white", justify="right")
    for name, count in report.counts.items():
        table.add_row(name.title(), str(count))
    console.print(table)


def _output_report_markdown(report: VerificationReport) -> None:
    """Output verification results in Markdown format."""
    typer.echo("# Dependency Verification Report")
    typer.echo(f"**Status:** {'pass' if report.passed else 'fail'}")
    typer.echo("")
    typer.echo("## Counts")
    for name, count in report.counts.items():
        typer.echo(f"- {name}: {count}")

    if report.invalid:
        typer.echo("")
        typer.echo("## Invalid Artifacts")
        for identity in report.invalid:
            typer.echo(f"- `{identity}`")


@app.command()
def verify(
    directory: DirectoriesOption = None,
    distribution: DistributionsOption = None,
    file_type: FileTypesOption = None,
    ignore: IgnoreOption = None,
    config: ConfigOption = None,
    verbose: VerboseOption = False,
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: table, json, markdown (default: table)")
    ] = "table",
) -> None:
    """Fail when any discovered dependency is not productized."""
    valid_formats = ["table", "json", "markdown"]
    if format not in valid_formats:
        _print_error(f"Invalid format '{format}'. Must be one of: {', '.join(valid_formats)}")
        raise typer.Exit(EXIT_USAGE)

    verify_config = _build_config(config, directory, distribution, file_type, ignore, verbose)
    configure_logging(verify_config.logging.level)

    try:
        report = Verifier(verify_config).run()
    except ValidationFailure as e:
        if format == "json":
            typer.echo(jsonlib.dumps(e.report.to_dict(), indent=2))
        elif format == "markdown":
            _output_report_markdown(e.report)
        else:
            _output_report_table(e.report)
            typer.echo(str(e), nl=False)
        raise typer.Exit(e.exit_code)
    except VerificationError as e:
        if format == "json":
            typer.echo(jsonlib.dumps({"status": "error", "error": type(e).__name__, "message": str(e)}, indent=2))
        else:
            _print_error(str(e))
        raise typer.Exit(e.exit_code)

    if format == "json":
        typer.echo(jsonlib.dumps(report.to_dict(), indent=2))
    elif format == "markdown":
        _output_report_markdown(report)
    else:
        _output_report_table(report)
        console.print("\n[green]All dependencies are productized![/green]")


def _output_entries_table(entries: list[tuple]) -> None:
    """Output classified artifacts in table format."""
    if not entries:
        console.print("[dim]No dependencies found[/dim]")
        return

    colors = {
        Classification.VALID: "green",
        Classification.INVALID: "red",
        Classification.IGNORED: "yellow",
    }
    table = Table(title=f"Dependencies ({len(entries)} found)")
    table.add_column("Container", style="magenta")
    table.add_column("Entry", style="cyan")
    table.add_column("Status", style="white")

    for identity, classification in entries:
        color = colors[classification]
        table.add_row(
            escape(identity.container or ""),
            escape(identity.entry_path),
            f"[{color}]{classification.value.upper()}[/{color}]",
        )

    console.print(table)


def _output_entries_json(entries: list[tuple]) -> None:
    """Output classified artifacts in JSON format."""
    data = [
        {
            "identity": str(identity),
            "container": identity.container,
            "entryPath": identity.entry_path,
            "fileName": identity.terminal_file_name,
            "status": classification.value,
        }
        for identity, classification in entries
    ]
    typer.echo(jsonlib.dumps({"dependencies": data, "total": len(data)}, indent=2))


def _output_entries_csv(entries: list[tuple]) -> None:
    """Output classified artifacts in CSV format."""
    writer = csv.DictWriter(sys.stdout, fieldnames=["identity", "container", "entryPath", "fileName", "status"])
    writer.writeheader()
    for identity, classification in entries:
        writer.writerow({
            "identity": str(identity),
            "container": identity.container or "",
            "entryPath": identity.entry_path,
            "fileName": identity.terminal_file_name,
            "status": classification.value,
        })


@app.command("list")
def list_dependencies(
    directory: DirectoriesOption = None,
    distribution: DistributionsOption = None,
    file_type: FileTypesOption = None,
    ignore: IgnoreOption = None,
    config: ConfigOption = None,
    verbose: VerboseOption = False,
    status: Annotated[
        Optional[str],
        typer.Option("--status", "-s", help="Only show: valid, invalid, ignored (optional)")
    ] = None,
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: table, json, csv (default: table)")
    ] = "table",
) -> None:
    """List discovered dependencies with their classification without failing."""
    valid_formats = ["table", "json", "csv"]
    valid_statuses = [c.value for c in Classification]

    if format not in valid_formats:
        _print_error(f"Invalid format '{format}'. Must be one of: {', '.join(valid_formats)}")
        raise typer.Exit(EXIT_USAGE)

    if status is not None and status not in valid_statuses:
        _print_error(f"Invalid status '{status}'. Must be one of: {', '.join(valid_statuses)}")
        raise typer.Exit(EXIT_USAGE)

    verify_config = _build_config(config, directory, distribution, file_type, ignore, verbose)
    configure_logging(verify_config.logging.level)

    try:
        report = Verifier(verify_config).inspect()
    except VerificationError as e:
        _print_error(str(e))
        raise typer.Exit(e.exit_code)

    entries = report.entries()
    if status is not None:
        entries = [(identity, c) for identity, c in entries if c.value == status]

    if format == "json":
        _output_entries_json(entries)
    elif format == "csv":
        _output_entries_csv(entries)
    else:
        _output_entries_table(entries)


if __name__ == "__main__":
    app()
