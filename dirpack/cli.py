"""dirpack CLI application with Typer."""

import logging
from pathlib import Path
from typing import Annotated

import click
import typer

from dirpack import __version__
from dirpack.app.ports import ArchiveReport
from dirpack.bootstrap import bootstrap_application
from dirpack.config import Settings, get_settings
from dirpack.goals import DockerGoal
from dirpack.utils.cli_output import report_json

app = typer.Typer(
    name="dirpack",
    help="Package directories into ZIP or tar.gz archives",
    add_completion=True,
    no_args_is_help=True,
)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        typer.echo(f"dirpack version {__version__}")
        raise typer.Exit()


def _configure_logging(level_name: str) -> None:
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        raise typer.BadParameter(f"Unknown log level: {level_name}", param_hint="--log-level")
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("dirpack").setLevel(level)


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="Log level (DEBUG, INFO, WARNING, ERROR)"),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", help="Directory for archives when no destination is given"),
    ] = None,
) -> None:
    """dirpack - Package directories into ZIP or tar.gz archives."""
    # CLI flags apply to this invocation only; the global settings stay untouched.
    updates: dict[str, object] = {}
    if log_level:
        updates["log_level"] = log_level
    if output_dir:
        updates["output_dir"] = output_dir
    settings = get_settings().model_copy(update=updates)
    ctx.obj = settings
    _configure_logging(settings.log_level)


def _echo_report(report: ArchiveReport, *, json_output: bool) -> None:
    if json_output:
        typer.echo(report_json(report))
        return

    if not report.created:
        typer.secho(
            f"Nothing to archive in {report.source}; {report.destination} was not written",
            fg=typer.colors.YELLOW,
        )
        return

    typer.secho(f"✓ Archive created: {report.destination}", fg=typer.colors.GREEN)
    typer.echo(f"  Format: {report.format}")
    typer.echo(f"  Directories: {report.directory_count}")
    typer.echo(f"  Files: {report.file_count}")
    typer.echo(f"  Bytes: {report.total_bytes}")


def _run_archive(
    settings: Settings,
    source: Path,
    destination: Path | None,
    *,
    format: str | None = None,
    goal: str | None = None,
    json_output: bool = False,
) -> None:
    container = bootstrap_application(settings)

    try:
        report = container.archive_service.archive(
            source.expanduser().resolve(),
            destination.expanduser().resolve() if destination is not None else None,
            format=format,
            goal=goal,
        )
    except (OSError, ValueError) as exc:
        typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc

    _echo_report(report, json_output=json_output)


@app.command("zip")
def zip_command(
    ctx: typer.Context,
    source: Annotated[Path, typer.Argument(help="Directory to archive")],
    destination: Annotated[
        Path | None,
        typer.Argument(help="ZIP file to write (defaults to <output-dir>/<source>.zip)"),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output report as JSON"),
    ] = False,
) -> None:
    """Compress a directory into a ZIP archive."""

    _run_archive(ctx.obj, source, destination, format="zip", json_output=json_output)


@app.command("targz")
def targz_command(
    ctx: typer.Context,
    source: Annotated[Path, typer.Argument(help="Directory to archive")],
    destination: Annotated[
        Path | None,
        typer.Argument(help="tar.gz file to write (defaults to <output-dir>/<source>.tar.gz)"),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output report as JSON"),
    ] = False,
) -> None:
    """Compress a directory into a gzip-compressed tar archive.

    Entries unpack into a top-level directory named after the archive file.
    """

    _run_archive(ctx.obj, source, destination, format="tar.gz", json_output=json_output)


@app.command("pack")
def pack_command(
    ctx: typer.Context,
    source: Annotated[Path, typer.Argument(help="Directory to archive")],
    destination: Annotated[
        Path | None,
        typer.Option("--dest", "-d", help="Archive file to write"),
    ] = None,
    format: Annotated[
        str | None,
        typer.Option(
            "--format",
            "-f",
            click_type=click.Choice(["zip", "tar.gz"], case_sensitive=False),
            help="Archive format (overrides goal and suffix)",
        ),
    ] = None,
    goal: Annotated[
        str | None,
        typer.Option("--goal", "-g", help="Docker goal selecting the format: save or push"),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output report as JSON"),
    ] = False,
) -> None:
    """Archive a directory, choosing the format from flags, goal, or suffix.

    Example:
        dirpack pack build/app --goal save
        dirpack pack build/app --dest dist/app.zip
    """

    _run_archive(ctx.obj, source, destination, format=format, goal=goal, json_output=json_output)


@app.command("goal")
def goal_command(
    code: Annotated[str, typer.Argument(help="Goal code to look up (case-insensitive)")],
) -> None:
    """Resolve a Docker goal code."""

    goal = DockerGoal.of(code)
    if goal is None:
        choices = ", ".join(member.code for member in DockerGoal)
        typer.secho(f"Error: Unknown goal '{code}' (expected one of: {choices})", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo(goal.code)


if __name__ == "__main__":
    app()
