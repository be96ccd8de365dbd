"""CLI entry point: registers all subcommands."""

from pathlib import Path
from typing import Optional

import typer

from .. import __version__
from ._common import CliState, console, fail, run_guarded

app = typer.Typer(
    name="solid-reports",
    help="Solid Reports - print reports through pluggable formatters",
    add_completion=False,
    rich_markup_mode="rich",
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file path (TOML format)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose (DEBUG) logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress all but ERROR logging",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also append log records to this file",
        dir_okay=False,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Print reports through pluggable formatters.

    Without a subcommand, runs the demo: the sample report printed once as
    PDF and once as HTML.

    [bold cyan]Examples:[/bold cyan]

      solid-reports

      solid-reports print --title Q3 --content "All good." --format html

      solid-reports formats
    """
    if version:
        console.print(
            f"[bold cyan]Solid Reports[/bold cyan] version [green]{__version__}[/green]"
        )
        raise typer.Exit(0)

    if verbose and quiet:
        fail("--verbose and --quiet are mutually exclusive")

    ctx.obj = CliState(config=config, verbose=verbose, quiet=quiet, log_file=log_file)

    if ctx.invoked_subcommand is None:
        from .demo import run_demo_command

        run_guarded(lambda: run_demo_command(ctx.obj))


# Import subcommands to register them
from .demo import demo as _demo  # noqa: F401, E402
from .formats import formats as _formats  # noqa: F401, E402
from .printing import print_report as _print_report  # noqa: F401, E402
