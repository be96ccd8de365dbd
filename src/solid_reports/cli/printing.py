"""Print CLI command -- format a report given on the command line."""

from typing import List

import typer

from ..formatters import get_formatter
from ..models import Report
from ..printer import ReportPrinter
from . import app
from ._common import resolve_config, run_guarded


@app.command("print")
def print_report(
    ctx: typer.Context,
    title: str = typer.Option(..., "--title", "-t", help="Report title"),
    content: str = typer.Option(..., "--content", help="Report content"),
    fmt: List[str] = typer.Option(
        ["pdf"],
        "--format",
        "-f",
        help="Formatter to print with; repeat for several",
    ),
):
    """
    Print one report through the chosen formatter(s).

    [bold cyan]Examples:[/bold cyan]

      solid-reports print -t "Q3" --content "Revenue up." -f pdf -f html
    """

    def _run() -> None:
        # Command-line values replace the demo settings from files and environment
        config = resolve_config(ctx.obj, title=title, content=content, formats=list(fmt))
        report = Report(config.title, config.content)
        printers = [ReportPrinter(get_formatter(name)) for name in config.formats]
        for printer in printers:
            printer.print(report)

    run_guarded(_run)
