"""Demo CLI command -- print the sample report through each configured formatter."""

from typing import List, Optional

import typer

from ..demo import run_demo
from ..models import Report
from . import app
from ._common import CliState, resolve_config, run_guarded


def run_demo_command(state: Optional[CliState], formats: Optional[List[str]] = None) -> None:
    config = resolve_config(state, formats=formats or None)
    run_demo(Report(config.title, config.content), formats=config.formats)


@app.command()
def demo(
    ctx: typer.Context,
    fmt: Optional[List[str]] = typer.Option(
        None,
        "--format",
        "-f",
        help="Formatter to print with; repeat for several (default: pdf, then html)",
    ),
):
    """
    Print the sample report once per formatter.

    Title, content and formatter list come from the config file or
    SOLID_REPORTS_* environment variables when set.
    """
    run_guarded(lambda: run_demo_command(ctx.obj, fmt))
