"""Formats CLI command -- list registered formatters."""

from ..formatters import available_formatters, get_formatter
from . import app


@app.command()
def formats():
    """List the formatter names accepted by --format."""
    for name in available_formatters():
        # Plain print: names are for scripts as much as for people
        print(f"{name}\t{type(get_formatter(name)).__name__}")
