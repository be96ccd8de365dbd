"""Report printer: composes a report and delegates formatting.

The printer depends only on the formatter capability. Any object exposing a
callable ``format(data: str) -> str`` can be injected; the built-in variants
live in :mod:`solid_reports.formatters`.
"""

import logging
import sys
from typing import Optional, TextIO

from .exceptions import MissingFormatterError
from .formatters import BaseFormatter
from .models import Report

logger = logging.getLogger(__name__)


class ReportPrinter:
    """Print reports through one formatter, bound at construction."""

    def __init__(self, formatter: BaseFormatter, stream: Optional[TextIO] = None):
        if formatter is None:
            raise MissingFormatterError("formatter must not be None")
        if isinstance(formatter, (str, bytes)):
            # str.format would pass the callable check below
            raise MissingFormatterError(
                f"got formatter name {formatter!r}, expected a formatter instance"
            )
        if not callable(getattr(formatter, "format", None)):
            raise MissingFormatterError(
                f"{type(formatter).__name__} has no callable format()"
            )
        self._formatter = formatter
        # None means sys.stdout, looked up on each print
        self._stream = stream

    @property
    def formatter(self) -> BaseFormatter:
        return self._formatter

    def render(self, report: Report) -> str:
        """Return the formatted report text without writing it."""
        return self._formatter.format(report.compose())

    def print(self, report: Report) -> None:
        """Write the formatted report and a newline to the output stream."""
        text = self.render(report)
        logger.debug("Printing %r with %s", report.title, type(self._formatter).__name__)
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(text + "\n")

    def __repr__(self) -> str:
        return f"ReportPrinter(formatter={type(self._formatter).__name__})"
