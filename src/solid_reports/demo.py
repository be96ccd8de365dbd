"""Demo entry point: one sample report, printed through each formatter in turn."""

from typing import Optional, Sequence, TextIO

from .formatters import HTMLFormatter, PDFFormatter, get_formatter
from .logging_config import get_logger
from .models import Report
from .printer import ReportPrinter

logger = get_logger(__name__)

SAMPLE_REPORT = Report("Sales Report", "Sales increased by 20% this quarter.")


def run_demo(
    report: Report = SAMPLE_REPORT,
    formats: Optional[Sequence[str]] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Print ``report`` once per formatter.

    With no ``formats`` this is the PDF printer followed by the HTML printer.
    """
    if formats is None:
        printers = [
            ReportPrinter(PDFFormatter(), stream=stream),
            ReportPrinter(HTMLFormatter(), stream=stream),
        ]
    else:
        printers = [ReportPrinter(get_formatter(name), stream=stream) for name in formats]

    logger.debug("Running demo with %d printer(s)", len(printers))
    for printer in printers:
        printer.print(report)
