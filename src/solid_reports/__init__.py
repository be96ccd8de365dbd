"""
Solid Reports - pluggable report formatting

A report holds a title and content; a printer composes them into text and
hands the text to whichever formatter it was built with. New formatters plug
in without touching the report or the printer.
"""

__version__ = "0.1.0"

from .formatters import (
    BaseFormatter,
    HTMLFormatter,
    PDFFormatter,
    PlainTextFormatter,
    available_formatters,
    get_formatter,
)
from .models import Report
from .printer import ReportPrinter

__all__ = [
    "Report",
    "ReportPrinter",
    "BaseFormatter",
    "PDFFormatter",
    "HTMLFormatter",
    "PlainTextFormatter",
    "available_formatters",
    "get_formatter",
]
