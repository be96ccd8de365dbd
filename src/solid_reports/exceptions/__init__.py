"""Exception hierarchy for Solid Reports."""

from .base import SolidReportsError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    MissingFormatterError,
    UnknownFormatterError,
)
from .report import InvalidReportError, ReportError

__all__ = [
    "SolidReportsError",
    "ReportError",
    "InvalidReportError",
    "ConfigurationError",
    "MissingFormatterError",
    "UnknownFormatterError",
    "InvalidConfigError",
]
