"""Report construction errors."""

from .base import SolidReportsError


class ReportError(SolidReportsError):
    """Base class for report-related errors."""

    pass


class InvalidReportError(ReportError, ValueError):
    """Raised when a required report field is missing."""

    def __init__(self, field: str, reason: str):
        super().__init__(
            f"Invalid report field: {field}",
            details={"field": field, "reason": reason},
        )
        self.field = field
        self.reason = reason
