"""Base exception for Solid Reports."""

from typing import Any, Mapping, Optional


class SolidReportsError(Exception):
    """Base exception for all Solid Reports errors.

    ``details`` carries key/value context for logs; values are stored as
    strings so the error renders the same wherever it is reported.
    """

    def __init__(self, message: str, details: Optional[Mapping[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = {k: str(v) for k, v in (details or {}).items()}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({context})"
