"""Plain formatter: text passes through untouched."""

from .base import BaseFormatter


class PlainTextFormatter(BaseFormatter):
    """Render report text without a prefix."""

    PREFIX = ""

    def format(self, data: str) -> str:
        return self.PREFIX + data
