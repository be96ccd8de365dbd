"""HTML formatter for Solid Reports."""

from .base import BaseFormatter


class HTMLFormatter(BaseFormatter):
    """Render report text in HTML style."""

    PREFIX = "HTML Format: "

    def format(self, data: str) -> str:
        return self.PREFIX + data
