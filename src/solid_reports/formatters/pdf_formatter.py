"""PDF formatter for Solid Reports."""

from .base import BaseFormatter


class PDFFormatter(BaseFormatter):
    """Render report text in PDF style."""

    PREFIX = "PDF Format: "

    def format(self, data: str) -> str:
        return self.PREFIX + data
