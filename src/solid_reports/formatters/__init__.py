"""Output formatters for Solid Reports."""

from typing import Dict, List, Type

from ..exceptions import UnknownFormatterError
from .base import BaseFormatter
from .html_formatter import HTMLFormatter
from .pdf_formatter import PDFFormatter
from .plain_formatter import PlainTextFormatter

_FORMATTERS: Dict[str, Type[BaseFormatter]] = {
    "pdf": PDFFormatter,
    "html": HTMLFormatter,
    "plain": PlainTextFormatter,
}


def available_formatters() -> List[str]:
    """Names accepted by :func:`get_formatter`, sorted."""
    return sorted(_FORMATTERS)


def get_formatter(name: str) -> BaseFormatter:
    """Get a formatter instance by name.

    Args:
        name: One of "pdf", "html", "plain"

    Returns:
        Formatter instance

    Raises:
        UnknownFormatterError: If name is not recognized
    """
    cls = _FORMATTERS.get(name)
    if cls is None:
        raise UnknownFormatterError(name, _FORMATTERS)
    return cls()


__all__ = [
    "BaseFormatter",
    "PDFFormatter",
    "HTMLFormatter",
    "PlainTextFormatter",
    "available_formatters",
    "get_formatter",
]
