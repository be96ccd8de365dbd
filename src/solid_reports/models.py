"""Data models for Solid Reports"""

from dataclasses import dataclass

from .exceptions import InvalidReportError


@dataclass(frozen=True)
class Report:
    """A report's title and content, fixed at construction.

    Empty strings are legal; ``None`` is not.
    """

    title: str
    content: str

    def __post_init__(self) -> None:
        for name in ("title", "content"):
            if getattr(self, name) is None:
                raise InvalidReportError(name, "must not be None")

    def compose(self) -> str:
        """Labelled text handed to a formatter: title line, then content line."""
        return f"Title: {self.title}\nContent: {self.content}"
