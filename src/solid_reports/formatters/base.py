"""Base formatter interface for Solid Reports output rendering."""

from abc import ABC, abstractmethod


class BaseFormatter(ABC):
    """Abstract base class for report formatters.

    A formatter is a pure text-to-text transformation. Implementations hold
    no state, so one instance can be shared between printers and threads.
    """

    @abstractmethod
    def format(self, data: str) -> str:
        """Return the formatted representation of ``data``."""
