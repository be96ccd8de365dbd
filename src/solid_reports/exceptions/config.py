"""Configuration exceptions: printer wiring, formatter lookup, settings."""

from typing import Any, Iterable

from .base import SolidReportsError


class ConfigurationError(SolidReportsError):
    """Base class for configuration-related errors."""

    pass


class MissingFormatterError(ConfigurationError):
    """Raised when a printer is built without a usable formatter."""

    def __init__(self, reason: str):
        super().__init__("Printer requires a formatter", details={"reason": reason})
        self.reason = reason


class UnknownFormatterError(ConfigurationError, ValueError):
    """Raised when a formatter name is not registered."""

    def __init__(self, name: str, choices: Iterable[str]):
        self.name = name
        self.choices = sorted(choices)
        super().__init__(
            f"Unknown formatter: {name!r}. Choose from: {', '.join(self.choices)}"
        )


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value}",
            details={"key": key, "value": str(value), "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason
