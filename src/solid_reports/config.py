"""Configuration loading and management for Solid Reports.

Configuration sources are merged in priority order:
    1. Defaults (defined in PrinterConfig)
    2. Global config (~/.solid-reports.toml)
    3. Project config (./solid-reports.toml)
    4. Explicit config file
    5. Environment variables (SOLID_REPORTS_* prefix)
    6. Keyword overrides (typically CLI flags)

Example:
    >>> config = load_config(formats=["html"])
    >>> config.formats
    ['html']
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError
from .formatters import available_formatters
from .logging_config import VERBOSITY_LEVELS, Verbosity

ENV_PREFIX = "SOLID_REPORTS_"
CONFIG_FILENAME = "solid-reports.toml"


@dataclass(frozen=True)
class PrinterConfig:
    """Settings for the demo and CLI.

    Attributes:
        formats: Formatter names, one printer per entry, in print order
        title: Title of the sample report
        content: Content of the sample report
        verbosity: Logging verbosity level
    """

    formats: list[str] = field(default_factory=lambda: ["pdf", "html"])
    title: str = "Sales Report"
    content: str = "Sales increased by 20% this quarter."
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        if not self.formats:
            raise InvalidConfigError("formats", self.formats, "at least one format is required")
        known = available_formatters()
        for name in self.formats:
            if name not in known:
                raise InvalidConfigError(
                    "formats", name, f"expected one of {', '.join(known)}"
                )
        if self.verbosity not in VERBOSITY_LEVELS:
            raise InvalidConfigError(
                "verbosity", self.verbosity, "expected quiet, normal or verbose"
            )


def load_config(config_file: Optional[Path] = None, **overrides) -> PrinterConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags)

    Returns:
        Validated PrinterConfig instance

    Raises:
        ConfigurationError: If a config file is unreadable or a value is invalid
    """
    merged: dict = {}

    global_config = Path.home() / f".{CONFIG_FILENAME}"
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / CONFIG_FILENAME
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    # Convert verbosity boolean flags to string
    if "verbose" in overrides:
        if overrides.pop("verbose"):
            overrides["verbosity"] = "verbose"
    if "quiet" in overrides:
        if overrides.pop("quiet"):
            overrides["verbosity"] = "quiet"

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return PrinterConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from SOLID_REPORTS_* environment variables.

    Supported environment variables:
        SOLID_REPORTS_FORMATS: comma-separated names (e.g. "pdf,html")
        SOLID_REPORTS_TITLE: str
        SOLID_REPORTS_CONTENT: str
        SOLID_REPORTS_VERBOSITY: quiet/normal/verbose
    """
    type_hints = get_type_hints(PrinterConfig)
    result: dict[str, Any] = {}

    for field_name in PrinterConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        type_hint = type_hints[field_name]
        if getattr(type_hint, "__origin__", None) is list:
            result[field_name] = [p.strip() for p in env_value.split(",") if p.strip()]
        else:
            result[field_name] = env_value

    return result


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return the ``[solid-reports]`` table or the whole document."""
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")
    return data.get("solid-reports", data)
