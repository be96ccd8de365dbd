"""Shared CLI helpers."""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape

from ..config import PrinterConfig, load_config
from ..exceptions import SolidReportsError
from ..logging_config import get_logger, setup_logging

# Report text goes to stdout; messages for the user go to stderr
console = Console(stderr=True)

logger = get_logger("cli")


@dataclass(frozen=True)
class CliState:
    """Global options collected by the app callback."""

    config: Optional[Path] = None
    verbose: bool = False
    quiet: bool = False
    log_file: Optional[Path] = None


def fail(message: str) -> NoReturn:
    console.print(f"[red]Error:[/red] {escape(message)}")
    raise typer.Exit(1)


def resolve_config(state: Optional[CliState], **overrides) -> PrinterConfig:
    """Build the config from CLI options, then set up logging at its verbosity.

    The --verbose/--quiet flags override any verbosity from files or environment.
    """
    state = state or CliState()
    config = load_config(
        config_file=state.config, verbose=state.verbose, quiet=state.quiet, **overrides
    )
    log_file = str(state.log_file) if state.log_file is not None else None
    setup_logging(config.verbosity, log_file=log_file)
    logger.debug("Loaded config: %s", config)
    return config


def run_guarded(action: Callable[[], None]) -> None:
    """Run a command body, mapping known failures to exit codes."""
    try:
        action()
    except SolidReportsError as e:
        logger.debug("%s: %s", e.__class__.__name__, e)
        fail(str(e))
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted[/yellow]")
        raise typer.Exit(130)
