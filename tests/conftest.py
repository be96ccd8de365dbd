"""Shared test fixtures for Solid Reports."""

import io
import logging

import pytest
from rich.logging import RichHandler

from solid_reports import Report


@pytest.fixture
def sales_report():
    """The sample report used by the demo."""
    return Report(title="Sales Report", content="Sales increased by 20% this quarter.")


@pytest.fixture
def stream():
    """In-memory text stream standing in for stdout."""
    return io.StringIO()


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep user/project config files and SOLID_REPORTS_* env vars out of tests."""
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)
    for key in ("FORMATS", "TITLE", "CONTENT", "VERBOSITY"):
        monkeypatch.delenv(f"SOLID_REPORTS_{key}", raising=False)


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo handlers and levels installed by setup_logging."""
    root = logging.getLogger()
    package = logging.getLogger("solid_reports")
    saved_levels = (root.level, package.level)
    yield
    for handler in root.handlers[:]:
        if isinstance(handler, (RichHandler, logging.FileHandler)):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(saved_levels[0])
    package.setLevel(saved_levels[1])
