"""Tests for logging setup."""

import logging

import pytest
from rich.logging import RichHandler

from solid_reports.logging_config import VERBOSITY_LEVELS, get_logger, setup_logging


class TestSetupLogging:
    def test_default_level_is_warning(self):
        logger = setup_logging()
        assert logger.name == "solid_reports"
        assert logger.level == logging.WARNING

    @pytest.mark.parametrize(
        "verbosity, level",
        [("quiet", logging.ERROR), ("normal", logging.WARNING), ("verbose", logging.DEBUG)],
    )
    def test_verbosity_levels(self, verbosity, level):
        assert setup_logging(verbosity).level == level
        assert VERBOSITY_LEVELS[verbosity] == level

    def test_unknown_verbosity(self):
        with pytest.raises(KeyError):
            setup_logging("loud")

    def test_rich_handler_installed(self):
        setup_logging()
        assert any(isinstance(h, RichHandler) for h in logging.getLogger().handlers)

    def test_repeated_setup_replaces_handlers(self):
        setup_logging()
        setup_logging("verbose")
        rich_handlers = [h for h in logging.getLogger().handlers if isinstance(h, RichHandler)]
        assert len(rich_handlers) == 1

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "run.log"
        logger = setup_logging(log_file=str(log_file))
        logger.warning("written to file")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "WARNING solid_reports: written to file" in log_file.read_text()


class TestGetLogger:
    def test_root(self):
        assert get_logger().name == "solid_reports"

    def test_prefixes_short_names(self):
        assert get_logger("cli").name == "solid_reports.cli"

    def test_keeps_qualified_names(self):
        assert get_logger("solid_reports.printer").name == "solid_reports.printer"
