"""Tests for the formatters package."""

import pytest

from solid_reports.exceptions import ConfigurationError, UnknownFormatterError
from solid_reports.formatters import (
    BaseFormatter,
    HTMLFormatter,
    PDFFormatter,
    PlainTextFormatter,
    available_formatters,
    get_formatter,
)

SAMPLES = [
    "",
    "Title: Sales Report\nContent: Sales increased by 20% this quarter.",
    "PDF Format: already prefixed",
    "  surrounding whitespace  ",
    "<b>markup is not escaped</b>",
]


class TestPrefixLaw:
    @pytest.mark.parametrize("data", SAMPLES)
    @pytest.mark.parametrize(
        "formatter, prefix",
        [
            (PDFFormatter(), "PDF Format: "),
            (HTMLFormatter(), "HTML Format: "),
            (PlainTextFormatter(), ""),
        ],
    )
    def test_output_is_prefix_plus_input(self, formatter, prefix, data):
        assert formatter.format(data) == prefix + data

    def test_input_is_left_unchanged(self):
        data = "Title: x\nContent: y"
        snapshot = str(data)
        PDFFormatter().format(data)
        HTMLFormatter().format(data)
        assert data == snapshot

    def test_repeated_calls_are_identical(self):
        fmt = HTMLFormatter()
        assert fmt.format("abc") == fmt.format("abc")


class TestBaseFormatter:
    def test_cannot_instantiate_abstract_base(self):
        with pytest.raises(TypeError):
            BaseFormatter()

    def test_builtin_variants_are_formatters(self):
        for cls in (PDFFormatter, HTMLFormatter, PlainTextFormatter):
            assert isinstance(cls(), BaseFormatter)

    def test_subclass_without_format_is_abstract(self):
        class Incomplete(BaseFormatter):
            pass

        with pytest.raises(TypeError):
            Incomplete()


class TestGetFormatter:
    def test_known_formatters(self):
        assert isinstance(get_formatter("pdf"), PDFFormatter)
        assert isinstance(get_formatter("html"), HTMLFormatter)
        assert isinstance(get_formatter("plain"), PlainTextFormatter)

    def test_returns_fresh_instances(self):
        assert get_formatter("pdf") is not get_formatter("pdf")

    def test_available_formatters_sorted(self):
        assert available_formatters() == ["html", "pdf", "plain"]

    def test_unknown_formatter(self):
        with pytest.raises(UnknownFormatterError, match="Unknown formatter") as exc_info:
            get_formatter("xml")
        assert exc_info.value.name == "xml"
        assert exc_info.value.choices == ["html", "pdf", "plain"]
        assert "html, pdf, plain" in str(exc_info.value)

    def test_unknown_formatter_is_value_and_configuration_error(self):
        with pytest.raises(ValueError):
            get_formatter("PDF")
        with pytest.raises(ConfigurationError):
            get_formatter("")
