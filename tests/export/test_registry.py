"""
Unit Tests for exporter dispatch.
"""
import pytest

from pagebuilder.export import ExportFormat, UnknownExportFormatError, list_formats, register_exporter, render


def test_list_formats_then_all_three_registered():
    assert set(list_formats()) == {ExportFormat.MARKUP, ExportFormat.TYPED_SOURCE, ExportFormat.JSON}


def test_render_when_unknown_format_then_raises(button, no_features):
    with pytest.raises(UnknownExportFormatError, match="pdf"):
        render((button,), no_features, "pdf")


def test_render_when_enum_or_string_then_same_output(mixed_document, no_features):
    for fmt in ExportFormat:
        assert render(mixed_document, no_features, fmt) == render(mixed_document, no_features, fmt.value)


def test_render_when_list_given_then_treated_as_document(mixed_document, no_features):
    assert render(list(mixed_document), no_features, "json") == render(mixed_document, no_features, "json")


def test_register_when_format_taken_then_raises():
    with pytest.raises(ValueError, match="already registered"):
        register_exporter(ExportFormat.JSON)(lambda document, config: "")
