"""Unit tests for render module and error formatting.

Tests the OutputFormatter output formats and how errors are shown to users.
"""

import json

import pytest
import yaml
from rich.console import Console

from themectl.exceptions import (
    BadIdentifierError,
    ConfigError,
    DocumentParseError,
    ParseThemeError,
    SettingsError,
    ThemeValidationError,
    ValidationError,
)
from themectl.render import OutputFormatter
from themectl.utils.exceptions import format_error_for_user


@pytest.fixture
def formatter():
    """Formatter writing to a recording console."""
    return OutputFormatter(Console(record=True, width=120))


class TestOutputFormatter:
    """Test cases for OutputFormatter."""

    def test_render_json(self, formatter, capsys):
        """Test JSON output is valid and keeps order."""
        formatter.render([{"id": "monokai", "rules": 2}], format="json")

        assert json.loads(capsys.readouterr().out) == [{"id": "monokai", "rules": 2}]

    def test_render_yaml(self, formatter, capsys):
        """Test YAML output round-trips."""
        formatter.render({"name": "Paper", "author": None}, format="yaml")

        assert yaml.safe_load(capsys.readouterr().out) == {"name": "Paper", "author": None}

    def test_render_table(self, formatter):
        """Test table output includes headers and values."""
        formatter.render(
            [{"id": "monokai", "name": "Monokai", "rules": 2}, {"id": "paper", "name": None}],
            title="Themes",
        )

        output = formatter.console.export_text()
        assert "Themes" in output
        assert "Monokai" in output
        assert "Rules" in output
        assert "paper" in output

    def test_render_table_empty(self, formatter):
        """Test empty data prints a placeholder."""
        formatter.render_table([])

        assert "No data to display" in formatter.console.export_text()

    def test_render_properties(self, formatter):
        """Test property tables title-case keys."""
        formatter.render_properties({"line_highlight": "#65737e30", "author": None}, title="Theme")

        output = formatter.console.export_text()
        assert "Line Highlight" in output
        assert "#65737e30" in output

    def test_render_unknown_format(self, formatter):
        """Test unknown formats raise ValidationError."""
        with pytest.raises(ValidationError, match="Unknown output format"):
            formatter.render([], format="xml")


class TestFormatErrorForUser:
    """Test cases for format_error_for_user."""

    def test_catalog_error_names_stage_and_file(self, tmp_path):
        """Test catalog errors show the failing stage and path."""
        path = tmp_path / "broken.tmTheme"
        error = DocumentParseError("Could not parse", path=path, cause=SettingsError("bad xml"))

        message = format_error_for_user(error)

        assert "document parse" in message
        assert f"File: {path}" in message
        assert "Cause" not in message

    def test_catalog_error_debug_shows_cause(self, tmp_path):
        """Test debug mode includes the underlying cause."""
        error = DocumentParseError("Could not parse", path=tmp_path, cause=SettingsError("bad xml"))

        message = format_error_for_user(error, debug=True)

        assert "Cause: SettingsError: bad xml" in message

    def test_validation_error_shows_field(self, tmp_path):
        """Test theme validation errors name the offending field."""
        cause = ParseThemeError("Invalid color", field="settings[1].settings.foreground")
        error = ThemeValidationError("Invalid theme", path=tmp_path / "x.tmTheme", cause=cause)

        message = format_error_for_user(error)

        assert "Field: settings[1].settings.foreground" in message

    def test_bad_identifier_error(self, tmp_path):
        """Test bad path errors do not repeat the path."""
        error = BadIdentifierError("Cannot derive a theme name from /", path="/")

        message = format_error_for_user(error)

        assert message.startswith("Theme load failed (bad path)")
        assert "File:" not in message

    def test_config_error(self):
        """Test configuration errors are labelled."""
        message = format_error_for_user(ConfigError("No themes_dir configured"))

        assert message == "Configuration error: No themes_dir configured"

    def test_generic_exception(self):
        """Test other exceptions fall back to their text."""
        assert format_error_for_user(RuntimeError("boom")) == "Error: boom"
        assert "Type: RuntimeError" in format_error_for_user(RuntimeError("boom"), debug=True)
