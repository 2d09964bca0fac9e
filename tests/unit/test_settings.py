"""Unit tests for settings module.

Tests parsing property-list documents into generic settings trees.
"""

import io
import plistlib

import pytest

from themectl.exceptions import SettingsError
from themectl.settings import read_plist


class TestReadPlist:
    """Test cases for read_plist."""

    def test_read_xml_plist(self, make_document):
        """Test an XML property list parses to nested dicts and lists."""
        data = plistlib.dumps(make_document(name="Xml"))

        tree = read_plist(io.BytesIO(data))

        assert tree["name"] == "Xml"
        assert isinstance(tree["settings"], list)
        assert tree["settings"][1]["scope"] == "comment"

    def test_read_binary_plist(self, make_document):
        """Test a binary property list is accepted too."""
        data = plistlib.dumps(make_document(name="Binary"), fmt=plistlib.FMT_BINARY)

        tree = read_plist(io.BytesIO(data))

        assert tree["name"] == "Binary"

    def test_read_malformed_xml(self):
        """Test truncated XML reports its position."""
        data = b'<?xml version="1.0" encoding="UTF-8"?>\n<plist version="1.0">\n<dict>\n<key>name</key>\n'

        with pytest.raises(SettingsError, match="Malformed XML") as exc_info:
            read_plist(io.BytesIO(data))

        assert "line" in exc_info.value.details

    def test_read_not_a_plist(self):
        """Test arbitrary bytes are rejected."""
        with pytest.raises(SettingsError):
            read_plist(io.BytesIO(b"this is not a property list"))

    def test_read_empty_stream(self):
        """Test an empty file is rejected."""
        with pytest.raises(SettingsError):
            read_plist(io.BytesIO(b""))

    def test_error_keeps_cause(self):
        """Test the underlying parser error is chained."""
        with pytest.raises(SettingsError) as exc_info:
            read_plist(io.BytesIO(b"garbage"))

        assert exc_info.value.__cause__ is not None

    @pytest.mark.parametrize(
        "body",
        [
            b"<date>nope</date>",
            b"<integer>twelve</integer>",
            b"<real>1.5.5</real>",
        ],
    )
    def test_read_bad_scalar_values(self, body):
        """Test malformed scalar elements are reported as settings errors."""
        data = b"<plist version=\"1.0\"><dict><key>value</key>" + body + b"</dict></plist>"

        with pytest.raises(SettingsError, match="Invalid property list content") as exc_info:
            read_plist(io.BytesIO(data))

        assert exc_info.value.__cause__ is not None
