"""Unit tests for data loading models."""

import csv

import pytest
from pydantic import ValidationError

from tfdea_forecasting.data_loading.models import LoadOptions, SourceKind


class TestSourceKind:
    """Test suite for SourceKind."""

    def test_parse_known_kinds(self):
        """Test known source names are matched case-insensitively."""
        assert SourceKind.parse("local") == SourceKind.LOCAL
        assert SourceKind.parse("Google") == SourceKind.GOOGLE
        assert SourceKind.parse("DROPBOX") == SourceKind.DROPBOX

    def test_parse_unknown_kind(self):
        """Test unknown source names fall back to the default reader."""
        assert SourceKind.parse("ftp") == SourceKind.DEFAULT

    def test_parse_enum_value(self):
        """Test enum members are returned unchanged."""
        assert SourceKind.parse(SourceKind.GOOGLE) is SourceKind.GOOGLE


class TestLoadOptions:
    """Test suite for LoadOptions."""

    def test_default_values(self):
        """Test default parsing options."""
        options = LoadOptions()

        assert options.has_column_header is False
        assert options.has_row_header is False
        assert options.separator == ","
        assert options.quote_char == ""

    def test_separator_must_be_single_character(self):
        """Test multi-character separators are rejected."""
        with pytest.raises(ValidationError, match="single character"):
            LoadOptions(separator=";;")

        with pytest.raises(ValidationError):
            LoadOptions(separator="")

    def test_quote_char_must_be_single_character(self):
        """Test multi-character quote characters are rejected."""
        with pytest.raises(ValidationError, match="single character"):
            LoadOptions(quote_char="''")

    def test_read_csv_params_without_quoting(self):
        """Test an empty quote character disables quoting."""
        params = LoadOptions(has_column_header=True, separator=";").to_read_csv_params()

        assert params == {"sep": ";", "header": 0, "quoting": csv.QUOTE_NONE}

    def test_read_csv_params_with_quoting(self):
        """Test a quote character is passed through."""
        params = LoadOptions(quote_char='"').to_read_csv_params()

        assert params == {"sep": ",", "header": None, "quotechar": '"'}
