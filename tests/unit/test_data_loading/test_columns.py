"""Unit tests for column selection."""

import pandas as pd

from tfdea_forecasting.data_loading import column_options, numeric_columns
from tfdea_forecasting.errors import ErrorCategory


class TestNumericColumns:
    """Test suite for numeric_columns function."""

    def test_constant_first(self, dmu_dataset):
        """Test the constant pseudo-column leads the numeric columns."""
        outcome = numeric_columns(dmu_dataset)

        assert outcome.ok
        assert outcome.value == ["Constant_1", "Date", "Speed", "Range"]

    def test_boolean_columns_excluded(self):
        """Test boolean columns are not offered as variables."""
        dataset = pd.DataFrame({"flag": [True, False], "x": [1.5, 2.5]})

        assert numeric_columns(dataset).value == ["Constant_1", "x"]

    def test_no_numeric_columns(self):
        """Test datasets without numeric columns are reported."""
        dataset = pd.DataFrame({"name": ["a", "b"]})

        outcome = numeric_columns(dataset)

        assert outcome.value == []
        assert outcome.error.category == ErrorCategory.DATA
        assert outcome.error.message.startswith("There are no numeric columns.")

    def test_empty_dataset(self):
        """Test an empty dataset has no numeric columns."""
        assert numeric_columns(pd.DataFrame()).value == []


class TestColumnOptions:
    """Test suite for column_options function."""

    def test_options(self, dmu_dataset):
        """Test inputs and outputs include the constant but dates do not."""
        outcome = column_options(dmu_dataset)

        options = outcome.value
        assert options.inputs == ["Constant_1", "Date", "Speed", "Range"]
        assert options.outputs == options.inputs
        assert options.intro_date == ["Date", "Speed", "Range"]

    def test_lists_independent(self, dmu_dataset):
        """Test each list can be changed without affecting the others."""
        options = column_options(dmu_dataset).value

        options.inputs.append("extra")

        assert "extra" not in options.outputs

    def test_no_numeric_columns(self):
        """Test the error is passed on."""
        outcome = column_options(pd.DataFrame({"name": ["a"]}))

        assert outcome.value is None
        assert not outcome.ok
