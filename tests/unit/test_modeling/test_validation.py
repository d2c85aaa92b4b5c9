"""Unit tests for forecast precondition checks."""

import numpy as np
import pandas as pd
import pytest

from tfdea_forecasting.errors import ErrorCategory
from tfdea_forecasting.modeling.validation import (
    check_lr_preconditions,
    check_tfdea_preconditions,
    is_numeric_value,
    missing_columns,
)


class TestIsNumericValue:
    """Test suite for is_numeric_value function."""

    @pytest.mark.parametrize("value", [2003, 2003.5, np.float64(2003), np.int64(2003)])
    def test_numbers(self, value):
        assert is_numeric_value(value)

    @pytest.mark.parametrize("value", ["2003", None, True, [2003]])
    def test_non_numbers(self, value):
        assert not is_numeric_value(value)


class TestMissingColumns:
    """Test suite for missing_columns function."""

    def test_constant_always_present(self, dmu_dataset):
        assert missing_columns(dmu_dataset, ["Constant_1", "Speed"]) == []

    def test_missing_reported_once(self, dmu_dataset):
        assert missing_columns(dmu_dataset, ["Weight", "Speed", "Weight"]) == ["Weight"]


class TestTFDEAPreconditions:
    """Test suite for check_tfdea_preconditions function."""

    def test_all_hold(self, dmu_dataset):
        """Test a valid selection passes."""
        error = check_tfdea_preconditions(
            dmu_dataset, ["Constant_1"], ["Speed"], "Date", 2003
        )

        assert error is None

    def test_no_inputs_reported_first(self):
        """Test the input check runs before any data check."""
        error = check_tfdea_preconditions(pd.DataFrame(), [], [], "Date", "soon")

        assert error.category == ErrorCategory.SELECTION
        assert error.message == "No input(s) selected. Select a minimum of 1 input"

    def test_no_outputs(self, dmu_dataset):
        error = check_tfdea_preconditions(dmu_dataset, ["Speed"], [], "Date", 2003)

        assert error.message == "No output(s) selected. Select a minimum of 1 output"

    def test_empty_dataset(self):
        error = check_tfdea_preconditions(pd.DataFrame(), ["A"], ["B"], "Date", 2003)

        assert error.category == ErrorCategory.DATA
        assert error.message == "No data exists in selected data file"

    def test_unknown_intro_date(self, dmu_dataset):
        error = check_tfdea_preconditions(dmu_dataset, ["Speed"], ["Range"], "Year", 2003)

        assert error.message == "Introduction date column name not part of dataframe"

    def test_frontier_date_not_numeric(self, dmu_dataset):
        error = check_tfdea_preconditions(
            dmu_dataset, ["Speed"], ["Range"], "Date", "2003"
        )

        assert error.message == "Frontier date must be a numeric value"

    def test_unknown_columns(self, dmu_dataset):
        error = check_tfdea_preconditions(
            dmu_dataset, ["Weight"], ["Range", "Power"], "Date", 2003
        )

        assert error.message == "Column(s) not part of dataframe: Weight, Power"


class TestLRPreconditions:
    """Test suite for check_lr_preconditions function."""

    def test_inputs_or_outputs_suffice(self, dmu_dataset):
        """Test one selected column on either side is enough."""
        assert check_lr_preconditions(dmu_dataset, [], ["Speed"], "Date", 2003) is None
        assert check_lr_preconditions(dmu_dataset, ["Speed"], [], "Date", 2003) is None

    def test_nothing_selected(self, dmu_dataset):
        error = check_lr_preconditions(dmu_dataset, [], [], "Date", 2003)

        assert error.category == ErrorCategory.SELECTION
        assert error.message == (
            "No input(s)/output(s) selected. Select a minimum of 1 input/output"
        )

    def test_data_checks(self, dmu_dataset):
        error = check_lr_preconditions(dmu_dataset, ["Speed"], [], "Date", None)

        assert error.message == "Frontier date must be a numeric value"
