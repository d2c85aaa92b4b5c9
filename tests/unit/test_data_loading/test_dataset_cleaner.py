"""Unit tests for the dataset cleaner."""

import numpy as np
import pandas as pd

from tfdea_forecasting.data_loading.processors import DatasetCleaner
from tfdea_forecasting.errors import ErrorCategory


class TestDatasetCleaner:
    """Test suite for DatasetCleaner."""

    def test_drops_rows_with_missing_values(self):
        """Test a missing value in any column removes the row."""
        data = pd.DataFrame(
            {"a": [1.0, 2.0, np.nan], "b": [1, 2, 3], "note": ["x", None, "z"]}
        )
        cleaner = DatasetCleaner(data)

        outcome = cleaner.clean()

        assert outcome.ok
        assert outcome.value["b"].tolist() == [1]
        assert cleaner.rows_with_missing_values == 2

    def test_all_rows_missing(self):
        """Test nothing left after cleaning is a data error."""
        data = pd.DataFrame({"a": [np.nan, np.nan], "b": [1, 2]})

        outcome = DatasetCleaner(data).clean()

        assert outcome.value.empty
        assert outcome.error.category == ErrorCategory.DATA
        assert outcome.error.message == (
            "Data cannot be found at specified location or chosen parameters not correct"
        )

    def test_row_header_becomes_index(self):
        """Test the first column is used as row names."""
        data = pd.DataFrame({"Name": ["A", "B"], "x": [1, 2]})

        outcome = DatasetCleaner(data, has_row_header=True).clean()

        assert list(outcome.value.index) == ["A", "B"]
        assert list(outcome.value.columns) == ["x"]

    def test_duplicated_row_names(self):
        """Test duplicated row names are rejected."""
        data = pd.DataFrame({"Name": ["A", "A"], "x": [1, 2]})

        outcome = DatasetCleaner(data, has_row_header=True).clean()

        assert outcome.value.empty
        assert outcome.error.message == "Duplicated row names, deselect row header check box"

    def test_single_column_keeps_row_header(self):
        """Test a one-column dataset is not turned into an index."""
        data = pd.DataFrame({"x": [1, 2]})

        outcome = DatasetCleaner(data, has_row_header=True).clean()

        assert list(outcome.value.columns) == ["x"]

    def test_drops_duplicated_rows(self):
        """Test only the first of identical rows is kept."""
        data = pd.DataFrame({"x": [1, 1, 2], "y": [3, 3, 4]})
        cleaner = DatasetCleaner(data)

        outcome = cleaner.clean()

        assert outcome.value.index.tolist() == [0, 2]
        assert cleaner.duplicated_rows == 1

    def test_input_not_modified(self):
        """Test the raw data is left untouched."""
        data = pd.DataFrame({"x": [1, 1, np.nan]})

        DatasetCleaner(data).clean()

        assert len(data) == 3
