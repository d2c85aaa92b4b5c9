"""Unit tests for the model matrix builder."""

import pandas as pd

from tfdea_forecasting.modeling.matrices import build_matrices


class TestBuildMatrices:
    """Test suite for build_matrices function."""

    def test_constant_column(self):
        """Test the constant becomes a leading column of ones."""
        dataset = pd.DataFrame({"A": [1, 2, 3, 4, 5]})

        x, y = build_matrices(dataset, ["A", "Constant_1"], ["A"])

        assert list(x.columns) == ["X_CONSTANT", "X_A"]
        assert x["X_CONSTANT"].tolist() == [1.0] * 5
        assert x["X_A"].tolist() == [1, 2, 3, 4, 5]
        assert list(y.columns) == ["Y_A"]

    def test_selected_order_kept(self, dmu_dataset):
        """Test columns keep the selected order."""
        x, y = build_matrices(dmu_dataset, ["Range", "Speed"], ["Speed", "Range"])

        assert list(x.columns) == ["X_RANGE", "X_SPEED"]
        assert list(y.columns) == ["Y_SPEED", "Y_RANGE"]

    def test_row_names_kept(self, dmu_dataset):
        """Test the matrices are indexed by the DMU names."""
        x, y = build_matrices(dmu_dataset, ["Constant_1"], ["Speed"])

        assert list(x.index) == list(dmu_dataset.index)
        assert list(y.index) == list(dmu_dataset.index)

    def test_dataset_unchanged(self, dmu_dataset):
        """Test the Dataset is not modified."""
        columns = list(dmu_dataset.columns)

        build_matrices(dmu_dataset, ["Constant_1", "Speed"], ["Range"])

        assert list(dmu_dataset.columns) == columns
