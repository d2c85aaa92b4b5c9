"""Unit tests for TFDEA model options."""

import pytest
from pydantic import ValidationError

from tfdea_forecasting.modeling.parameters import (
    FrontierType,
    Orientation,
    ReturnsToScale,
    SecondaryObjective,
    TFDEAParameters,
)


class TestTFDEAParameters:
    """Test suite for TFDEAParameters."""

    def test_default_values(self):
        """Test default model options."""
        params = TFDEAParameters()

        assert params.rts == ReturnsToScale.VRS
        assert params.orientation == Orientation.OUTPUT
        assert params.secondary_obj == SecondaryObjective.MIN
        assert params.frontier_type == FrontierType.STATIC
        assert params.segmented_roc is False

    def test_case_insensitive(self):
        """Test option names are normalized to lower case."""
        params = TFDEAParameters(rts="CRS", secondary_obj="Max", frontier_type="DYNAMIC")

        assert params.rts == ReturnsToScale.CRS
        assert params.secondary_obj == SecondaryObjective.MAX
        assert params.frontier_type == FrontierType.DYNAMIC

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("in", Orientation.INPUT),
            ("input", Orientation.INPUT),
            ("OUT", Orientation.OUTPUT),
            ("Output", Orientation.OUTPUT),
        ],
    )
    def test_orientation_aliases(self, value, expected):
        """Test long and short orientation names."""
        assert TFDEAParameters(orientation=value).orientation == expected

    @pytest.mark.parametrize(
        "field, value",
        [
            ("rts", "nirs"),
            ("orientation", "sideways"),
            ("secondary_obj", "avg"),
            ("frontier_type", "rolling"),
        ],
    )
    def test_invalid_values(self, field, value):
        """Test values outside the enumerations are rejected."""
        with pytest.raises(ValidationError):
            TFDEAParameters(**{field: value})

    def test_frozen(self):
        """Test options cannot be changed after validation."""
        params = TFDEAParameters()

        with pytest.raises(ValidationError):
            params.rts = ReturnsToScale.CRS

    def test_to_model_row(self):
        """Test options are echoed as plain values."""
        params = TFDEAParameters(rts="drs", orientation="input", segmented_roc=True)

        assert params.to_model_row() == {
            "rts": "drs",
            "orientation": "in",
            "secondary_obj": "min",
            "frontier_type": "static",
            "segmented_roc": True,
        }
