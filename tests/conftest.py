import sys
from pathlib import Path

import numpy as np
import pandas as pd
import pytest

# Add the src directory to the Python path so imports work correctly
PROJECT_ROOT = Path(__file__).parent.parent
SRC_PATH = PROJECT_ROOT / "src"
sys.path.insert(0, str(SRC_PATH))

from tfdea_forecasting.modeling.frontier import FrontierSolution  # noqa: E402


DMU_CSV = """Name,Date,Speed,Range,Label
A,2000,10,100,x
B,2001,12,110,x
C,2002,14,125,y
D,2003,16,150,y
E,2004,19,160,z
F,2005,20,190,z
"""


class FakeSolver:
    """Deterministic stand-in for the frontier solver that records its calls."""

    def __init__(self, n_dmus: int = 6):
        self.calls = []
        nan = np.nan
        self.solution = FrontierSolution(
            date_forecast=np.array([nan, nan, nan, nan, 2003.5, 2006.0])[:n_dmus],
            eff_release=np.ones(n_dmus),
            eff_frontier=np.array([1.2, 1.1, 1.05, 1.0, nan, nan])[:n_dmus],
            eff_forecast=np.array([nan, nan, nan, nan, 0.9, 0.95])[:n_dmus],
            roc=np.array([nan, 1.1, 1.2, nan, nan, nan])[:n_dmus],
            sroc_frontier=np.array([1.15, 1.1, 1.2, nan, nan, nan])[:n_dmus],
            sroc_forecast=np.array([nan, nan, nan, nan, 1.1, 1.2])[:n_dmus],
            avg_roc=1.15,
            lambda_release=np.eye(n_dmus),
            lambda_frontier=np.eye(n_dmus),
            lambda_forecast=np.zeros((n_dmus, n_dmus)),
        )

    def solve(self, x, y, dmu_dates, forecast_date, rts, orientation, secondary_obj,
              frontier_type, segmented_roc):
        self.calls.append(
            {
                "x": x,
                "y": y,
                "dmu_dates": dmu_dates,
                "forecast_date": forecast_date,
                "rts": rts,
                "orientation": orientation,
                "secondary_obj": secondary_obj,
                "frontier_type": frontier_type,
                "segmented_roc": segmented_roc,
            }
        )
        return self.solution


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture(scope="session")
def src_path():
    """Return the src directory path."""
    return SRC_PATH


@pytest.fixture
def dmu_csv(tmp_path):
    """A small DMU file with a header row and row names."""
    path = tmp_path / "dmus.csv"
    path.write_text(DMU_CSV)
    return path


@pytest.fixture
def dmu_dataset():
    """The DMU file as a loaded Dataset (row names promoted to the index)."""
    return pd.DataFrame(
        {
            "Date": [2000, 2001, 2002, 2003, 2004, 2005],
            "Speed": [10, 12, 14, 16, 19, 20],
            "Range": [100, 110, 125, 150, 160, 190],
            "Label": ["x", "x", "y", "y", "z", "z"],
        },
        index=pd.Index(["A", "B", "C", "D", "E", "F"], name="Name"),
    )


@pytest.fixture
def fake_solver():
    return FakeSolver()


# Configure pytest to show more detailed output for failed assertions
def pytest_configure(config):
    """Configure pytest settings."""
    config.option.verbose = True
