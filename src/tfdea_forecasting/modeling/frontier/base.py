from dataclasses import dataclass
from typing import Protocol, runtime_checkable

import numpy as np

from tfdea_forecasting.modeling.parameters import (
    FrontierType,
    Orientation,
    ReturnsToScale,
    SecondaryObjective,
)


@dataclass(frozen=True)
class FrontierSolution:
    """
    Per-DMU results of a frontier forecast.

    Vectors have one entry per DMU and use NaN where a value does not apply (for
    example the forecast efficiency of a DMU released before the forecast date).
    Lambda matrices are DMU x DMU, row k holding the weights of DMU k's reference set.
    """

    date_forecast: np.ndarray
    eff_release: np.ndarray
    eff_frontier: np.ndarray
    eff_forecast: np.ndarray
    roc: np.ndarray
    sroc_frontier: np.ndarray
    sroc_forecast: np.ndarray
    avg_roc: float
    lambda_release: np.ndarray
    lambda_frontier: np.ndarray
    lambda_forecast: np.ndarray


@runtime_checkable
class FrontierSolver(Protocol):
    """
    Protocol defining the interface for frontier / efficiency solvers.
    This is a structural type; any object with a matching `solve` method can be
    passed to the TFDEA pipeline.
    """

    def solve(
        self,
        x: np.ndarray,
        y: np.ndarray,
        dmu_dates: np.ndarray,
        forecast_date: float,
        rts: ReturnsToScale,
        orientation: Orientation,
        secondary_obj: SecondaryObjective,
        frontier_type: FrontierType,
        segmented_roc: bool,
    ) -> FrontierSolution:
        """
        Compute efficiencies, rates of change and forecasted dates.

        Args:
            x: Input matrix, one row per DMU
            y: Output matrix, one row per DMU
            dmu_dates: Release date of each DMU
            forecast_date: Frontier date separating reference and forecast DMUs
            rts: Returns to scale
            orientation: Input or output orientation
            secondary_obj: Secondary objective applied to the lambdas
            frontier_type: Static or dynamic frontier year
            segmented_roc: Forecast with segmented instead of average rate of change

        Returns:
            FrontierSolution

        Raises:
            Exception: Any failure; the pipeline reports it as a model error
        """
        ...
