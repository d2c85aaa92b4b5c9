"""
Hamilton functions turning a frontier solution into the TFDEA result tables.

Each function is a node of the DAG; parameter names refer to other nodes or to the
driver inputs (solution, release_dates, x_matrix, y_matrix, intro_date,
frontier_date, rts, orientation, secondary_obj, frontier_type, segmented_roc).
"""

import numpy as np
import pandas as pd

from tfdea_forecasting.modeling.frontier import FrontierSolution


def _lambda_table(lambdas: np.ndarray, release_dates: pd.Series) -> pd.DataFrame:
    return pd.DataFrame(lambdas, index=release_dates.index, columns=release_dates.index)


def forecasted_dates(solution: FrontierSolution, release_dates: pd.Series) -> pd.Series:
    """Solver forecasted dates aligned with the DMUs."""
    return pd.Series(solution.date_forecast, index=release_dates.index, dtype=float)


def date_deviation(forecasted_dates: pd.Series, release_dates: pd.Series) -> pd.Series:
    """Forecasted minus actual introduction date; NaN where no forecast exists."""
    return forecasted_dates - release_dates.astype(float)


def mad(date_deviation: pd.Series) -> float:
    """Mean absolute deviation of the forecasts, ignoring missing values."""
    deviations = date_deviation.abs().dropna()
    return float(deviations.mean()) if len(deviations) else float("nan")


def roc_contributors(solution: FrontierSolution) -> int:
    """Number of DMUs with a rate of change."""
    return int(np.isfinite(solution.roc).sum())


def early_forecasts(date_deviation: pd.Series) -> int:
    """Forecasts earlier than the actual introduction date."""
    return int((date_deviation < 0).sum())


def late_forecasts(date_deviation: pd.Series) -> int:
    """Forecasts later than the actual introduction date."""
    return int((date_deviation > 0).sum())


def forecast_table(
    solution: FrontierSolution, release_dates: pd.Series, forecasted_dates: pd.Series
) -> pd.DataFrame:
    """Per-DMU efficiencies, rates of change and forecasted dates."""
    return pd.DataFrame(
        {
            "release_date": release_dates,
            "efficiency_release": solution.eff_release,
            "efficiency_frontier": solution.eff_frontier,
            "efficiency_forecast": solution.eff_forecast,
            "roc": solution.roc,
            "sroc_frontier": solution.sroc_frontier,
            "sroc_forecast": solution.sroc_forecast,
            "forecasted_date": forecasted_dates,
        },
        index=release_dates.index,
    )


def model_table(
    x_matrix: pd.DataFrame,
    y_matrix: pd.DataFrame,
    intro_date: str,
    frontier_date: float,
    rts: str,
    orientation: str,
    secondary_obj: str,
    frontier_type: str,
    segmented_roc: bool,
) -> pd.DataFrame:
    """Echo of the resolved model specification."""
    return pd.DataFrame(
        [
            {
                "inputs": "; ".join(x_matrix.columns),
                "outputs": "; ".join(y_matrix.columns),
                "release_date": intro_date,
                "frontier_date": frontier_date,
                "rts": rts,
                "orientation": orientation,
                "secondary_obj": secondary_obj,
                "frontier_type": frontier_type,
                "segmented_roc": segmented_roc,
            }
        ]
    )


def summary_table(
    mad: float,
    solution: FrontierSolution,
    roc_contributors: int,
    early_forecasts: int,
    late_forecasts: int,
) -> pd.DataFrame:
    """Aggregate accuracy diagnostics of the run."""
    return pd.DataFrame(
        [
            {
                "mad": mad,
                "avg_roc": float(solution.avg_roc),
                "roc_contributors": roc_contributors,
                "early_forecasts": early_forecasts,
                "late_forecasts": late_forecasts,
            }
        ]
    )


def lambda_release_table(
    solution: FrontierSolution, release_dates: pd.Series
) -> pd.DataFrame:
    return _lambda_table(solution.lambda_release, release_dates)


def lambda_frontier_table(
    solution: FrontierSolution, release_dates: pd.Series
) -> pd.DataFrame:
    return _lambda_table(solution.lambda_frontier, release_dates)


def lambda_forecast_table(
    solution: FrontierSolution, release_dates: pd.Series
) -> pd.DataFrame:
    return _lambda_table(solution.lambda_forecast, release_dates)
