"""
Simple functions that coordinate the forecast components and can be reused by the
session layer, the batch flow and tests.
"""

import logging
from typing import Any

import numpy as np
import pandas as pd
import statsmodels.formula.api as smf
from hamilton import driver
from pydantic import ValidationError

from tfdea_forecasting.config import config
from tfdea_forecasting.errors import AnalysisError, ErrorCategory, Outcome
from tfdea_forecasting.modeling import lr_pipeline, tfdea_pipeline
from tfdea_forecasting.modeling.formulas import build_formula
from tfdea_forecasting.modeling.frontier import FrontierSolver, LinearProgrammingSolver
from tfdea_forecasting.modeling.matrices import build_matrices
from tfdea_forecasting.modeling.parameters import TFDEAParameters
from tfdea_forecasting.modeling.results import LRResult, TFDEAResult
from tfdea_forecasting.modeling.validation import (
    check_lr_preconditions,
    check_tfdea_preconditions,
)

logger = logging.getLogger(__name__)

TFDEA_TABLES = [
    "forecast_table",
    "model_table",
    "summary_table",
    "lambda_release_table",
    "lambda_frontier_table",
    "lambda_forecast_table",
]
LR_TABLES = [
    "forecast_table",
    "model_table",
    "summary_table",
    "coefficients_table",
    "multicollinearity_table",
]


def create_tfdea_pipeline() -> driver.Driver:
    """Create Hamilton driver assembling the TFDEA tables."""
    return driver.Builder().with_modules(tfdea_pipeline).build()


def create_lr_pipeline() -> driver.Driver:
    """Create Hamilton driver assembling the linear regression tables."""
    return driver.Builder().with_modules(lr_pipeline).build()


def _rejected(error: AnalysisError) -> Outcome[Any]:
    logger.warning(error.message)
    return Outcome(None, error)


def _parameter_message(error: ValidationError) -> str:
    details = [
        f"{'.'.join(str(loc) for loc in err['loc'])}={err.get('input')!r}"
        for err in error.errors()
    ]
    return f"Invalid TFDEA parameter: {', '.join(details)}"


def independent_variables(inputs: list[str], outputs: list[str]) -> list[str]:
    """Inputs and outputs without the constant; the fit adds its own intercept."""
    constant_name = config.forecast.constant_column
    names = []
    for name in [*inputs, *outputs]:
        if name != constant_name and name not in names:
            names.append(name)
    return names


def run_tfdea(
    dataset: pd.DataFrame,
    inputs: list[str],
    outputs: list[str],
    intro_date: str,
    frontier_date: Any,
    rts: str | None = None,
    orientation: str | None = None,
    secondary_obj: str | None = None,
    frontier_type: str | None = None,
    segmented_roc: bool | None = None,
    solver: FrontierSolver | None = None,
) -> Outcome[TFDEAResult | None]:
    """
    Forecast introduction dates with Technology Forecasting using DEA.

    Args:
        dataset: Loaded Dataset, one row per DMU
        inputs: Input column names (may include Constant_1)
        outputs: Output column names (may include Constant_1)
        intro_date: Column holding the introduction date
        frontier_date: Date separating reference DMUs from forecast DMUs
        rts, orientation, secondary_obj, frontier_type, segmented_roc: Model
            options, defaulting to the configured values
        solver: Frontier solver, LinearProgrammingSolver by default

    Returns:
        Outcome wrapping the TFDEAResult, or None and the first error found
    """
    inputs = list(inputs or [])
    outputs = list(outputs or [])

    error = check_tfdea_preconditions(dataset, inputs, outputs, intro_date, frontier_date)
    if error is not None:
        return _rejected(error)

    defaults = config.forecast
    try:
        parameters = TFDEAParameters(
            rts=defaults.rts if rts is None else rts,
            orientation=defaults.orientation if orientation is None else orientation,
            secondary_obj=defaults.secondary_obj if secondary_obj is None else secondary_obj,
            frontier_type=defaults.frontier_type if frontier_type is None else frontier_type,
            segmented_roc=defaults.segmented_roc if segmented_roc is None else segmented_roc,
        )
    except ValidationError as e:
        return Outcome.failure(None, ErrorCategory.SELECTION, _parameter_message(e))

    x, y = build_matrices(dataset, inputs, outputs)
    release_dates = dataset[intro_date]
    solver = solver or LinearProgrammingSolver(tolerance=defaults.tolerance)

    try:
        solution = solver.solve(
            x.to_numpy(dtype=float),
            y.to_numpy(dtype=float),
            release_dates.to_numpy(dtype=float),
            float(frontier_date),
            parameters.rts,
            parameters.orientation,
            parameters.secondary_obj,
            parameters.frontier_type,
            parameters.segmented_roc,
        )

        results = create_tfdea_pipeline().execute(
            final_vars=TFDEA_TABLES,
            inputs={
                "solution": solution,
                "release_dates": release_dates,
                "x_matrix": x,
                "y_matrix": y,
                "intro_date": intro_date,
                "frontier_date": float(frontier_date),
                **parameters.to_model_row(),
            },
        )
    except Exception as e:
        return Outcome.failure(
            None, ErrorCategory.MODEL, f"Error with TFDEA analysis: {str(e)}"
        )

    summary = results["summary_table"].iloc[0]
    logger.info(
        f"TFDEA completed: MAD {summary['mad']:.4f}, "
        f"{summary['roc_contributors']} ROC contributors"
    )

    return Outcome(
        TFDEAResult(
            forecast=results["forecast_table"],
            model=results["model_table"],
            summary=results["summary_table"],
            lambda_release=results["lambda_release_table"],
            lambda_frontier=results["lambda_frontier_table"],
            lambda_forecast=results["lambda_forecast_table"],
        )
    )


def run_lr(
    dataset: pd.DataFrame,
    inputs: list[str],
    outputs: list[str],
    intro_date: str,
    frontier_date: Any,
) -> Outcome[LRResult | None]:
    """
    Forecast introduction dates with an ordinary least squares regression.

    The model is fitted on DMUs introduced on or before the frontier date and
    predicts every DMU; accuracy is measured on the DMUs introduced after it.

    Returns:
        Outcome wrapping the LRResult, or None and the first error found
    """
    inputs = list(inputs or [])
    outputs = list(outputs or [])

    error = check_lr_preconditions(dataset, inputs, outputs, intro_date, frontier_date)
    if error is not None:
        return _rejected(error)

    independent_vars = independent_variables(inputs, outputs)
    formula = build_formula(intro_date, independent_vars)

    try:
        training_data = dataset[dataset[intro_date] <= frontier_date]
        logger.info(
            f"Fitting {formula} on {len(training_data)} of {len(dataset)} DMUs"
        )
        fitted_model = smf.ols(formula, data=training_data).fit()
        predictions = pd.Series(
            np.asarray(fitted_model.predict(dataset), dtype=float), index=dataset.index
        )
    except Exception as e:
        return Outcome.failure(
            None, ErrorCategory.MODEL, f"Error fitting linear model: {str(e)}"
        )

    try:
        results = create_lr_pipeline().execute(
            final_vars=LR_TABLES,
            inputs={
                "fitted_model": fitted_model,
                "predictions": predictions,
                "release_dates": dataset[intro_date],
                "intro_date": intro_date,
                "frontier_date": float(frontier_date),
                "independent_vars": independent_vars,
            },
        )
    except Exception as e:
        return Outcome.failure(
            None, ErrorCategory.MODEL, f"Error fitting linear model: {str(e)}"
        )

    summary = results["summary_table"].iloc[0]
    logger.info(
        f"Linear regression completed: MAD {summary['mad']:.4f}, R2 {summary['r2']:.4f}"
    )

    return Outcome(
        LRResult(
            forecast=results["forecast_table"],
            model=results["model_table"],
            summary=results["summary_table"],
            coefficients=results["coefficients_table"],
            multicollinearity=results["multicollinearity_table"],
        )
    )
