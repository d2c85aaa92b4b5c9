"""
Precondition checks run before a forecast pipeline touches the solver.

Checks run in a fixed order and the first failure is the only one reported.
"""

import numbers
from typing import Any, Callable

import pandas as pd

from tfdea_forecasting.config import config
from tfdea_forecasting.errors import AnalysisError, ErrorCategory

Check = Callable[[], AnalysisError | None]


def is_numeric_value(value: Any) -> bool:
    """True for real numbers, False for booleans, strings and None."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def missing_columns(dataset: pd.DataFrame, names: list[str]) -> list[str]:
    """Selected column names (other than the constant) absent from the Dataset."""
    constant_name = config.forecast.constant_column
    columns = set(dataset.columns)
    missing = []
    for name in names:
        if name != constant_name and name not in columns and name not in missing:
            missing.append(name)
    return missing


def _error(category: ErrorCategory, message: str) -> AnalysisError:
    return AnalysisError(category=category, message=message)


def _require(condition: bool, category: ErrorCategory, message: str) -> Check:
    return lambda: None if condition else _error(category, message)


def first_failure(checks: list[Check]) -> AnalysisError | None:
    """Run checks in order and stop at the first one that fails."""
    for check in checks:
        error = check()
        if error is not None:
            return error
    return None


def _data_checks(
    dataset: pd.DataFrame,
    selected: list[str],
    intro_date: str,
    frontier_date: Any,
) -> list[Check]:
    def columns_exist() -> AnalysisError | None:
        missing = missing_columns(dataset, selected)
        if missing:
            return _error(
                ErrorCategory.DATA,
                f"Column(s) not part of dataframe: {', '.join(map(str, missing))}",
            )
        return None

    return [
        lambda: (
            _error(ErrorCategory.DATA, "No data exists in selected data file")
            if len(dataset) == 0
            else None
        ),
        lambda: (
            None
            if intro_date in dataset.columns
            else _error(
                ErrorCategory.DATA, "Introduction date column name not part of dataframe"
            )
        ),
        lambda: (
            None
            if is_numeric_value(frontier_date)
            else _error(ErrorCategory.DATA, "Frontier date must be a numeric value")
        ),
        columns_exist,
    ]


def check_tfdea_preconditions(
    dataset: pd.DataFrame,
    inputs: list[str],
    outputs: list[str],
    intro_date: str,
    frontier_date: Any,
) -> AnalysisError | None:
    """First failing TFDEA precondition, or None when all of them hold."""
    checks = [
        _require(
            len(inputs) > 0,
            ErrorCategory.SELECTION,
            "No input(s) selected. Select a minimum of 1 input",
        ),
        _require(
            len(outputs) > 0,
            ErrorCategory.SELECTION,
            "No output(s) selected. Select a minimum of 1 output",
        ),
        *_data_checks(dataset, [*inputs, *outputs], intro_date, frontier_date),
    ]
    return first_failure(checks)


def check_lr_preconditions(
    dataset: pd.DataFrame,
    inputs: list[str],
    outputs: list[str],
    intro_date: str,
    frontier_date: Any,
) -> AnalysisError | None:
    """First failing linear regression precondition, or None when all of them hold."""
    checks = [
        _require(
            len(inputs) + len(outputs) > 0,
            ErrorCategory.SELECTION,
            "No input(s)/output(s) selected. Select a minimum of 1 input/output",
        ),
        *_data_checks(dataset, [*inputs, *outputs], intro_date, frontier_date),
    ]
    return first_failure(checks)
