"""
Decide which columns of a Dataset can be used as model variables.
"""

from dataclasses import dataclass

import pandas as pd

from tfdea_forecasting.config import config
from tfdea_forecasting.errors import ErrorCategory, Outcome


@dataclass(frozen=True)
class ColumnOptions:
    """Choices offered for inputs, outputs and the introduction date."""

    inputs: list[str]
    outputs: list[str]
    intro_date: list[str]


def _is_numeric_column(series: pd.Series) -> bool:
    return pd.api.types.is_numeric_dtype(series) and not pd.api.types.is_bool_dtype(
        series
    )


def numeric_columns(dataset: pd.DataFrame) -> Outcome[list[str]]:
    """
    List the columns eligible as numeric model variables.

    The constant pseudo-column comes first, followed by the numeric columns in
    dataset order.
    """
    col_numeric = [col for col in dataset.columns if _is_numeric_column(dataset[col])]

    if not col_numeric:
        return Outcome.failure(
            [],
            ErrorCategory.DATA,
            "There are no numeric columns. Ensure all entries in input/output columns "
            "of data are numeric",
        )

    return Outcome([config.forecast.constant_column, *[str(c) for c in col_numeric]])


def column_options(dataset: pd.DataFrame) -> Outcome[ColumnOptions | None]:
    """Build the selection lists for inputs, outputs and the introduction date."""
    numeric = numeric_columns(dataset)
    if not numeric.ok:
        return Outcome(None, numeric.error)

    col_names = numeric.value
    return Outcome(
        ColumnOptions(
            inputs=list(col_names),
            outputs=list(col_names),
            intro_date=col_names[1:],
        )
    )
