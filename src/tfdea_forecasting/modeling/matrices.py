"""
Build the input (X) and output (Y) matrices of a model from selected column names.
"""

import logging

import numpy as np
import pandas as pd

from tfdea_forecasting.config import config

logger = logging.getLogger(__name__)


def _build_side(dataset: pd.DataFrame, names: list[str], prefix: str) -> pd.DataFrame:
    constant_name = config.forecast.constant_column

    if constant_name in names:
        other_names = [name for name in names if name != constant_name]
        constant = pd.DataFrame(
            {"constant": np.ones(len(dataset))}, index=dataset.index
        )
        matrix = pd.concat([constant, dataset[other_names]], axis=1)
    else:
        matrix = dataset[list(names)].copy()

    # Prefixed upper-case names never collide with the solver's own fields
    matrix.columns = [f"{prefix}_{col}".upper() for col in matrix.columns]
    return matrix


def build_matrices(
    dataset: pd.DataFrame, input_names: list[str], output_names: list[str]
) -> tuple[pd.DataFrame, pd.DataFrame]:
    """
    Select the input and output columns of a Dataset.

    A `Constant_1` entry is replaced by a column of ones placed first. Column
    existence is not checked here.

    Returns:
        (X, Y) with columns named X_<NAME> and Y_<NAME>
    """
    x = _build_side(dataset, input_names, "x")
    y = _build_side(dataset, output_names, "y")
    logger.info(f"Built input matrix {x.shape} and output matrix {y.shape}")
    return x, y
