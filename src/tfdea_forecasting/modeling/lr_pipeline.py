"""
Hamilton functions turning a fitted linear model into the regression result tables.

Driver inputs: fitted_model, predictions, release_dates, intro_date,
frontier_date, independent_vars.
"""

import numpy as np
import pandas as pd
from statsmodels.regression.linear_model import RegressionResultsWrapper

from tfdea_forecasting.modeling.formulas import formula_term


def _term_names(independent_vars: list[str]) -> dict[str, str]:
    return {formula_term(name): name for name in independent_vars}


def holdout_mask(release_dates: pd.Series, frontier_date: float) -> pd.Series:
    """DMUs introduced after the frontier date."""
    return release_dates > frontier_date


def mad(
    predictions: pd.Series, release_dates: pd.Series, holdout_mask: pd.Series
) -> float:
    """Mean absolute deviation over the held-out DMUs only."""
    deviations = (predictions[holdout_mask] - release_dates[holdout_mask]).abs().dropna()
    return float(deviations.mean()) if len(deviations) else float("nan")


def forecast_table(release_dates: pd.Series, predictions: pd.Series) -> pd.DataFrame:
    """Actual and forecasted introduction date of every DMU."""
    return pd.DataFrame(
        {"release_date": release_dates, "forecasted_date": predictions},
        index=release_dates.index,
    )


def model_table(intro_date: str, independent_vars: list[str]) -> pd.DataFrame:
    return pd.DataFrame(
        [{"dependent_var": intro_date, "independent_var": "; ".join(independent_vars)}]
    )


def summary_table(mad: float, fitted_model: RegressionResultsWrapper) -> pd.DataFrame:
    """MAD, R^2 and adjusted R^2."""
    return pd.DataFrame(
        [
            {
                "mad": mad,
                "r2": float(fitted_model.rsquared),
                "adjusted_r2": float(fitted_model.rsquared_adj),
            }
        ]
    )


def coefficients_table(
    fitted_model: RegressionResultsWrapper, independent_vars: list[str]
) -> pd.DataFrame:
    """Estimate, standard error, t statistic and p-value per coefficient."""
    coefficients = pd.DataFrame(
        {
            "estimate": fitted_model.params,
            "std_error": fitted_model.bse,
            "t_value": fitted_model.tvalues,
            "p_value": fitted_model.pvalues,
        }
    )
    return coefficients.rename(index=_term_names(independent_vars))


def multicollinearity_table(
    fitted_model: RegressionResultsWrapper, independent_vars: list[str]
) -> pd.DataFrame:
    """
    Generalized variance inflation factor per model term.

    A categorical variable spans several dummy columns but still gets a single
    row: GVIF = det(R11) * det(R22) / det(R), with R the correlation matrix of
    the regressors, R11 the block of the term's columns and R22 the block of all
    other columns. For a single-column term this is the ordinary VIF. Empty for
    fewer than two variables.
    """
    if len(independent_vars) < 2:
        return pd.DataFrame(columns=["GVIF"], dtype=float)

    exog = np.asarray(fitted_model.model.exog, dtype=float)
    term_slices = fitted_model.model.data.design_info.term_name_slices
    names = _term_names(independent_vars)

    intercept = term_slices.get("Intercept")
    columns = [
        idx
        for idx in range(exog.shape[1])
        if intercept is None or not intercept.start <= idx < intercept.stop
    ]
    position = {idx: pos for pos, idx in enumerate(columns)}
    corr = np.atleast_2d(np.corrcoef(exog[:, columns], rowvar=False))
    det_all = np.linalg.det(corr)

    rows = {}
    for term_name, term_slice in term_slices.items():
        if term_name == "Intercept":
            continue
        own = [position[idx] for idx in range(term_slice.start, term_slice.stop)]
        rest = [pos for pos in range(len(columns)) if pos not in own]
        det_own = np.linalg.det(corr[np.ix_(own, own)])
        det_rest = np.linalg.det(corr[np.ix_(rest, rest)]) if rest else 1.0
        rows[names.get(term_name, term_name)] = float(det_own * det_rest / det_all)

    return pd.DataFrame({"GVIF": pd.Series(rows, dtype=float)})
