"""
Reference frontier solver built on scipy's linear programming.

Each efficiency score is the solution of an envelopment model for one DMU against a
reference set of DMUs:

    input orientation:  min theta  s.t.  sum(l_j x_j) <= theta x_k,  sum(l_j y_j) >= y_k
    output orientation: max phi    s.t.  sum(l_j x_j) <= x_k,        sum(l_j y_j) >= phi y_k

with the returns to scale constraint on sum(l_j). A second solve with the score held
fixed minimises or maximises sum(l_j) to pick a unique set of lambdas.
"""

import logging
from typing import Any

import numpy as np
from scipy.optimize import linprog

from tfdea_forecasting.modeling.parameters import (
    FrontierType,
    Orientation,
    ReturnsToScale,
    SecondaryObjective,
)

from .base import FrontierSolution, FrontierSolver

logger = logging.getLogger(__name__)


class LinearProgrammingSolver(FrontierSolver):
    """
    Technology forecasting with DEA solved by scipy.optimize.linprog (HiGHS).

    Efficiency is reported as theta (input orientation, <= 1 when enveloped) or phi
    (output orientation, >= 1 when enveloped); DMUs outside the reference set can be
    super-efficient.
    """

    def __init__(self, tolerance: float = 1e-6):
        """
        Initialize the solver.

        Args:
            tolerance: Numerical tolerance when comparing scores to 1
        """
        self.tolerance = tolerance

    def validate_inputs(self, x: np.ndarray, y: np.ndarray, dmu_dates: np.ndarray) -> None:
        """Validate input data."""
        if x.ndim != 2 or y.ndim != 2:
            raise ValueError("x and y must be 2D arrays")

        if x.shape[0] != y.shape[0] or x.shape[0] != dmu_dates.shape[0]:
            raise ValueError("x, y and dmu_dates must have the same number of DMUs")

        if x.shape[1] == 0 or y.shape[1] == 0:
            raise ValueError("At least one input and one output are required")

        if not (np.all(np.isfinite(x)) and np.all(np.isfinite(y))):
            raise ValueError("Inputs and outputs must be finite numbers")

        if not np.all(np.isfinite(dmu_dates)):
            raise ValueError("Release dates must be finite numbers")

        if np.any(x < 0) or np.any(y < 0):
            raise ValueError("Inputs and outputs must be non-negative")

    def solve(
        self,
        x: np.ndarray,
        y: np.ndarray,
        dmu_dates: np.ndarray,
        forecast_date: float,
        rts: ReturnsToScale = ReturnsToScale.VRS,
        orientation: Orientation = Orientation.OUTPUT,
        secondary_obj: SecondaryObjective = SecondaryObjective.MIN,
        frontier_type: FrontierType = FrontierType.STATIC,
        segmented_roc: bool = False,
    ) -> FrontierSolution:
        x = np.asarray(x, dtype=float)
        y = np.asarray(y, dtype=float)
        dates = np.asarray(dmu_dates, dtype=float)
        self.validate_inputs(x, y, dates)

        n_dmus = x.shape[0]
        options = (rts, orientation, secondary_obj)
        logger.info(
            f"Solving TFDEA for {n_dmus} DMUs ({rts.value}, {orientation.value}, "
            f"{frontier_type.value}), forecast date {forecast_date}"
        )

        eff_release = np.full(n_dmus, np.nan)
        eff_frontier = np.full(n_dmus, np.nan)
        eff_forecast = np.full(n_dmus, np.nan)
        lambda_release = np.full((n_dmus, n_dmus), np.nan)
        lambda_frontier = np.full((n_dmus, n_dmus), np.nan)
        lambda_forecast = np.full((n_dmus, n_dmus), np.nan)

        # Efficiency at release: against every DMU released on or before it
        for k in range(n_dmus):
            reference = dates <= dates[k]
            eff_release[k], lambda_release[k] = self._efficiency(x, y, k, reference, *options)

        # Efficiency at the frontier date
        frontier_set = dates <= forecast_date
        for k in np.flatnonzero(frontier_set):
            eff_frontier[k], lambda_frontier[k] = self._efficiency(
                x, y, k, frontier_set, *options
            )

        # Rate of change of DMUs superseded by the frontier
        roc = np.full(n_dmus, np.nan)
        for k in np.flatnonzero(frontier_set):
            if not self._is_efficient(eff_release[k]) or self._is_efficient(eff_frontier[k]):
                continue
            if frontier_type == FrontierType.DYNAMIC:
                score, lambdas = self._superseded_state(
                    x, y, k, dates, forecast_date, *options
                )
            else:
                score, lambdas = eff_frontier[k], lambda_frontier[k]
            roc[k] = self._rate_of_change(score, lambdas, dates, dates[k], orientation)

        defined_roc = roc[np.isfinite(roc)]
        avg_roc = float(defined_roc.mean()) if defined_roc.size else np.nan

        # Efficiency of DMUs released after the frontier date, against the frontier
        for k in np.flatnonzero(~frontier_set):
            eff_forecast[k], lambda_forecast[k] = self._efficiency(
                x, y, k, frontier_set, *options
            )

        sroc_frontier, sroc_forecast = self._segmented_roc(
            lambda_frontier, lambda_forecast, roc, frontier_set
        )

        date_forecast = np.full(n_dmus, np.nan)
        for k in np.flatnonzero(~frontier_set):
            rate = sroc_forecast[k] if segmented_roc else avg_roc
            date_forecast[k] = self._forecast_date(
                eff_forecast[k], lambda_forecast[k], dates, rate, orientation
            )

        return FrontierSolution(
            date_forecast=date_forecast,
            eff_release=eff_release,
            eff_frontier=eff_frontier,
            eff_forecast=eff_forecast,
            roc=roc,
            sroc_frontier=sroc_frontier,
            sroc_forecast=sroc_forecast,
            avg_roc=avg_roc,
            lambda_release=lambda_release,
            lambda_frontier=lambda_frontier,
            lambda_forecast=lambda_forecast,
        )

    def _is_efficient(self, score: float) -> bool:
        return bool(np.isfinite(score) and abs(score - 1.0) <= self.tolerance)

    def _progress(self, score: float, orientation: Orientation) -> float:
        """Express a score so that values above 1 mean the frontier is ahead."""
        if orientation == Orientation.OUTPUT:
            return score
        return 1.0 / score if score > 0 else np.nan

    @staticmethod
    def _effective_date(lambdas: np.ndarray, dates: np.ndarray) -> float:
        weights = np.nan_to_num(lambdas)
        total = weights.sum()
        if total <= 0:
            return np.nan
        return float(weights @ dates / total)

    def _rate_of_change(
        self,
        score: float,
        lambdas: np.ndarray,
        dates: np.ndarray,
        release_date: float,
        orientation: Orientation,
    ) -> float:
        progress = self._progress(score, orientation)
        elapsed = self._effective_date(lambdas, dates) - release_date
        if not np.isfinite(progress) or progress <= 0 or not elapsed > 0:
            return np.nan
        return float(progress ** (1.0 / elapsed))

    def _superseded_state(
        self,
        x: np.ndarray,
        y: np.ndarray,
        k: int,
        dates: np.ndarray,
        forecast_date: float,
        rts: ReturnsToScale,
        orientation: Orientation,
        secondary_obj: SecondaryObjective,
    ) -> tuple[float, np.ndarray]:
        """Score and lambdas of DMU k at the first date it stops being efficient."""
        later_dates = np.unique(dates[(dates > dates[k]) & (dates <= forecast_date)])
        score, lambdas = np.nan, np.full(x.shape[0], np.nan)
        for frontier_year in later_dates:
            score, lambdas = self._efficiency(
                x, y, k, dates <= frontier_year, rts, orientation, secondary_obj
            )
            if not self._is_efficient(score):
                break
        return score, lambdas

    def _weighted_mean(self, weights: np.ndarray, values: np.ndarray) -> float:
        weights = np.where(np.isfinite(values), np.nan_to_num(weights), 0.0)
        weights[weights <= self.tolerance] = 0.0
        if weights.sum() <= 0:
            return np.nan
        return float(weights @ np.nan_to_num(values) / weights.sum())

    def _segmented_roc(
        self,
        lambda_frontier: np.ndarray,
        lambda_forecast: np.ndarray,
        roc: np.ndarray,
        frontier_set: np.ndarray,
    ) -> tuple[np.ndarray, np.ndarray]:
        """
        Local rates of change.

        A frontier DMU gets the rate of the DMUs it superseded, weighted by the
        lambdas pointing at it. A forecast DMU gets the rate of its reference DMUs,
        weighted by its own lambdas.
        """
        sroc_frontier = np.full(len(roc), np.nan)
        for j in np.flatnonzero(frontier_set):
            sroc_frontier[j] = self._weighted_mean(lambda_frontier[:, j], roc)

        sroc_forecast = np.full(len(roc), np.nan)
        for k in np.flatnonzero(~frontier_set):
            sroc_forecast[k] = self._weighted_mean(lambda_forecast[k], sroc_frontier)

        return sroc_frontier, sroc_forecast

    def _forecast_date(
        self,
        score: float,
        lambdas: np.ndarray,
        dates: np.ndarray,
        rate: float,
        orientation: Orientation,
    ) -> float:
        # A DMU beyond the frontier is ahead of it by 1/progress
        progress = self._progress(score, orientation)
        if not np.isfinite(progress) or progress <= 0:
            return np.nan
        if not np.isfinite(rate) or rate <= 1.0:
            return np.nan
        return float(self._effective_date(lambdas, dates) + np.log(1.0 / progress) / np.log(rate))

    def _efficiency(
        self,
        x: np.ndarray,
        y: np.ndarray,
        k: int,
        reference: np.ndarray,
        rts: ReturnsToScale,
        orientation: Orientation,
        secondary_obj: SecondaryObjective,
    ) -> tuple[float, np.ndarray]:
        """Score of DMU k against the reference set, with full-length lambdas."""
        lambdas = np.full(x.shape[0], np.nan)
        ref_idx = np.flatnonzero(reference)
        if ref_idx.size == 0:
            return np.nan, lambdas

        stage1 = self._solve_score(x[ref_idx], y[ref_idx], x[k], y[k], rts, orientation)
        if not stage1["success"]:
            return np.nan, lambdas

        stage2 = self._solve_lambdas(
            x[ref_idx], y[ref_idx], x[k], y[k], rts, orientation, secondary_obj, stage1["score"]
        )
        lambdas[:] = 0.0
        lambdas[ref_idx] = stage2["lambda"] if stage2["success"] else stage1["lambda"]
        return stage1["score"], lambdas

    @staticmethod
    def _rts_constraints(
        n_ref: int, n_vars: int, offset: int, rts: ReturnsToScale
    ) -> dict[str, Any]:
        row = np.zeros(n_vars)
        row[offset:offset + n_ref] = 1.0
        if rts == ReturnsToScale.VRS:
            return {"A_eq": row[None, :], "b_eq": np.array([1.0])}
        if rts == ReturnsToScale.DRS:
            return {"A_ub": row[None, :], "b_ub": np.array([1.0])}
        if rts == ReturnsToScale.IRS:
            return {"A_ub": -row[None, :], "b_ub": np.array([-1.0])}
        return {}

    def _solve_score(
        self,
        x_ref: np.ndarray,
        y_ref: np.ndarray,
        x_k: np.ndarray,
        y_k: np.ndarray,
        rts: ReturnsToScale,
        orientation: Orientation,
    ) -> dict[str, Any]:
        """Stage 1: radial score. Variables: [score, l_1, ..., l_n]."""
        n_ref = x_ref.shape[0]
        n_vars = 1 + n_ref

        c = np.zeros(n_vars)
        if orientation == Orientation.INPUT:
            c[0] = 1.0  # min theta
            a_in = np.hstack([-x_k[:, None], x_ref.T])
            b_in = np.zeros(len(x_k))
            a_out = np.hstack([np.zeros((len(y_k), 1)), -y_ref.T])
            b_out = -y_k
        else:
            c[0] = -1.0  # max phi
            a_in = np.hstack([np.zeros((len(x_k), 1)), x_ref.T])
            b_in = x_k
            a_out = np.hstack([y_k[:, None], -y_ref.T])
            b_out = np.zeros(len(y_k))

        a_ub = np.vstack([a_in, a_out])
        b_ub = np.concatenate([b_in, b_out])

        rts_rows = self._rts_constraints(n_ref, n_vars, 1, rts)
        if "A_ub" in rts_rows:
            a_ub = np.vstack([a_ub, rts_rows["A_ub"]])
            b_ub = np.concatenate([b_ub, rts_rows["b_ub"]])

        result = linprog(
            c,
            A_ub=a_ub,
            b_ub=b_ub,
            A_eq=rts_rows.get("A_eq"),
            b_eq=rts_rows.get("b_eq"),
            bounds=[(0, None)] * n_vars,
            method="highs",
        )

        if result.success:
            return {"success": True, "score": float(result.x[0]), "lambda": result.x[1:]}
        return {"success": False}

    def _solve_lambdas(
        self,
        x_ref: np.ndarray,
        y_ref: np.ndarray,
        x_k: np.ndarray,
        y_k: np.ndarray,
        rts: ReturnsToScale,
        orientation: Orientation,
        secondary_obj: SecondaryObjective,
        fixed_score: float,
    ) -> dict[str, Any]:
        """Stage 2: min or max sum of lambdas with the score held fixed."""
        n_ref = x_ref.shape[0]
        sign = 1.0 if secondary_obj == SecondaryObjective.MIN else -1.0
        c = np.full(n_ref, sign)

        if orientation == Orientation.INPUT:
            b_in = (fixed_score + self.tolerance) * x_k
            b_out = -y_k
        else:
            b_in = x_k
            b_out = -(fixed_score - self.tolerance) * y_k

        a_ub = np.vstack([x_ref.T, -y_ref.T])
        b_ub = np.concatenate([b_in, b_out])

        rts_rows = self._rts_constraints(n_ref, n_ref, 0, rts)
        if "A_ub" in rts_rows:
            a_ub = np.vstack([a_ub, rts_rows["A_ub"]])
            b_ub = np.concatenate([b_ub, rts_rows["b_ub"]])

        result = linprog(
            c,
            A_ub=a_ub,
            b_ub=b_ub,
            A_eq=rts_rows.get("A_eq"),
            b_eq=rts_rows.get("b_eq"),
            bounds=[(0, None)] * n_ref,
            method="highs",
        )

        if result.success:
            return {"success": True, "lambda": result.x}
        return {"success": False}
