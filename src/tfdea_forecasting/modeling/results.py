from dataclasses import dataclass

import pandas as pd


@dataclass(frozen=True)
class TFDEAResult:
    """Container for the tables produced by one TFDEA run."""

    forecast: pd.DataFrame
    model: pd.DataFrame
    summary: pd.DataFrame
    lambda_release: pd.DataFrame
    lambda_frontier: pd.DataFrame
    lambda_forecast: pd.DataFrame

    def tables(self) -> dict[str, pd.DataFrame]:
        """All tables, keyed by the sheet name used on export."""
        return {
            "forecast": self.forecast,
            "model": self.model,
            "summary": self.summary,
            "lambda_release": self.lambda_release,
            "lambda_frontier": self.lambda_frontier,
            "lambda_forecast": self.lambda_forecast,
        }


@dataclass(frozen=True)
class LRResult:
    """Container for the tables produced by one linear regression run."""

    forecast: pd.DataFrame
    model: pd.DataFrame
    summary: pd.DataFrame
    coefficients: pd.DataFrame
    multicollinearity: pd.DataFrame

    def tables(self) -> dict[str, pd.DataFrame]:
        """All tables, keyed by the sheet name used on export."""
        return {
            "forecast": self.forecast,
            "model": self.model,
            "summary": self.summary,
            "coefficients": self.coefficients,
            "multicollinearity": self.multicollinearity,
        }
