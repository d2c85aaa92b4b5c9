"""
Per-session state shared between user actions.

A session owns its Dataset, the column choices derived from it, the last result and
its own "last error" slot. Sessions never share state, so several of them can run
side by side.
"""

import logging
import os
from pathlib import Path
from typing import Any

import pandas as pd

from tfdea_forecasting.config import config
from tfdea_forecasting.data_loading import ColumnOptions, SourceKind, column_options, load
from tfdea_forecasting.errors import (
    AnalysisError,
    ErrorCategory,
    ErrorState,
    Outcome,
)
from tfdea_forecasting.modeling import (
    FrontierSolver,
    LRResult,
    TFDEAResult,
    run_lr,
    run_tfdea,
    write_workbook,
)

logger = logging.getLogger(__name__)


class AnalysisSession:
    """
    State of one user session.

    Every public method records failures in `errors` and returns a sentinel (empty
    DataFrame or None) instead of raising.
    """

    def __init__(self, solver: FrontierSolver | None = None):
        self.errors = ErrorState()
        self.solver = solver
        self.dataset: pd.DataFrame = pd.DataFrame()
        self.options: ColumnOptions | None = None
        self.result: TFDEAResult | LRResult | None = None

    @property
    def last_error(self) -> AnalysisError | None:
        return self.errors.last

    def _fail(self, category: ErrorCategory, message: str) -> None:
        self.errors.record(Outcome.failure(None, category, message))

    def _check_upload(self, location: Any, file_name: str | None) -> bool:
        """Enforce the upload size limit and accepted file types for local files."""
        loading = config.data_loading

        is_path = isinstance(location, (str, os.PathLike))
        name = file_name or (str(location) if is_path else None)
        if name is not None:
            suffix = Path(name).suffix.lower()
            if suffix not in loading.accepted_extensions:
                self._fail(
                    ErrorCategory.RETRIEVAL,
                    f"Unsupported file type '{suffix}'. "
                    f"Accepted: {', '.join(loading.accepted_extensions)}",
                )
                return False

        if is_path and os.path.isfile(location):
            size = os.path.getsize(location)
            if size > loading.max_upload_bytes:
                self._fail(
                    ErrorCategory.RETRIEVAL,
                    f"File is {size} bytes, larger than the maximum upload size of "
                    f"{loading.max_upload_bytes} bytes",
                )
                return False

        return True

    def load_data(
        self,
        source_kind: str | SourceKind,
        location: Any = None,
        has_column_header: bool = False,
        has_row_header: bool = False,
        separator: str | None = None,
        quote_char: str | None = None,
        file_name: str | None = None,
    ) -> pd.DataFrame:
        """
        Load a new Dataset for the session.

        The previous Dataset, column choices and result are discarded. Returns the
        Dataset, which is empty when loading failed.
        """
        self.dataset = pd.DataFrame()
        self.options = None
        self.result = None

        is_local = SourceKind.parse(source_kind) == SourceKind.LOCAL
        if is_local and location is not None and not self._check_upload(location, file_name):
            return self.dataset

        outcome = self.errors.record(
            load(
                source_kind,
                location,
                has_column_header=has_column_header,
                has_row_header=has_row_header,
                separator=separator,
                quote_char=quote_char,
            )
        )
        self.dataset = outcome.value
        if outcome.ok:
            self.column_options()
        return self.dataset

    def column_options(self) -> ColumnOptions | None:
        """Selection lists for the current Dataset."""
        outcome = self.errors.record(column_options(self.dataset))
        self.options = outcome.value
        return self.options

    def run_tfdea(
        self,
        inputs: list[str],
        outputs: list[str],
        intro_date: str,
        frontier_date: Any,
        **parameters: Any,
    ) -> TFDEAResult | None:
        """Run TFDEA on the session Dataset; a failed run clears the last result."""
        outcome = self.errors.record(
            run_tfdea(
                self.dataset,
                inputs,
                outputs,
                intro_date,
                frontier_date,
                solver=self.solver,
                **parameters,
            )
        )
        self.result = outcome.value
        return self.result

    def run_lr(
        self,
        inputs: list[str],
        outputs: list[str],
        intro_date: str,
        frontier_date: Any,
    ) -> LRResult | None:
        """Run the linear regression on the session Dataset."""
        outcome = self.errors.record(
            run_lr(self.dataset, inputs, outputs, intro_date, frontier_date)
        )
        self.result = outcome.value
        return self.result

    def export_results(self, path: str | Path | None = None) -> Path | None:
        """Write the last result to a workbook."""
        if self.result is None:
            self._fail(ErrorCategory.DATA, "No results to export. Run an analysis first")
            return None

        target = path or config.results_path or config.results_file
        try:
            return write_workbook(self.result, target)
        except Exception as e:
            self._fail(ErrorCategory.DATA, f"Error writing results: {str(e)}")
            return None
