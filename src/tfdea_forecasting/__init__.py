from .data_loading import column_options, load, numeric_columns
from .errors import AnalysisError, ErrorCategory, ErrorState, Outcome
from .modeling import build_matrices, run_lr, run_tfdea, write_workbook
from .session import AnalysisSession

__all__ = [
    "AnalysisError",
    "AnalysisSession",
    "ErrorCategory",
    "ErrorState",
    "Outcome",
    "build_matrices",
    "column_options",
    "load",
    "numeric_columns",
    "run_lr",
    "run_tfdea",
    "write_workbook",
]
