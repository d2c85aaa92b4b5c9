from .export import write_workbook
from .forecast_steps import run_lr, run_tfdea
from .frontier import FrontierSolution, FrontierSolver, LinearProgrammingSolver
from .matrices import build_matrices
from .parameters import (
    FrontierType,
    Orientation,
    ReturnsToScale,
    SecondaryObjective,
    TFDEAParameters,
)
from .results import LRResult, TFDEAResult

__all__ = [
    "FrontierSolution",
    "FrontierSolver",
    "FrontierType",
    "LRResult",
    "LinearProgrammingSolver",
    "Orientation",
    "ReturnsToScale",
    "SecondaryObjective",
    "TFDEAParameters",
    "TFDEAResult",
    "build_matrices",
    "run_lr",
    "run_tfdea",
    "write_workbook",
]
