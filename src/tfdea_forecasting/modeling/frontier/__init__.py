from .base import FrontierSolution, FrontierSolver
from .linprog_solver import LinearProgrammingSolver

__all__ = ["FrontierSolution", "FrontierSolver", "LinearProgrammingSolver"]
