"""Solvers module for Sudoku puzzles."""

from .base_solver import BaseSolver, SolverStats
from .brute_force import BruteForceSolver, brute_force
from .logical_solver import LogicalSolver, solve

__all__ = [
    "BaseSolver",
    "SolverStats",
    "BruteForceSolver",
    "brute_force",
    "LogicalSolver",
    "solve",
]
