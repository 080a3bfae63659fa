"""Deductive Sudoku solving with human-style strategies."""

from .core.board import SudokuBoard
from .core.cells import CellBoard
from .solvers import BruteForceSolver, LogicalSolver, brute_force, solve

__all__ = ["SudokuBoard", "CellBoard", "BruteForceSolver", "LogicalSolver", "brute_force", "solve"]
