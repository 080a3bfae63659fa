"""Errors raised while parsing and solving boards."""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .cells import CellBoard


class InvalidDimensionsError(ValueError):
    """A board was built from something other than 9 rows of 9 cells."""


class SolveError(Exception):
    """Base class for the terminal outcomes of a solve that did not produce a solution."""


class NoSolutionError(SolveError):
    def __init__(self, message: str = "No Solutions"):
        super().__init__(message)


class MultipleSolutionsError(SolveError):
    def __init__(self, message: str = "Multiple Solutions"):
        super().__init__(message)


class UnableToSolveError(SolveError):
    """
    The strategies stalled before the board was solved.

    The puzzle has a unique solution (the brute-force check already proved
    that), so this points at a missing technique. The partially solved board,
    including the remaining candidates, is kept on ``board``.
    """

    def __init__(self, board: CellBoard):
        self.board = board
        super().__init__(f"Unable to solve:\n{board.to_candidates_string()}")


class InconsistentModificationError(RuntimeError):
    """A strategy produced a modification that contradicts the known solution."""
