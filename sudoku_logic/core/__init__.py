"""Core module for board representation, modifications and errors."""

from .board import SudokuBoard
from .cells import CellBoard, LocatedCandidate, SolvedCell, UnsolvedCell
from .exceptions import (
    InconsistentModificationError,
    InvalidDimensionsError,
    MultipleSolutionsError,
    NoSolutionError,
    SolveError,
    UnableToSolveError,
)
from .modifications import BoardModification, RemoveCandidates, Removals, SetValue

__all__ = [
    "SudokuBoard",
    "CellBoard",
    "LocatedCandidate",
    "SolvedCell",
    "UnsolvedCell",
    "InconsistentModificationError",
    "InvalidDimensionsError",
    "MultipleSolutionsError",
    "NoSolutionError",
    "SolveError",
    "UnableToSolveError",
    "BoardModification",
    "RemoveCandidates",
    "Removals",
    "SetValue",
]
