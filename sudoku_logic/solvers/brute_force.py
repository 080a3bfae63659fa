"""Backtracking search used as the ground truth for the logical solver."""

from __future__ import annotations
from typing import List, Optional, Set, Tuple
import logging

from .base_solver import BaseSolver, SolverStats
from ..core.board import SudokuBoard
from ..core.exceptions import MultipleSolutionsError, NoSolutionError

logger = logging.getLogger(__name__)


def brute_force(board: SudokuBoard, stats: Optional[SolverStats] = None) -> SudokuBoard:
    """
    Find the one solution of a puzzle by exhaustive search.

    The search does not stop at the first solution. It keeps going until it
    either exhausts the tree or finds a second solution, so uniqueness is
    proven rather than assumed.

    Args:
        board: Puzzle with 0 for unknown cells. Not modified.
        stats: Optional stats to update with search counters.

    Returns:
        The solved board.

    Raises:
        NoSolutionError: if the givens conflict or no completion exists.
        MultipleSolutionsError: if more than one completion exists.
    """
    if not board.is_valid():
        raise NoSolutionError()
    if board.is_complete():
        return board.copy()

    solutions: List[SudokuBoard] = []
    _search(board.copy(), solutions, stats)
    if not solutions:
        raise NoSolutionError()
    if len(solutions) > 1:
        raise MultipleSolutionsError()
    logger.debug("Brute force found a unique solution")
    return solutions[0]


def _search(board: SudokuBoard, solutions: List[SudokuBoard], stats: Optional[SolverStats]) -> None:
    """Depth-first search that returns early once two solutions are known."""
    if stats is not None:
        stats.iterations += 1

    cell = _select_most_constrained(board)
    if cell is None:
        solutions.append(board.copy())
        return

    row, col, candidates = cell
    if stats is not None:
        stats.nodes_explored += 1

    for value in sorted(candidates):
        board.set(row, col, value)
        _search(board, solutions, stats)
        board.set(row, col, 0)
        if len(solutions) > 1:
            return
        if stats is not None:
            stats.backtracks += 1


def _select_most_constrained(board: SudokuBoard) -> Optional[Tuple[int, int, Set[int]]]:
    """
    MRV heuristic: the empty cell with the fewest candidates, or None when
    the board is full. A cell with no candidates is returned immediately.
    """
    best = None
    for row, col in board.get_empty_cells():
        candidates = board.get_candidates(row, col)
        if best is None or len(candidates) < len(best[2]):
            best = (row, col, candidates)
            if not candidates:
                break
    return best


class BruteForceSolver(BaseSolver):
    """Backtracking solver with the Minimum Remaining Values heuristic."""

    name = "BruteForce"

    def _solve(self, board: SudokuBoard) -> Optional[SudokuBoard]:
        return brute_force(board, self.stats)
