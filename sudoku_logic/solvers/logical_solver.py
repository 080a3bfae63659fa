"""Human-style solver: applies deductive strategies until the board is solved."""

from __future__ import annotations
from collections import Counter
from typing import Optional, Sequence
import logging

from .base_solver import BaseSolver, SolverStats
from .brute_force import brute_force
from ..core.board import SudokuBoard
from ..core.cells import CellBoard, SolvedCell, UnsolvedCell
from ..core.exceptions import InconsistentModificationError, UnableToSolveError
from ..core.modifications import BoardModification, RemoveCandidates, SetValue
from ..strategies import DEFAULT_STRATEGIES, Strategy

logger = logging.getLogger(__name__)


def solve(
    board: SudokuBoard,
    strategies: Optional[Sequence[Strategy]] = None,
    stats: Optional[SolverStats] = None,
) -> SudokuBoard:
    """
    Solve a puzzle with logical strategies only.

    The puzzle is brute forced once up front. Every modification a strategy
    proposes is checked against that solution before it is applied.

    Each round the strategies are tried in order and the first one that
    finds anything wins the round. The solve ends when no unsolved cells
    remain, or fails when a whole round finds nothing.

    Args:
        board: Puzzle with 0 for unknown cells. Not modified.
        strategies: Strategies in priority order, DEFAULT_STRATEGIES if None.
        stats: Optional stats; rounds go to ``iterations`` and per-strategy
            counts to ``extra["strategies"]``.

    Returns:
        The solved board.

    Raises:
        NoSolutionError: if the puzzle has no solution.
        MultipleSolutionsError: if the puzzle has more than one solution.
        UnableToSolveError: if the strategies stall before the board is solved.
        InconsistentModificationError: if a strategy contradicts the solution.
    """
    if strategies is None:
        strategies = DEFAULT_STRATEGIES
    truth = brute_force(board)
    cells = CellBoard.from_sudoku_board(board)
    usage: Counter = Counter()

    rounds = 0
    while cells.unsolved_cells():
        rounds += 1
        for strategy in strategies:
            modifications = strategy(cells)
            if modifications:
                break
        else:
            logger.warning(
                "No strategy made progress after %d rounds, %d cells unsolved",
                rounds - 1, len(cells.unsolved_cells()),
            )
            _record(stats, rounds - 1, usage)
            raise UnableToSolveError(cells)

        logger.debug(
            "Round %d: %s made %d modifications",
            rounds, strategy.__name__, len(modifications),
        )
        usage[strategy.__name__] += 1
        for modification in modifications:
            _validate(cells, truth, modification)
            _apply(cells, modification)

    _record(stats, rounds, usage)
    logger.info("Solved logically in %d rounds", rounds)
    return truth


def _record(stats: Optional[SolverStats], rounds: int, usage: Counter) -> None:
    if stats is not None:
        stats.iterations = rounds
        stats.extra["strategies"] = dict(usage)


def _validate(cells: CellBoard, truth: SudokuBoard, modification: BoardModification) -> None:
    """Check a modification against the current cell and the known solution."""
    row, column = modification.row, modification.column
    cell = cells.get(row, column)
    if not isinstance(cell, UnsolvedCell):
        raise InconsistentModificationError(f"[{row}, {column}] is already solved.")
    solution = truth.get(row, column)
    if isinstance(modification, SetValue):
        if modification.value != solution:
            raise InconsistentModificationError(
                f"Cannot set value {modification.value} to [{row}, {column}]. Solution is {solution}"
            )
    elif isinstance(modification, RemoveCandidates):
        for candidate in sorted(modification.candidates):
            if candidate == solution:
                raise InconsistentModificationError(
                    f"Cannot remove candidate {candidate} from [{row}, {column}]"
                )
            if candidate not in cell.candidates:
                raise InconsistentModificationError(
                    f"{candidate} is not a candidate of [{row}, {column}]"
                )


def _apply(cells: CellBoard, modification: BoardModification) -> None:
    row, column = modification.row, modification.column
    if isinstance(modification, SetValue):
        cells.set(row, column, SolvedCell(row, column, modification.value))
    else:
        remaining = cells.get(row, column).candidates - modification.candidates
        cells.set(row, column, UnsolvedCell(row, column, remaining))


class LogicalSolver(BaseSolver):
    """
    Solver that only uses deductive strategies.

    Puzzles the strategies cannot finish are reported through
    ``stats.extra["error"]`` as ``UnableToSolveError``.
    """

    name = "Logical"

    def __init__(self, strategies: Optional[Sequence[Strategy]] = None):
        super().__init__()
        self.strategies = list(strategies) if strategies is not None else list(DEFAULT_STRATEGIES)

    def _solve(self, board: SudokuBoard) -> Optional[SudokuBoard]:
        return solve(board, self.strategies, self.stats)
