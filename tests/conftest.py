"""Shared fixtures for strategy tests."""

import pytest

from sudoku_logic.core.cells import CellBoard
from sudoku_logic.core.modifications import RemoveCandidates, SetValue
from sudoku_logic.solvers.brute_force import brute_force


def _position(modification):
    return modification.row, modification.column


def _covered(expected, actual):
    """A removal is covered by a removal of the same cell with at least its candidates."""
    if isinstance(expected, SetValue):
        return expected in actual
    return any(
        isinstance(modification, RemoveCandidates)
        and _position(modification) == _position(expected)
        and expected.candidates <= modification.candidates
        for modification in actual
    )


def check_logical_solution(expected, board, strategy, subset=False):
    """
    Run ``strategy`` on ``board`` and check the result.

    Every modification must agree with the brute-force solution of the
    board's solved cells. With ``subset`` the expected modifications only
    need to appear in the result; otherwise the result must match them
    exactly, ordered by row and column.
    """
    if isinstance(board, str):
        board = CellBoard.from_candidates_string(board)
    before = board.copy()
    solution = brute_force(board.to_sudoku_board())

    actual = sorted(strategy(board), key=_position)
    assert board == before, "strategy modified the board"

    for modification in actual:
        row, column = modification.row, modification.column
        value = solution.get(row, column)
        if isinstance(modification, RemoveCandidates):
            assert value not in modification.candidates, (
                f"Cannot remove candidate {value} from [{row}, {column}]"
            )
        elif isinstance(modification, SetValue):
            assert modification.value == value, (
                f"Cannot set value {modification.value} to [{row}, {column}]. Solution is {value}"
            )

    if subset:
        missing = [modification for modification in expected if not _covered(modification, actual)]
        assert not missing, f"missing {missing}"
    else:
        assert actual == sorted(expected, key=_position)
    return actual


@pytest.fixture
def assert_logical_solution():
    """The :func:`check_logical_solution` helper as a fixture."""
    return check_logical_solution
