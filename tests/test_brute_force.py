"""Unit tests for the brute-force solver."""

import pytest
from sudoku_logic.core.board import SudokuBoard
from sudoku_logic.core.exceptions import MultipleSolutionsError, NoSolutionError
from sudoku_logic.solvers import BruteForceSolver, SolverStats, brute_force


PUZZLE = "010040560230615080000800100050020008600781005900060020006008000080473056045090010"
SOLUTION = "817942563234615789569837142451329678623781495978564321796158234182473956345296817"
NO_SOLUTIONS = "710040560230615080000800100050020008600781005900060020006008000080473056045090010"
MULTIPLE_SOLUTIONS = "000000560230615080000800100050020008600781005900060020006008000080473056045090010"


class TestBruteForce:
    """Tests for the brute_force function."""

    def test_single_solution(self):
        board = SudokuBoard.from_string(PUZZLE)
        solution = brute_force(board)
        assert solution.to_string() == SOLUTION
        assert solution.is_solved()

    def test_input_not_modified(self):
        board = SudokuBoard.from_string(PUZZLE)
        brute_force(board)
        assert board.to_string() == PUZZLE

    def test_no_solutions(self):
        with pytest.raises(NoSolutionError, match="No Solutions"):
            brute_force(SudokuBoard.from_string(NO_SOLUTIONS))

    def test_multiple_solutions(self):
        """A second completion is reported rather than the first one returned."""
        with pytest.raises(MultipleSolutionsError, match="Multiple Solutions"):
            brute_force(SudokuBoard.from_string(MULTIPLE_SOLUTIONS))

    def test_already_solved(self):
        board = SudokuBoard.from_string(SOLUTION)
        solution = brute_force(board)
        assert solution == board
        assert solution is not board

    def test_invalid_complete_board(self):
        board = SudokuBoard.from_string(SOLUTION[:-1] + "8")
        with pytest.raises(NoSolutionError):
            brute_force(board)

    def test_duplicate_givens(self):
        """Conflicting givens fail without searching."""
        stats = SolverStats()
        board = SudokuBoard.from_string("55" + PUZZLE[2:])
        with pytest.raises(NoSolutionError):
            brute_force(board, stats)
        assert stats.iterations == 0

    def test_stats_counters(self):
        stats = SolverStats()
        brute_force(SudokuBoard.from_string(PUZZLE), stats)
        assert stats.iterations > 0
        assert stats.nodes_explored > 0


class TestBruteForceSolver:
    """Tests for the BaseSolver wrapper."""

    def test_solve(self):
        solver = BruteForceSolver()
        solution, stats = solver.solve(SudokuBoard.from_string(PUZZLE))
        assert stats.solved
        assert stats.algorithm == "BruteForce"
        assert solution.to_string() == SOLUTION
        assert stats.time_seconds >= 0

    def test_failure_recorded_in_stats(self):
        solver = BruteForceSolver()
        solution, stats = solver.solve(SudokuBoard.from_string(MULTIPLE_SOLUTIONS))
        assert solution is None
        assert not stats.solved
        assert stats.extra["error"] == "MultipleSolutionsError"
        assert stats.to_dict()["error_message"] == "Multiple Solutions"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
