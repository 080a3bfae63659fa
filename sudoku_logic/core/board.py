"""Digit-level Sudoku board: the input puzzle and the brute-force solution."""

from __future__ import annotations
import numpy as np
from typing import List, Optional, Sequence, Set, Tuple

from .exceptions import InvalidDimensionsError


UNIT_SIZE = 9
BLOCK_SIZE = 3
UNIT_SIZE_SQUARED = UNIT_SIZE * UNIT_SIZE


def get_block_index(row: int, col: int) -> int:
    """Get the block index (0 to 8) for a cell, numbered row-major."""
    return (row // BLOCK_SIZE) * BLOCK_SIZE + col // BLOCK_SIZE


class SudokuBoard:
    """
    A 9x9 grid of digits where 0 means the cell is not known.

    This is the board the solvers take as input and hand back as output.
    Candidate-level reasoning happens on :class:`~sudoku_logic.core.cells.CellBoard`.
    """

    def __init__(self, grid: Optional[np.ndarray] = None):
        """
        Initialize a board.

        Args:
            grid: Optional 9x9 grid of digits. If None, creates an empty board.
        """
        if grid is not None:
            if grid.shape != (UNIT_SIZE, UNIT_SIZE):
                raise InvalidDimensionsError(
                    f"Grid shape must be ({UNIT_SIZE}, {UNIT_SIZE}), got {grid.shape}"
                )
            if grid.min() < 0 or grid.max() > UNIT_SIZE:
                raise ValueError(f"Values must be 0-{UNIT_SIZE}")
            self.grid = grid.copy().astype(np.int32)
        else:
            self.grid = np.zeros((UNIT_SIZE, UNIT_SIZE), dtype=np.int32)

    def copy(self) -> SudokuBoard:
        """Create a deep copy of the board."""
        return SudokuBoard(self.grid)

    def get(self, row: int, col: int) -> int:
        """Get value at position (row, col). 0 means empty."""
        return int(self.grid[row, col])

    def set(self, row: int, col: int, value: int) -> None:
        """Set value at position (row, col). Use 0 to clear."""
        if value < 0 or value > UNIT_SIZE:
            raise ValueError(f"Value must be 0-{UNIT_SIZE}, got {value}")
        self.grid[row, col] = value

    def is_empty(self, row: int, col: int) -> bool:
        return self.grid[row, col] == 0

    def get_row(self, row: int) -> np.ndarray:
        return self.grid[row, :]

    def get_col(self, col: int) -> np.ndarray:
        return self.grid[:, col]

    def get_block(self, index: int) -> np.ndarray:
        """Get all values in the block with the given index."""
        top = (index // BLOCK_SIZE) * BLOCK_SIZE
        left = (index % BLOCK_SIZE) * BLOCK_SIZE
        return self.grid[top:top + BLOCK_SIZE, left:left + BLOCK_SIZE].flatten()

    def get_candidates(self, row: int, col: int) -> Set[int]:
        """
        Get the digits that do not clash with any peer of an empty cell.

        Returns:
            Set of values 1-9, or an empty set if the cell is filled.
        """
        if not self.is_empty(row, col):
            return set()
        used = set(self.get_row(row).tolist())
        used |= set(self.get_col(col).tolist())
        used |= set(self.get_block(get_block_index(row, col)).tolist())
        return set(range(1, UNIT_SIZE + 1)) - used

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """Get list of all empty cell positions, row-major."""
        rows, cols = np.nonzero(self.grid == 0)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def count_empty(self) -> int:
        return int(np.sum(self.grid == 0))

    def count_filled(self) -> int:
        return int(np.sum(self.grid != 0))

    def is_complete(self) -> bool:
        return self.count_empty() == 0

    def is_valid(self) -> bool:
        """
        Check that no digit is repeated within a row, column or block.
        Empty cells are ignored, so a partial board can be valid.
        """
        units = [self.get_row(i) for i in range(UNIT_SIZE)]
        units += [self.get_col(i) for i in range(UNIT_SIZE)]
        units += [self.get_block(i) for i in range(UNIT_SIZE)]
        for unit in units:
            filled = unit[unit != 0]
            if len(filled) != len(np.unique(filled)):
                return False
        return True

    def is_solved(self) -> bool:
        """Check if the puzzle is completely and correctly solved."""
        return self.is_complete() and self.is_valid()

    def to_string(self) -> str:
        """Convert board to an 81 character string with 0 for empty cells."""
        return ''.join(str(value) for value in self.grid.flatten())

    @classmethod
    def from_string(cls, s: str) -> SudokuBoard:
        """
        Create a board from a string representation.

        Args:
            s: String of 81 characters, row-major. 0 or . for empty, 1-9 for values.
        """
        if len(s) != UNIT_SIZE_SQUARED:
            raise ValueError(f"String length must be {UNIT_SIZE_SQUARED}, got {len(s)}")
        values = []
        for c in s:
            if c == '.':
                values.append(0)
            elif c.isdigit():
                values.append(int(c))
            else:
                raise ValueError(f"Invalid character {c!r} in board string")
        return cls(np.array(values, dtype=np.int32).reshape(UNIT_SIZE, UNIT_SIZE))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> SudokuBoard:
        """Create a board from nine rows of nine digits each."""
        if len(rows) != UNIT_SIZE or any(len(row) != UNIT_SIZE for row in rows):
            raise InvalidDimensionsError(
                f"Board must have {UNIT_SIZE} rows of {UNIT_SIZE} cells each"
            )
        return cls(np.array(rows, dtype=np.int32))

    def __str__(self) -> str:
        """Pretty-print the board."""
        lines = []
        horizontal_sep = '+' + ('-' * (BLOCK_SIZE * 2 + 1) + '+') * BLOCK_SIZE

        for i in range(UNIT_SIZE):
            if i % BLOCK_SIZE == 0:
                lines.append(horizontal_sep)
            row_str = '|'
            for j in range(UNIT_SIZE):
                val = self.grid[i, j]
                row_str += ' .' if val == 0 else f' {val}'
                if (j + 1) % BLOCK_SIZE == 0:
                    row_str += ' |'
            lines.append(row_str)

        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"SudokuBoard(filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuBoard):
            return False
        return np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return hash(self.to_string())
