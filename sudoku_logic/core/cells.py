"""Candidate-level board model used by the logical strategies."""

from __future__ import annotations
from dataclasses import dataclass
from typing import FrozenSet, Iterable, Iterator, List, Sequence, Union

from .board import (
    BLOCK_SIZE,
    UNIT_SIZE,
    UNIT_SIZE_SQUARED,
    SudokuBoard,
    get_block_index,
)
from .exceptions import InvalidDimensionsError


ALL_CANDIDATES: FrozenSet[int] = frozenset(range(1, UNIT_SIZE + 1))


@dataclass(frozen=True)
class _Located:
    row: int
    column: int

    def __post_init__(self):
        if not (0 <= self.row < UNIT_SIZE and 0 <= self.column < UNIT_SIZE):
            raise ValueError(f"[{self.row}, {self.column}] is outside the board")

    @property
    def block(self) -> int:
        return get_block_index(self.row, self.column)

    def is_in_same_unit(self, other: _Located) -> bool:
        """True if both cells share a row, a column or a block."""
        return self.row == other.row or self.column == other.column or self.block == other.block


@dataclass(frozen=True)
class SolvedCell(_Located):
    value: int

    def __post_init__(self):
        super().__post_init__()
        if self.value not in ALL_CANDIDATES:
            raise ValueError(f"Value must be 1-{UNIT_SIZE}, got {self.value}")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class UnsolvedCell(_Located):
    candidates: FrozenSet[int] = ALL_CANDIDATES

    def __post_init__(self):
        super().__post_init__()
        candidates = frozenset(self.candidates)
        if not candidates:
            raise ValueError(f"[{self.row}, {self.column}] must have at least one candidate")
        if not candidates <= ALL_CANDIDATES:
            raise ValueError(f"Invalid candidates {sorted(candidates)} for [{self.row}, {self.column}]")
        object.__setattr__(self, "candidates", candidates)

    def __str__(self) -> str:
        return "{" + "".join(str(candidate) for candidate in sorted(self.candidates)) + "}"


Cell = Union[SolvedCell, UnsolvedCell]


@dataclass(frozen=True)
class LocatedCandidate:
    """A candidate in a specific unsolved cell, the vertex type of most chain graphs."""
    cell: UnsolvedCell
    candidate: int

    def __str__(self) -> str:
        return f"[{self.cell.row}, {self.cell.column}] : {self.candidate}"


class CellBoard:
    """
    A 9x9 grid of solved and unsolved cells.

    Strategies only read this board. The logical solver is the one caller
    that replaces cells through :meth:`set`.
    """

    def __init__(self, rows: Sequence[Sequence[Cell]]):
        if len(rows) != UNIT_SIZE or any(len(row) != UNIT_SIZE for row in rows):
            raise InvalidDimensionsError(
                f"Board must have {UNIT_SIZE} rows of {UNIT_SIZE} cells each"
            )
        self._rows = [list(row) for row in rows]

    def get(self, row: int, column: int) -> Cell:
        return self._rows[row][column]

    def set(self, row: int, column: int, cell: Cell) -> None:
        if (cell.row, cell.column) != (row, column):
            raise ValueError(f"Cell for [{cell.row}, {cell.column}] placed at [{row}, {column}]")
        self._rows[row][column] = cell

    def row(self, index: int) -> List[Cell]:
        return list(self._rows[index])

    def column(self, index: int) -> List[Cell]:
        return [row[index] for row in self._rows]

    def block(self, index: int) -> List[Cell]:
        """Cells of a block, row-major. Blocks are numbered row-major too."""
        top = (index // BLOCK_SIZE) * BLOCK_SIZE
        left = (index % BLOCK_SIZE) * BLOCK_SIZE
        return [
            self._rows[row][column]
            for row in range(top, top + BLOCK_SIZE)
            for column in range(left, left + BLOCK_SIZE)
        ]

    def rows(self) -> List[List[Cell]]:
        return [self.row(i) for i in range(UNIT_SIZE)]

    def columns(self) -> List[List[Cell]]:
        return [self.column(i) for i in range(UNIT_SIZE)]

    def blocks(self) -> List[List[Cell]]:
        return [self.block(i) for i in range(UNIT_SIZE)]

    def units(self) -> List[List[Cell]]:
        """The 27 peer groups: rows, then columns, then blocks."""
        return self.rows() + self.columns() + self.blocks()

    def cells(self) -> List[Cell]:
        return [cell for row in self._rows for cell in row]

    def unsolved_cells(self) -> List[UnsolvedCell]:
        return [cell for cell in self.cells() if isinstance(cell, UnsolvedCell)]

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells())

    def copy(self) -> CellBoard:
        return CellBoard(self._rows)

    def to_sudoku_board(self) -> SudokuBoard:
        """Digits of the solved cells, 0 everywhere else."""
        return SudokuBoard.from_rows([
            [cell.value if isinstance(cell, SolvedCell) else 0 for cell in row]
            for row in self._rows
        ])

    def to_simple_string(self) -> str:
        return "".join(
            str(cell.value) if isinstance(cell, SolvedCell) else "0" for cell in self.cells()
        )

    def to_candidates_string(self) -> str:
        return "".join(str(cell) for cell in self.cells())

    @classmethod
    def from_sudoku_board(cls, board: SudokuBoard) -> CellBoard:
        """Given digits become solved cells, every other cell starts with all nine candidates."""
        return cls([
            [
                SolvedCell(row, column, board.get(row, column)) if not board.is_empty(row, column)
                else UnsolvedCell(row, column)
                for column in range(UNIT_SIZE)
            ]
            for row in range(UNIT_SIZE)
        ])

    @classmethod
    def from_simple_string(cls, s: str) -> CellBoard:
        return cls.from_sudoku_board(SudokuBoard.from_string(s))

    @classmethod
    def from_candidates_string(cls, s: str) -> CellBoard:
        """
        Parse a board where unsolved cells list their candidates in braces.

        Example: ``{59}241{35}...`` starts with an unsolved cell holding 5 and 9
        followed by the solved cells 2, 4 and 1. Whitespace is ignored.

        Raises:
            ValueError: on unbalanced or empty braces, bad characters, or a
                cell count other than 81.
        """
        tokens = list(_tokenize_candidates(s))
        if len(tokens) != UNIT_SIZE_SQUARED:
            raise ValueError(f"Found {len(tokens)} cells, required {UNIT_SIZE_SQUARED}.")
        rows = []
        for row in range(UNIT_SIZE):
            cells = []
            for column in range(UNIT_SIZE):
                token = tokens[row * UNIT_SIZE + column]
                if isinstance(token, frozenset):
                    cells.append(UnsolvedCell(row, column, token))
                else:
                    cells.append(SolvedCell(row, column, token))
            rows.append(cells)
        return cls(rows)

    def __str__(self) -> str:
        """Pretty-print the board, unsolved cells shown with their candidates."""
        width = max(len(str(cell)) for cell in self.cells())
        horizontal_sep = '+' + ('-' * ((width + 1) * BLOCK_SIZE + 1) + '+') * BLOCK_SIZE
        lines = []
        for i, row in enumerate(self._rows):
            if i % BLOCK_SIZE == 0:
                lines.append(horizontal_sep)
            row_str = '|'
            for j, cell in enumerate(row):
                row_str += ' ' + str(cell).ljust(width)
                if (j + 1) % BLOCK_SIZE == 0:
                    row_str += ' |'
            lines.append(row_str)
        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"CellBoard(unsolved={len(self.unsolved_cells())})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CellBoard):
            return False
        return self._rows == other._rows


def _tokenize_candidates(s: str) -> Iterable[Union[int, FrozenSet[int]]]:
    index = 0
    while index < len(s):
        ch = s[index]
        if ch.isspace():
            index += 1
        elif ch == '{':
            closing = s.find('}', index + 1)
            if closing == -1:
                raise ValueError("Unmatched '{'.")
            inside = s[index + 1:closing]
            if not inside:
                raise ValueError('Empty "{}".')
            if '{' in inside:
                raise ValueError("Nested '{'.")
            yield frozenset(_parse_digit(c) for c in inside)
            index = closing + 1
        elif ch == '}':
            raise ValueError("Unmatched '}'.")
        else:
            yield _parse_digit(ch)
            index += 1


def _parse_digit(ch: str) -> int:
    if ch < '1' or ch > '9':
        raise ValueError(f"Invalid character {ch!r}, expected 1-9")
    return int(ch)
