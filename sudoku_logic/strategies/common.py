"""Small helpers shared by the strategy modules."""

from __future__ import annotations
from typing import Iterable, List

from ..core.cells import Cell, CellBoard, UnsolvedCell


def unsolved(unit: Iterable[Cell]) -> List[UnsolvedCell]:
    return [cell for cell in unit if isinstance(cell, UnsolvedCell)]


def with_candidate(unit: Iterable[Cell], candidate: int) -> List[UnsolvedCell]:
    """Unsolved cells of ``unit`` that still have ``candidate``."""
    return [cell for cell in unsolved(unit) if candidate in cell.candidates]


def row_index(cell: Cell) -> int:
    return cell.row


def column_index(cell: Cell) -> int:
    return cell.column


def block_index(cell: Cell) -> int:
    return cell.block


def unit_accessors(board: CellBoard):
    """(index function, unit getter) pairs for rows, columns and blocks."""
    return (
        (row_index, board.row),
        (column_index, board.column),
        (block_index, board.block),
    )
