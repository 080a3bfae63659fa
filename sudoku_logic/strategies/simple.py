"""
Simple strategies: singles, naked and hidden subsets, intersections.

Every strategy takes a :class:`CellBoard`, leaves it untouched and returns
the modifications it found, at most one per cell.
"""

from __future__ import annotations
from itertools import combinations
from typing import List

from .common import column_index, row_index, unsolved, with_candidate
from ..core.cells import ALL_CANDIDATES, CellBoard, SolvedCell
from ..core.modifications import RemoveCandidates, Removals, SetValue, unique_set_values


def prune_candidates(board: CellBoard) -> List[RemoveCandidates]:
    """Remove every candidate that is already the value of a solved peer."""
    removals = Removals()
    for cell in board.unsolved_cells():
        peers = board.row(cell.row) + board.column(cell.column) + board.block(cell.block)
        solved_values = {peer.value for peer in peers if isinstance(peer, SolvedCell)}
        removals.add_all(cell, solved_values & cell.candidates)
    return removals.to_list()


def naked_singles(board: CellBoard) -> List[SetValue]:
    """An unsolved cell with exactly one candidate takes that candidate."""
    return [
        SetValue.of(cell, next(iter(cell.candidates)))
        for cell in board.unsolved_cells()
        if len(cell.candidates) == 1
    ]


def hidden_singles(board: CellBoard) -> List[SetValue]:
    """
    A candidate that appears in only one cell of a unit is placed there.

    A cell can be the hidden single of its row, column and block at once;
    it is reported once.
    """
    modifications = []
    for unit in board.units():
        for candidate in ALL_CANDIDATES:
            cells = with_candidate(unit, candidate)
            if len(cells) == 1:
                modifications.append(SetValue.of(cells[0], candidate))
    return unique_set_values(modifications)


def _naked_subsets(board: CellBoard, size: int) -> List[RemoveCandidates]:
    removals = Removals()
    for unit in board.units():
        cells = unsolved(unit)
        for subset in combinations(cells, size):
            union = frozenset().union(*(cell.candidates for cell in subset))
            if len(union) != size:
                continue
            for cell in cells:
                if cell not in subset:
                    removals.add_all(cell, cell.candidates & union)
    return removals.to_list()


def naked_pairs(board: CellBoard) -> List[RemoveCandidates]:
    """
    Two cells of a unit with the same two candidates hold those candidates
    between them, so no other cell of the unit can.
    """
    return _naked_subsets(board, 2)


def naked_triples(board: CellBoard) -> List[RemoveCandidates]:
    """Three cells of a unit with three candidates among them."""
    return _naked_subsets(board, 3)


def naked_quads(board: CellBoard) -> List[RemoveCandidates]:
    """Four cells of a unit with four candidates among them."""
    return _naked_subsets(board, 4)


def _hidden_subsets(board: CellBoard, size: int) -> List[RemoveCandidates]:
    removals = Removals()
    for unit in board.units():
        cells = unsolved(unit)
        for subset in combinations(sorted(ALL_CANDIDATES), size):
            chosen = frozenset(subset)
            holding = [cell for cell in cells if cell.candidates & chosen]
            if len(holding) != size:
                continue
            union = frozenset().union(*(cell.candidates for cell in holding))
            if chosen <= union:
                for cell in holding:
                    removals.add_all(cell, cell.candidates - chosen)
    return removals.to_list()


def hidden_pairs(board: CellBoard) -> List[RemoveCandidates]:
    """
    If two candidates of a unit only appear in the same two cells, those
    cells can drop every other candidate.
    """
    return _hidden_subsets(board, 2)


def hidden_triples(board: CellBoard) -> List[RemoveCandidates]:
    return _hidden_subsets(board, 3)


def hidden_quads(board: CellBoard) -> List[RemoveCandidates]:
    return _hidden_subsets(board, 4)


def pointing_pairs_pointing_triples(board: CellBoard) -> List[RemoveCandidates]:
    """
    If a candidate of a block is confined to one row (or column), it must be
    placed in the block, so the rest of that row (or column) loses it.
    """
    removals = Removals()
    for index, block in enumerate(board.blocks()):
        for candidate in ALL_CANDIDATES:
            cells = with_candidate(block, candidate)
            for get_index, get_unit in ((row_index, board.row), (column_index, board.column)):
                unit_indices = {get_index(cell) for cell in cells}
                if len(unit_indices) != 1:
                    continue
                for cell in with_candidate(get_unit(unit_indices.pop()), candidate):
                    if cell.block != index:
                        removals.add(cell, candidate)
    return removals.to_list()


def box_line_reduction(board: CellBoard) -> List[RemoveCandidates]:
    """
    If a candidate of a row (or column) is confined to one block, the rest
    of that block loses it.
    """
    removals = Removals()
    for candidate in ALL_CANDIDATES:
        for get_index, units in ((row_index, board.rows()), (column_index, board.columns())):
            for unit in units:
                cells = with_candidate(unit, candidate)
                block_indices = {cell.block for cell in cells}
                if len(block_indices) != 1:
                    continue
                unit_index = get_index(cells[0])
                for cell in with_candidate(board.block(block_indices.pop()), candidate):
                    if get_index(cell) != unit_index:
                        removals.add(cell, candidate)
    return removals.to_list()
