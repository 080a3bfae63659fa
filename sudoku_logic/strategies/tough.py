"""Tough strategies: fish, wings and simple coloring."""

from __future__ import annotations
from itertools import combinations
from typing import Callable, List

import networkx as nx

from .common import column_index, row_index, with_candidate
from ..core.cells import ALL_CANDIDATES, Cell, CellBoard, UnsolvedCell
from ..core.modifications import RemoveCandidates, Removals
from ..graphs.coloring import VertexColor, color_to_lists, color_to_map, connected_components


def fish(board: CellBoard, size: int) -> List[RemoveCandidates]:
    """
    Generic fish of the given size (2 X-Wing, 3 Swordfish, 4 Jellyfish).

    For ``size`` rows where a candidate appears in 2 to ``size`` cells each,
    and those cells fall in exactly ``size`` columns, the candidate is placed
    in those columns within those rows. The rest of the columns lose it.
    The same holds with rows and columns swapped.
    """
    removals = Removals()
    for candidate in ALL_CANDIDATES:
        _fish(removals, candidate, size, board.rows(), board.column, column_index)
        _fish(removals, candidate, size, board.columns(), board.row, row_index)
    return removals.to_list()


def _fish(
    removals: Removals,
    candidate: int,
    size: int,
    units: List[List[Cell]],
    get_other_unit: Callable[[int], List[Cell]],
    get_other_unit_index: Callable[[Cell], int],
) -> None:
    eligible = []
    for unit in units:
        cells = with_candidate(unit, candidate)
        if 2 <= len(cells) <= size:
            eligible.append(cells)
    for chosen in combinations(eligible, size):
        fish_cells = {cell for cells in chosen for cell in cells}
        other_indices = {get_other_unit_index(cell) for cell in fish_cells}
        if len(other_indices) != size:
            continue
        for index in other_indices:
            for cell in with_candidate(get_other_unit(index), candidate):
                if cell not in fish_cells:
                    removals.add(cell, candidate)


def x_wing(board: CellBoard) -> List[RemoveCandidates]:
    return fish(board, 2)


def swordfish(board: CellBoard) -> List[RemoveCandidates]:
    return fish(board, 3)


def y_wing(board: CellBoard) -> List[RemoveCandidates]:
    """
    A hinge and two wings, all with two candidates and three candidates in
    total. The hinge sees both wings and shares a different candidate with
    each, so the candidate common to the wings is the solution of one of
    them. Any cell seeing both wings loses that candidate.
    """
    removals = Removals()
    bivalue = [cell for cell in board.unsolved_cells() if len(cell.candidates) == 2]
    for a, b, c in combinations(bivalue, 3):
        if len(a.candidates | b.candidates | c.candidates) != 3:
            continue
        for hinge, wing_a, wing_b in ((a, b, c), (b, a, c), (c, a, b)):
            _try_hinge(board, removals, hinge, wing_a, wing_b)
    return removals.to_list()


def _try_hinge(
    board: CellBoard,
    removals: Removals,
    hinge: UnsolvedCell,
    wing_a: UnsolvedCell,
    wing_b: UnsolvedCell,
) -> None:
    wing_candidates = wing_a.candidates & wing_b.candidates
    if (
        hinge.is_in_same_unit(wing_a)
        and hinge.is_in_same_unit(wing_b)
        and len(hinge.candidates & wing_a.candidates) == 1
        and len(hinge.candidates & wing_b.candidates) == 1
        and len(wing_candidates) == 1
    ):
        candidate = next(iter(wing_candidates))
        for cell in board.unsolved_cells():
            if (
                cell != wing_a
                and cell != wing_b
                and candidate in cell.candidates
                and cell.is_in_same_unit(wing_a)
                and cell.is_in_same_unit(wing_b)
            ):
                removals.add(cell, candidate)


def xyz_wing(board: CellBoard) -> List[RemoveCandidates]:
    """
    A hinge with three candidates sees two bivalue wings, the three cells
    hold three candidates in total and the wings share exactly one. That
    candidate is the solution of one of the three cells, so any cell that
    sees all three loses it.
    """
    removals = Removals()
    cells = board.unsolved_cells()
    for hinge in cells:
        if len(hinge.candidates) != 3:
            continue
        wings = [
            cell for cell in cells
            if len(cell.candidates) == 2 and cell.is_in_same_unit(hinge)
        ]
        for wing_a, wing_b in combinations(wings, 2):
            if len(hinge.candidates | wing_a.candidates | wing_b.candidates) != 3:
                continue
            common = wing_a.candidates & wing_b.candidates
            if len(common) != 1:
                continue
            candidate = next(iter(common))
            for cell in cells:
                if (
                    cell not in (hinge, wing_a, wing_b)
                    and candidate in cell.candidates
                    and cell.is_in_same_unit(hinge)
                    and cell.is_in_same_unit(wing_a)
                    and cell.is_in_same_unit(wing_b)
                ):
                    removals.add(cell, candidate)
    return removals.to_list()


def _strong_link_components(board: CellBoard, candidate: int) -> List[nx.Graph]:
    """Cells joined wherever a unit holds the candidate exactly twice."""
    graph = nx.Graph()
    for unit in board.units():
        cells = with_candidate(unit, candidate)
        if len(cells) == 2:
            graph.add_edge(cells[0], cells[1])
    return connected_components(graph)


def simple_coloring_rule_2(board: CellBoard) -> List[RemoveCandidates]:
    """
    Twice in a unit: if two cells of the same color share a unit, that color
    is false and the candidate is removed from every cell of that color.
    """
    removals = Removals()
    for candidate in ALL_CANDIDATES:
        for graph in _strong_link_components(board, candidate):
            colors = color_to_map(graph)
            for a, b in combinations(list(graph), 2):
                if colors[a] is colors[b] and a.is_in_same_unit(b):
                    for cell, color in colors.items():
                        if color is colors[a]:
                            removals.add(cell, candidate)
                    break
    return removals.to_list()


def simple_coloring_rule_4(board: CellBoard) -> List[RemoveCandidates]:
    """
    Two colors elsewhere: a cell outside the chain that sees both colors
    cannot hold the candidate, since one of the two colors is true.
    """
    removals = Removals()
    for candidate in ALL_CANDIDATES:
        for graph in _strong_link_components(board, candidate):
            colors = color_to_lists(graph)
            for cell in with_candidate(board.cells(), candidate):
                if cell in graph:
                    continue
                sees_one = any(cell.is_in_same_unit(v) for v in colors[VertexColor.COLOR_ONE])
                sees_two = any(cell.is_in_same_unit(v) for v in colors[VertexColor.COLOR_TWO])
                if sees_one and sees_two:
                    removals.add(cell, candidate)
    return removals.to_list()
