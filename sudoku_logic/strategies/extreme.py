"""
Extreme strategies: Grouped X-Cycles and Alternating Inference Chains.

Both extend the X-Cycles idea. Grouped X-Cycles lets a vertex stand for two
or three cells of one block that share a row or column. Alternating
Inference Chains mix candidates, linking candidates within a cell as well
as equal candidates across cells.
"""

from __future__ import annotations
from collections import defaultdict
from dataclasses import dataclass
from itertools import combinations
from operator import attrgetter
from typing import AbstractSet, Callable, FrozenSet, List, Optional, Sequence, Union

import networkx as nx

from .common import unit_accessors, with_candidate
from ..core.board import BLOCK_SIZE
from ..core.cells import ALL_CANDIDATES, Cell, CellBoard, LocatedCandidate, UnsolvedCell
from ..core.modifications import RemoveCandidates, Removals, SetValue, unique_set_values
from ..graphs.strength import (
    Strength,
    add_link,
    alternating_cycle_exists,
    create_graph,
    get_weak_edges_in_alternating_cycle,
    linked_vertices,
    trim,
)


# Grouped X-Cycles

@dataclass(frozen=True)
class CellNode:
    """A single cell as a Grouped X-Cycles vertex."""
    cell: UnsolvedCell

    @property
    def row(self) -> Optional[int]:
        return self.cell.row

    @property
    def column(self) -> Optional[int]:
        return self.cell.column

    @property
    def block(self) -> int:
        return self.cell.block

    @property
    def cells(self) -> FrozenSet[UnsolvedCell]:
        return frozenset((self.cell,))

    def __str__(self) -> str:
        return f"[{self.cell.row},{self.cell.column}]"


@dataclass(frozen=True)
class _Group:
    cells: FrozenSet[UnsolvedCell]

    def __post_init__(self):
        cells = frozenset(self.cells)
        if not 2 <= len(cells) <= BLOCK_SIZE:
            raise ValueError(
                f"Group can only be constructed with 2 or {BLOCK_SIZE} cells, but got {len(cells)}."
            )
        if len({cell.block for cell in cells}) != 1:
            raise ValueError("Group cells must be in the same block.")
        object.__setattr__(self, "cells", cells)

    @property
    def block(self) -> int:
        return next(iter(self.cells)).block

    def __str__(self) -> str:
        positions = sorted((cell.row, cell.column) for cell in self.cells)
        return "{" + ", ".join(f"[{row},{column}]" for row, column in positions) + "}"


@dataclass(frozen=True)
class RowGroup(_Group):
    """Two or three cells of one block within one row."""

    def __post_init__(self):
        super().__post_init__()
        if len({cell.row for cell in self.cells}) != 1:
            raise ValueError("RowGroup cells must be in the same row.")

    @property
    def row(self) -> Optional[int]:
        return next(iter(self.cells)).row

    @property
    def column(self) -> Optional[int]:
        return None


@dataclass(frozen=True)
class ColumnGroup(_Group):
    """Two or three cells of one block within one column."""

    def __post_init__(self):
        super().__post_init__()
        if len({cell.column for cell in self.cells}) != 1:
            raise ValueError("ColumnGroup cells must be in the same column.")

    @property
    def row(self) -> Optional[int]:
        return None

    @property
    def column(self) -> Optional[int]:
        return next(iter(self.cells)).column


Node = Union[CellNode, RowGroup, ColumnGroup]
Group = Union[RowGroup, ColumnGroup]


def _create_groups(
    candidate: int,
    units: List[List[Cell]],
    group_type: Callable[[FrozenSet[UnsolvedCell]], Group],
) -> List[Group]:
    groups = []
    for unit in units:
        by_block = defaultdict(set)
        for cell in with_candidate(unit, candidate):
            by_block[cell.block].add(cell)
        groups.extend(group_type(frozenset(cells)) for cells in by_block.values() if len(cells) >= 2)
    return groups


def _connect_groups_to_cells(
    graph: nx.MultiGraph,
    candidate: int,
    groups: Sequence[Group],
    get_unit: Callable[[int], List[Cell]],
    get_unit_index: Callable[[Group], int],
) -> None:
    for group in groups:
        others = [
            cell for cell in with_candidate(get_unit(get_unit_index(group)), candidate)
            if cell not in group.cells
        ]
        strength = Strength.STRONG if len(others) == 1 else Strength.WEAK
        for cell in others:
            add_link(graph, group, CellNode(cell), strength)


def _connect_groups_to_groups(
    graph: nx.MultiGraph,
    candidate: int,
    groups: Sequence[Group],
    get_unit: Callable[[int], List[Cell]],
    get_unit_index: Callable[[Group], int],
) -> None:
    for a, b in combinations(groups, 2):
        if get_unit_index(a) != get_unit_index(b) or a.cells & b.cells:
            continue
        others = [
            cell for cell in with_candidate(get_unit(get_unit_index(a)), candidate)
            if cell not in a.cells and cell not in b.cells
        ]
        add_link(graph, a, b, Strength.WEAK if others else Strength.STRONG)


def _node_unit_accessors(board: CellBoard):
    """(index function, unit getter) pairs. Groups have no column or no row index."""
    return (
        (attrgetter("row"), board.row),
        (attrgetter("column"), board.column),
        (attrgetter("block"), board.block),
    )


def build_grouped_graph(board: CellBoard, candidate: int) -> nx.MultiGraph:
    """
    Strength graph of cells and groups for one candidate.

    Cells sharing a unit are strongly linked when the unit holds the
    candidate exactly twice. A group is strongly linked to a cell of its
    row, column or block when that cell is the only other holder of the
    candidate there. Two disjoint groups of a unit are strongly linked when
    nothing outside them holds the candidate.
    """
    graph = create_graph()
    for unit in board.units():
        cells = with_candidate(unit, candidate)
        strength = Strength.STRONG if len(cells) == 2 else Strength.WEAK
        for a, b in combinations(cells, 2):
            add_link(graph, CellNode(a), CellNode(b), strength)

    row_groups = _create_groups(candidate, board.rows(), RowGroup)
    column_groups = _create_groups(candidate, board.columns(), ColumnGroup)
    groups = row_groups + column_groups
    graph.add_nodes_from(groups)

    by_row, by_column, by_block = attrgetter("row"), attrgetter("column"), attrgetter("block")
    _connect_groups_to_cells(graph, candidate, row_groups, board.row, by_row)
    _connect_groups_to_cells(graph, candidate, column_groups, board.column, by_column)
    _connect_groups_to_cells(graph, candidate, groups, board.block, by_block)
    _connect_groups_to_groups(graph, candidate, row_groups, board.row, by_row)
    _connect_groups_to_groups(graph, candidate, column_groups, board.column, by_column)
    _connect_groups_to_groups(graph, candidate, groups, board.block, by_block)
    return graph


def grouped_x_cycles_rule_1(board: CellBoard) -> List[RemoveCandidates]:
    """
    Each weak link of a continuously alternating grouped cycle acts as a
    strong link. Cells that share a unit with both of its vertices, without
    belonging to either, lose the candidate.
    """
    removals = Removals()
    for candidate in ALL_CANDIDATES:
        graph = build_grouped_graph(board, candidate)
        trim(graph)
        for source, target in get_weak_edges_in_alternating_cycle(graph):
            for get_index, get_unit in _node_unit_accessors(board):
                source_index = get_index(source)
                if source_index is None or source_index != get_index(target):
                    continue
                for cell in with_candidate(get_unit(source_index), candidate):
                    if cell not in source.cells and cell not in target.cells:
                        removals.add(cell, candidate)
    return removals.to_list()


def grouped_x_cycles_rule_2(board: CellBoard) -> List[SetValue]:
    """A cell whose two cycle links are both strong must hold the candidate."""
    modifications = []
    for candidate in ALL_CANDIDATES:
        graph = build_grouped_graph(board, candidate)
        for node in graph:
            if isinstance(node, CellNode) and alternating_cycle_exists(graph, node, Strength.STRONG):
                modifications.append(SetValue.of(node.cell, candidate))
    return unique_set_values(modifications)


def grouped_x_cycles_rule_3(board: CellBoard) -> List[RemoveCandidates]:
    """A cell whose two cycle links are both weak cannot hold the candidate."""
    removals = Removals()
    for candidate in ALL_CANDIDATES:
        graph = build_grouped_graph(board, candidate)
        for node in graph:
            if isinstance(node, CellNode) and alternating_cycle_exists(graph, node, Strength.WEAK):
                removals.add(node.cell, candidate)
    return removals.to_list()


# Alternating Inference Chains

def build_aic_graph(board: CellBoard) -> nx.MultiGraph:
    """
    Strength graph of every candidate on the board.

    Equal candidates of a unit are strongly linked when the unit holds that
    candidate exactly twice and weakly linked otherwise. The candidates of
    one cell are strongly linked when the cell has exactly two of them and
    weakly linked otherwise.
    """
    graph = create_graph()
    for unit in board.units():
        for candidate in ALL_CANDIDATES:
            cells = with_candidate(unit, candidate)
            strength = Strength.STRONG if len(cells) == 2 else Strength.WEAK
            for a, b in combinations(cells, 2):
                add_link(graph, LocatedCandidate(a, candidate), LocatedCandidate(b, candidate), strength)
    for cell in board.unsolved_cells():
        strength = Strength.STRONG if len(cell.candidates) == 2 else Strength.WEAK
        for a, b in combinations(sorted(cell.candidates), 2):
            add_link(graph, LocatedCandidate(cell, a), LocatedCandidate(cell, b), strength)
    return graph


def _aic_cycle_exists(
    graph: nx.MultiGraph,
    vertex: LocatedCandidate,
    adjacent_edges_type: Strength,
) -> bool:
    """
    Like :func:`alternating_cycle_exists`, but a candidate may only reappear
    in the chain while its occurrences are consecutive.
    """
    adjacent = [
        neighbor
        for _, neighbor, strength in graph.edges(vertex, keys=True)
        if strength is adjacent_edges_type
    ]
    for start, end in combinations(adjacent, 2):
        visited_candidates = {vertex.candidate, start.candidate} - {end.candidate}
        if _aic_path_exists(
            graph,
            adjacent_edges_type,
            end,
            start,
            adjacent_edges_type.opposite,
            frozenset((vertex, start)),
            frozenset(visited_candidates),
        ):
            return True
    return False


def _aic_path_exists(
    graph: nx.MultiGraph,
    adjacent_edges_type: Strength,
    end: LocatedCandidate,
    current: LocatedCandidate,
    next_type: Strength,
    visited: AbstractSet[LocatedCandidate],
    visited_candidates: FrozenSet[int],
) -> bool:
    next_vertices = {
        neighbor
        for neighbor in linked_vertices(graph, current, next_type)
        if neighbor.candidate == current.candidate or neighbor.candidate not in visited_candidates
    }
    if next_type is adjacent_edges_type.opposite and end in next_vertices:
        return True
    for next_vertex in next_vertices - visited - {end}:
        next_candidates = visited_candidates
        if next_vertex.candidate != current.candidate:
            next_candidates = visited_candidates | {next_vertex.candidate}
        if _aic_path_exists(
            graph,
            adjacent_edges_type,
            end,
            next_vertex,
            next_type.opposite,
            visited | {next_vertex},
            next_candidates,
        ):
            return True
    return False


def alternating_inference_chains_rule_1(board: CellBoard) -> List[RemoveCandidates]:
    """
    Weak links of a continuously alternating chain act as strong links.

    A weak link inside one cell leaves only its two candidates in that cell.
    A weak link between two cells removes the candidate from every other
    cell of the units they share.
    """
    graph = build_aic_graph(board)
    trim(graph)
    removals = Removals()
    for source, target in get_weak_edges_in_alternating_cycle(graph):
        if source.cell == target.cell:
            removals.add_all(source.cell, source.cell.candidates - {source.candidate, target.candidate})
            continue
        for get_index, get_unit in unit_accessors(board):
            unit_index = get_index(source.cell)
            if unit_index != get_index(target.cell):
                continue
            for cell in with_candidate(get_unit(unit_index), source.candidate):
                if cell != source.cell and cell != target.cell:
                    removals.add(cell, source.candidate)
    return removals.to_list()


def alternating_inference_chains_rule_2(board: CellBoard) -> List[SetValue]:
    """A candidate whose two chain links are both strong is the solution of its cell."""
    graph = build_aic_graph(board)
    trim(graph)
    return unique_set_values(
        SetValue.of(vertex.cell, vertex.candidate)
        for vertex in graph
        if _aic_cycle_exists(graph, vertex, Strength.STRONG)
    )


def alternating_inference_chains_rule_3(board: CellBoard) -> List[RemoveCandidates]:
    """A candidate whose two chain links are both weak is removed from its cell."""
    graph = build_aic_graph(board)
    removals = Removals()
    for vertex in graph:
        if _aic_cycle_exists(graph, vertex, Strength.WEAK):
            removals.add(vertex.cell, vertex.candidate)
    return removals.to_list()
