"""
Diabolical strategies: X-Cycles, XY-Chains, 3D Medusa and Jellyfish.

X-Cycles and XY-Chains search strength graphs for alternating chains.
Medusa colors the strong links of every candidate at once.
"""

from __future__ import annotations
from collections import defaultdict
from itertools import combinations
from typing import Dict, Iterable, List, Optional

import networkx as nx

from .common import unit_accessors, with_candidate
from .tough import fish
from ..core.cells import ALL_CANDIDATES, CellBoard, LocatedCandidate, UnsolvedCell
from ..core.modifications import RemoveCandidates, Removals, SetValue, unique_set_values
from ..graphs.coloring import VertexColor, color_to_lists, color_to_map, connected_components
from ..graphs.strength import (
    Strength,
    add_link,
    alternating_cycle_exists,
    alternating_path_exists,
    create_graph,
    get_weak_edges_in_alternating_cycle,
    trim,
)


# X-Cycles

def _x_cycles_graph(board: CellBoard, candidate: int) -> nx.MultiGraph:
    """
    Strong links join the two cells of a unit holding the candidate exactly
    twice. Every other pair of linked cells sharing a unit is weakly linked.
    """
    graph = create_graph()
    for unit in board.units():
        cells = with_candidate(unit, candidate)
        if len(cells) == 2:
            add_link(graph, cells[0], cells[1], Strength.STRONG)
    for a, b in combinations(list(graph), 2):
        if a.is_in_same_unit(b) and not graph.has_edge(a, b):
            add_link(graph, a, b, Strength.WEAK)
    return graph


def _add_outside_weak_links(graph: nx.MultiGraph, board: CellBoard, candidate: int) -> None:
    """Weakly link cells outside the graph to every vertex they can see."""
    vertices = list(graph)
    for cell in with_candidate(board.cells(), candidate):
        if cell in graph:
            continue
        for vertex in vertices:
            if vertex.is_in_same_unit(cell):
                add_link(graph, vertex, cell, Strength.WEAK)


def x_cycles_rule_1(board: CellBoard) -> List[RemoveCandidates]:
    """
    A continuously alternating cycle turns each of its weak links strong.
    Any other cell sharing a unit with both ends of such a link loses the
    candidate.
    """
    removals = Removals()
    for candidate in ALL_CANDIDATES:
        graph = _x_cycles_graph(board, candidate)
        trim(graph)
        for source, target in get_weak_edges_in_alternating_cycle(graph):
            for get_index, get_unit in unit_accessors(board):
                if get_index(source) != get_index(target):
                    continue
                for cell in with_candidate(get_unit(get_index(source)), candidate):
                    if cell != source and cell != target:
                        removals.add(cell, candidate)
    return removals.to_list()


def x_cycles_rule_2(board: CellBoard) -> List[SetValue]:
    """
    A cycle whose two links at one cell are both strong is a contradiction
    unless that cell holds the candidate, so the cell is solved with it.
    """
    modifications = []
    for candidate in ALL_CANDIDATES:
        graph = _x_cycles_graph(board, candidate)
        for cell in graph:
            if alternating_cycle_exists(graph, cell, Strength.STRONG):
                modifications.append(SetValue.of(cell, candidate))
    return unique_set_values(modifications)


def x_cycles_rule_3(board: CellBoard) -> List[RemoveCandidates]:
    """
    A cycle whose two links at one cell are both weak is a contradiction
    if that cell holds the candidate, so the cell loses it.
    """
    removals = Removals()
    for candidate in ALL_CANDIDATES:
        graph = _x_cycles_graph(board, candidate)
        _add_outside_weak_links(graph, board, candidate)
        for cell in graph:
            if alternating_cycle_exists(graph, cell, Strength.WEAK):
                removals.add(cell, candidate)
    return removals.to_list()


# XY-Chains

def xy_chains(board: CellBoard) -> List[RemoveCandidates]:
    """
    A chain of bivalue cells that starts and ends on the same candidate
    forces that candidate into one of the two end cells. Any cell seeing
    both ends loses it.

    Inside a cell the two candidates are strongly linked. Equal candidates
    of cells sharing a unit are weakly linked.
    """
    graph = create_graph()
    for cell in board.unsolved_cells():
        if len(cell.candidates) == 2:
            a, b = sorted(cell.candidates)
            add_link(graph, LocatedCandidate(cell, a), LocatedCandidate(cell, b), Strength.STRONG)
    by_candidate: Dict[int, List[LocatedCandidate]] = defaultdict(list)
    for vertex in graph:
        by_candidate[vertex.candidate].append(vertex)
    for vertices in by_candidate.values():
        for a, b in combinations(vertices, 2):
            if a.cell.is_in_same_unit(b.cell):
                add_link(graph, a, b, Strength.WEAK)

    removals = Removals()
    for candidate, vertices in sorted(by_candidate.items()):
        for a, b in combinations(vertices, 2):
            visible = [
                cell for cell in with_candidate(board.cells(), candidate)
                if cell != a.cell
                and cell != b.cell
                and cell.is_in_same_unit(a.cell)
                and cell.is_in_same_unit(b.cell)
            ]
            if visible and alternating_path_exists(graph, a, b):
                for cell in visible:
                    removals.add(cell, candidate)
    return removals.to_list()


# 3D Medusa

def _medusa_components(board: CellBoard) -> List[nx.Graph]:
    """
    Strong links across all candidates: the two candidates of a bivalue
    cell and the two cells of a unit holding a candidate exactly twice.
    """
    graph = nx.Graph()
    for cell in board.unsolved_cells():
        if len(cell.candidates) == 2:
            a, b = sorted(cell.candidates)
            graph.add_edge(LocatedCandidate(cell, a), LocatedCandidate(cell, b))
    for candidate in ALL_CANDIDATES:
        for unit in board.units():
            cells = with_candidate(unit, candidate)
            if len(cells) == 2:
                graph.add_edge(LocatedCandidate(cells[0], candidate), LocatedCandidate(cells[1], candidate))
    return connected_components(graph)


def _set_color(colors: Dict[LocatedCandidate, VertexColor], color: VertexColor) -> List[SetValue]:
    return [SetValue.of(vertex.cell, vertex.candidate) for vertex, c in colors.items() if c is color]


def _uncolored(board: CellBoard, graph: nx.Graph) -> Iterable[LocatedCandidate]:
    for cell in board.unsolved_cells():
        for candidate in sorted(cell.candidates):
            vertex = LocatedCandidate(cell, candidate)
            if vertex not in graph:
                yield vertex


def _can_see_color(vertex: LocatedCandidate, color: List[LocatedCandidate]) -> bool:
    return any(
        vertex.candidate == other.candidate and vertex.cell.is_in_same_unit(other.cell)
        for other in color
    )


def _color_in_cell(vertex: LocatedCandidate, color: List[LocatedCandidate]) -> bool:
    return any(LocatedCandidate(vertex.cell, candidate) in color for candidate in vertex.cell.candidates)


def medusa_rule_1(board: CellBoard) -> List[SetValue]:
    """
    Twice in a cell: two candidates of one cell with the same color make
    that color false, so every vertex of the opposite color is solved.
    """
    modifications = []
    for graph in _medusa_components(board):
        colors = color_to_map(graph)
        for a, b in combinations(list(graph), 2):
            if a.cell == b.cell and colors[a] is colors[b]:
                modifications.extend(_set_color(colors, colors[a].opposite))
                break
    return unique_set_values(modifications)


def medusa_rule_2(board: CellBoard) -> List[SetValue]:
    """
    Twice in a unit: the same candidate twice in one color within a unit
    makes that color false.
    """
    modifications = []
    for graph in _medusa_components(board):
        colors = color_to_map(graph)
        for a, b in combinations(list(graph), 2):
            if (
                a.candidate == b.candidate
                and colors[a] is colors[b]
                and a.cell.is_in_same_unit(b.cell)
            ):
                modifications.extend(_set_color(colors, colors[a].opposite))
                break
    return unique_set_values(modifications)


def medusa_rule_3(board: CellBoard) -> List[RemoveCandidates]:
    """
    Two colors in a cell: one of the two colored candidates is the solution,
    so the uncolored candidates of that cell are removed.
    """
    removals = Removals()
    for graph in _medusa_components(board):
        colors = color_to_map(graph)
        by_cell: Dict[UnsolvedCell, set] = defaultdict(set)
        for vertex, color in colors.items():
            if len(vertex.cell.candidates) > 2:
                by_cell[vertex.cell].add(color)
        for cell, cell_colors in by_cell.items():
            if len(cell_colors) == 2:
                removals.add_all(
                    cell,
                    (c for c in cell.candidates if LocatedCandidate(cell, c) not in graph),
                )
    return removals.to_list()


def medusa_rule_4(board: CellBoard) -> List[RemoveCandidates]:
    """
    Two colors elsewhere: an uncolored candidate that sees the same candidate
    in both colors cannot be the solution.
    """
    removals = Removals()
    for graph in _medusa_components(board):
        colors = color_to_lists(graph)
        for vertex in _uncolored(board, graph):
            if (
                _can_see_color(vertex, colors[VertexColor.COLOR_ONE])
                and _can_see_color(vertex, colors[VertexColor.COLOR_TWO])
            ):
                removals.add(vertex.cell, vertex.candidate)
    return removals.to_list()


def medusa_rule_5(board: CellBoard) -> List[RemoveCandidates]:
    """
    Two colors unit and cell: an uncolored candidate that sees one color in
    its unit while its own cell holds the other color is removed.
    """
    removals = Removals()
    for graph in _medusa_components(board):
        colors = color_to_lists(graph)
        one = colors[VertexColor.COLOR_ONE]
        two = colors[VertexColor.COLOR_TWO]
        for vertex in _uncolored(board, graph):
            if (
                (_can_see_color(vertex, one) and _color_in_cell(vertex, two))
                or (_can_see_color(vertex, two) and _color_in_cell(vertex, one))
            ):
                removals.add(vertex.cell, vertex.candidate)
    return removals.to_list()


def _emptying_color(
    cell: UnsolvedCell,
    colors: Dict[VertexColor, List[LocatedCandidate]],
) -> Optional[VertexColor]:
    for color in VertexColor:
        if all(
            _can_see_color(LocatedCandidate(cell, candidate), colors[color])
            for candidate in cell.candidates
        ):
            return color
    return None


def medusa_rule_6(board: CellBoard) -> List[SetValue]:
    """
    Cell emptied by color: if every candidate of an uncolored cell sees the
    same color, that color would empty the cell, so the opposite color is
    the solution.
    """
    modifications = []
    for graph in _medusa_components(board):
        colors = color_to_lists(graph)
        for cell in board.unsolved_cells():
            if any(LocatedCandidate(cell, candidate) in graph for candidate in cell.candidates):
                continue
            color = _emptying_color(cell, colors)
            if color is not None:
                modifications.extend(
                    SetValue.of(vertex.cell, vertex.candidate) for vertex in colors[color.opposite]
                )
                break
    return unique_set_values(modifications)


def jellyfish(board: CellBoard) -> List[RemoveCandidates]:
    return fish(board, 4)
