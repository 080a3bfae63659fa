"""
Strong and weak link graphs.

Chain strategies build an undirected :class:`networkx.MultiGraph` whose edges
are keyed by :class:`Strength`. Each pair of vertices carries at most one
STRONG and at most one WEAK edge, so a pair that is strongly linked in one
unit and weakly linked in another keeps both classifications.
"""

from __future__ import annotations
from enum import Enum
from itertools import combinations
from typing import AbstractSet, Hashable, List, Optional, Set, Tuple

import networkx as nx


class Strength(Enum):
    """
    Strength of a link between two vertices.

    STRONG: if one end is false, the other is true.
    WEAK: both ends cannot be true.
    """
    STRONG = "strong"
    WEAK = "weak"

    @property
    def opposite(self) -> Strength:
        return Strength.WEAK if self is Strength.STRONG else Strength.STRONG

    def is_compatible_with(self, required_type: Strength) -> bool:
        """
        A strong link can stand in wherever a weak link is required, but a
        weak link only satisfies a weak requirement.
        """
        return self is Strength.STRONG or required_type is Strength.WEAK


Edge = Tuple[Hashable, Hashable]


def create_graph() -> nx.MultiGraph:
    return nx.MultiGraph()


def add_link(graph: nx.MultiGraph, a: Hashable, b: Hashable, strength: Strength) -> None:
    """Link two vertices. Adding the same strength twice is a no-op."""
    graph.add_edge(a, b, key=strength, strength=strength)


def has_link(graph: nx.MultiGraph, a: Hashable, b: Hashable, strength: Strength) -> bool:
    return graph.has_edge(a, b, key=strength)


def linked_vertices(graph: nx.MultiGraph, vertex: Hashable, required_type: Strength) -> Set[Hashable]:
    """Neighbors of ``vertex`` reachable over an edge compatible with ``required_type``."""
    return {
        neighbor
        for _, neighbor, strength in graph.edges(vertex, keys=True)
        if strength.is_compatible_with(required_type)
    }


def _is_trimmable(graph: nx.MultiGraph, vertex: Hashable) -> bool:
    if len(graph[vertex]) < 2:
        return True
    return not any(strength is Strength.STRONG for _, _, strength in graph.edges(vertex, keys=True))


def trim(graph: nx.MultiGraph) -> None:
    """
    Remove, in place, every vertex that cannot be part of an alternating cycle.

    Repeats until the graph is empty or every vertex has at least two
    neighbors and at least one strong link.
    """
    while True:
        to_remove = [vertex for vertex in graph if _is_trimmable(graph, vertex)]
        if not to_remove:
            return
        graph.remove_nodes_from(to_remove)


def alternating_cycle_exists(
    graph: nx.MultiGraph,
    vertex: Hashable,
    adjacent_edges_type: Strength,
) -> bool:
    """
    Check for a cycle through ``vertex`` whose two edges at ``vertex`` are
    both exactly ``adjacent_edges_type`` and whose other edges alternate.

    With STRONG the vertex must be true. With WEAK the vertex must be false.

    Args:
        graph: Strength graph.
        vertex: Vertex the cycle must pass through.
        adjacent_edges_type: Required strength of both edges at ``vertex``.

    Returns:
        True if such a cycle exists.
    """
    adjacent = [
        neighbor
        for _, neighbor, strength in graph.edges(vertex, keys=True)
        if strength is adjacent_edges_type
    ]
    for start, end in combinations(adjacent, 2):
        if _alternating_path_exists(
            graph,
            adjacent_edges_type,
            end,
            start,
            adjacent_edges_type.opposite,
            frozenset((vertex, start)),
        ):
            return True
    return False


def _alternating_path_exists(
    graph: nx.MultiGraph,
    adjacent_edges_type: Strength,
    end: Hashable,
    current: Hashable,
    next_type: Strength,
    visited: AbstractSet[Hashable],
) -> bool:
    next_vertices = linked_vertices(graph, current, next_type)
    if next_type is adjacent_edges_type.opposite and end in next_vertices:
        return True
    for next_vertex in next_vertices - visited - {end}:
        if _alternating_path_exists(
            graph,
            adjacent_edges_type,
            end,
            next_vertex,
            next_type.opposite,
            visited | {next_vertex},
        ):
            return True
    return False


def alternating_path_exists(graph: nx.MultiGraph, start: Hashable, end: Hashable) -> bool:
    """
    Check for a path from ``start`` to ``end`` that alternates strong and
    weak links, beginning and ending with a strong link.
    """
    # The closing step is the opposite of WEAK, so the path ends strong.
    return _alternating_path_exists(
        graph, Strength.WEAK, end, start, Strength.STRONG, frozenset((start,))
    )


def get_weak_edges_in_alternating_cycle(graph: nx.MultiGraph) -> List[Edge]:
    """
    Find the weak links that sit on a continuously alternating cycle.

    Every such link can be treated as strong. Each weak edge that is not
    already known to be on a cycle is used as the closing edge of a search
    that starts with a strong link and ends with a strong link.

    Returns:
        Weak edges as (source, target) pairs, each edge reported once.
    """
    found: List[Edge] = []
    seen: Set[frozenset] = set()
    for source, target, strength in graph.edges(keys=True):
        if strength is not Strength.WEAK or frozenset((source, target)) in seen:
            continue
        weak_edges = _alternating_cycle_weak_edges(
            graph,
            target,
            source,
            Strength.STRONG,
            frozenset((source,)),
            ((source, target),),
        )
        for edge in weak_edges or ():
            key = frozenset(edge)
            if key not in seen:
                seen.add(key)
                found.append(edge)
    return found


def _alternating_cycle_weak_edges(
    graph: nx.MultiGraph,
    end: Hashable,
    current: Hashable,
    next_type: Strength,
    visited: AbstractSet[Hashable],
    weak_edges: Tuple[Edge, ...],
) -> Optional[Tuple[Edge, ...]]:
    """Weak steps of the first alternating path found to ``end``, or None."""
    next_vertices = linked_vertices(graph, current, next_type)
    if next_type is Strength.STRONG and end in next_vertices:
        return weak_edges
    for next_vertex in next_vertices - visited - {end}:
        next_weak_edges = weak_edges
        if not has_link(graph, current, next_vertex, Strength.STRONG):
            next_weak_edges = weak_edges + ((current, next_vertex),)
        result = _alternating_cycle_weak_edges(
            graph,
            end,
            next_vertex,
            next_type.opposite,
            visited | {next_vertex},
            next_weak_edges,
        )
        if result is not None:
            return result
    return None
