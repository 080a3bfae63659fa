"""Two-coloring of link graphs for the coloring strategies."""

from __future__ import annotations
from enum import Enum
from typing import Dict, Hashable, List

import networkx as nx


class VertexColor(Enum):
    COLOR_ONE = 1
    COLOR_TWO = 2

    @property
    def opposite(self) -> VertexColor:
        return VertexColor.COLOR_TWO if self is VertexColor.COLOR_ONE else VertexColor.COLOR_ONE


def color_to_map(graph: nx.Graph) -> Dict[Hashable, VertexColor]:
    """
    Color a connected graph by breadth-first depth from an arbitrary root:
    even depths get COLOR_ONE, odd depths get COLOR_TWO.

    The graph is expected to be bipartite along its edges. That is not
    checked here.
    """
    colors: Dict[Hashable, VertexColor] = {}
    if graph.number_of_nodes() == 0:
        return colors
    root = next(iter(graph))
    for vertex, depth in nx.single_source_shortest_path_length(graph, root).items():
        colors[vertex] = VertexColor.COLOR_ONE if depth % 2 == 0 else VertexColor.COLOR_TWO
    return colors


def color_to_lists(graph: nx.Graph) -> Dict[VertexColor, List[Hashable]]:
    """Same coloring as :func:`color_to_map`, grouped by color."""
    result: Dict[VertexColor, List[Hashable]] = {color: [] for color in VertexColor}
    for vertex, color in color_to_map(graph).items():
        result[color].append(vertex)
    return result


def connected_components(graph: nx.Graph) -> List[nx.Graph]:
    """Each connected component as its own subgraph."""
    return [graph.subgraph(component).copy() for component in nx.connected_components(graph)]


def color_components(graph: nx.Graph) -> List[Dict[Hashable, VertexColor]]:
    """Color every connected component separately."""
    return [color_to_map(component) for component in connected_components(graph)]
