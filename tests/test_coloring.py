"""Unit tests for two-coloring link graphs."""

import networkx as nx
import pytest
from sudoku_logic.graphs import VertexColor, color_components, color_to_lists, color_to_map, connected_components


class TestVertexColor:
    def test_opposite(self):
        assert VertexColor.COLOR_ONE.opposite is VertexColor.COLOR_TWO
        assert VertexColor.COLOR_TWO.opposite is VertexColor.COLOR_ONE


class TestColoring:
    """Tests for color_to_map and friends."""

    def test_path(self):
        colors = color_to_map(nx.path_graph(["a", "b", "c"]))
        assert colors["a"] is not colors["b"]
        assert colors["b"] is not colors["c"]
        assert colors["a"] is colors["c"]

    def test_empty_graph(self):
        assert color_to_map(nx.Graph()) == {}

    def test_lists(self):
        lists = color_to_lists(nx.path_graph(4))
        assert sorted(len(vertices) for vertices in lists.values()) == [2, 2]
        assert set(lists[VertexColor.COLOR_ONE]) in ({0, 2}, {1, 3})

    def test_components(self):
        graph = nx.Graph([(1, 2), (2, 3), (10, 11)])
        components = connected_components(graph)
        assert sorted(sorted(component) for component in components) == [[1, 2, 3], [10, 11]]
        assert len(color_components(graph)) == 2

    @pytest.mark.parametrize("graph", [
        nx.path_graph(7),
        nx.cycle_graph(8),
        nx.grid_2d_graph(3, 4),
        nx.complete_bipartite_graph(3, 4),
        nx.balanced_tree(2, 3),
        nx.disjoint_union(nx.cycle_graph(4), nx.path_graph(5)),
    ])
    def test_every_edge_gets_two_colors(self, graph):
        for colors in color_components(graph):
            for a, b in graph.edges():
                if a in colors:
                    assert colors[a] is not colors[b]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
