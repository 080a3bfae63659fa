"""Link graphs shared by the chain and coloring strategies."""

from .strength import (
    Strength,
    add_link,
    alternating_cycle_exists,
    alternating_path_exists,
    create_graph,
    get_weak_edges_in_alternating_cycle,
    linked_vertices,
    trim,
)
from .coloring import VertexColor, color_components, color_to_lists, color_to_map, connected_components

__all__ = [
    "Strength",
    "add_link",
    "alternating_cycle_exists",
    "alternating_path_exists",
    "create_graph",
    "get_weak_edges_in_alternating_cycle",
    "linked_vertices",
    "trim",
    "VertexColor",
    "color_components",
    "color_to_lists",
    "color_to_map",
    "connected_components",
]
