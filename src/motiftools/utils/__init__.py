from .connectivity import is_connected_edges, isolated_vertices, connected_components_edges
from .naming import describe_graph, degree_string

__all__ = [
    "is_connected_edges",
    "isolated_vertices",
    "connected_components_edges",
    "describe_graph",
    "degree_string",
]
