from .model import (
    GraphValidationError,
    QueryGraph,
    neighbours,
    adjacent_degree,
    clone_graph,
    is_complete,
    degree_sequence,
    validate_simple_graph,
    validate_query_graph,
)

__all__ = [
    "GraphValidationError",
    "QueryGraph",
    "neighbours",
    "adjacent_degree",
    "clone_graph",
    "is_complete",
    "degree_sequence",
    "validate_simple_graph",
    "validate_query_graph",
]
