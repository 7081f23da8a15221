from .edgelist import parse_edgelist, read_edgelist, edges_to_query_graph, g6_to_graph

__all__ = [
    "parse_edgelist",
    "read_edgelist",
    "edges_to_query_graph",
    "g6_to_graph",
]
