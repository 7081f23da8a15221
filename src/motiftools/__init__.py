"""
motiftools: subgraph-isomorphism search for network-motif discovery.

Finds every occurrence of a small query graph inside a larger input graph
with a pruned backtracking search and root-vertex elimination, and classifies
query graphs as frequent motifs by occurrence count.
"""

from .config import MotifConfig

# Graph model
from .graphs.model import (
    GraphValidationError,
    QueryGraph,
    clone_graph,
    is_complete,
    degree_sequence,
    validate_simple_graph,
    validate_query_graph,
)

# IO
from .io.edgelist import parse_edgelist, read_edgelist, edges_to_query_graph, g6_to_graph

# Search
from .search.context import SearchContext
from .search.mapping import Mapping, are_isomorphic, unique_mappings
from .search.driver import find_mappings, run_search

# Motifs
from .motifs.frequency import MotifFrequency, count_motif, find_frequent_motifs

# Viz
from .viz.draw import draw_mapping

__all__ = [
    "MotifConfig",
    # Graph model
    "GraphValidationError",
    "QueryGraph",
    "clone_graph",
    "is_complete",
    "degree_sequence",
    "validate_simple_graph",
    "validate_query_graph",
    # IO
    "parse_edgelist",
    "read_edgelist",
    "edges_to_query_graph",
    "g6_to_graph",
    # Search
    "SearchContext",
    "Mapping",
    "are_isomorphic",
    "unique_mappings",
    "find_mappings",
    "run_search",
    # Motifs
    "MotifFrequency",
    "count_motif",
    "find_frequent_motifs",
    # Viz
    "draw_mapping",
]
