from .context import SearchContext, set_key
from .pruning import can_support, most_constrained_neighbour, neighbours_of_range, is_compatible
from .mapping import Mapping, are_isomorphic, unique_mappings
from .extension import isomorphic_extension
from .driver import default_sample_count, run_search, find_mappings

__all__ = [
    "SearchContext",
    "set_key",
    "can_support",
    "most_constrained_neighbour",
    "neighbours_of_range",
    "is_compatible",
    "Mapping",
    "are_isomorphic",
    "unique_mappings",
    "isomorphic_extension",
    "default_sample_count",
    "run_search",
    "find_mappings",
]
