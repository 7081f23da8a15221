from __future__ import annotations

from typing import Dict, Hashable, List

from motiftools.search.context import SearchContext
from motiftools.search.mapping import Mapping
from motiftools.search.pruning import (
    is_compatible,
    most_constrained_neighbour,
    neighbours_of_range,
)


def _complete_mapping(ctx: SearchContext, partial_map: Dict[Hashable, Hashable]) -> Mapping:
    mapping = Mapping.from_query(partial_map, ctx.query_graph)
    mapping.input_subgraph = ctx.induced_input_subgraph(partial_map.values())
    return mapping


def isomorphic_extension(ctx: SearchContext, partial_map: Dict[Hashable, Hashable]) -> List[Mapping]:
    """
    All complete extensions of partial_map (query vertex -> input vertex).

    Grows the map one query vertex at a time: the next query vertex m is the
    frontier pick of most_constrained_neighbour, its candidates are the
    working-graph neighbours of the current range, and each compatible
    candidate n is tried as m -> n.  partial_map itself is not modified.

    Child results are merged keeping only injective mappings not already
    collected (by function equality).  An empty list means no extension.
    """
    if len(partial_map) == ctx.query_graph.number_of_nodes():
        return [_complete_mapping(ctx, partial_map)]

    m = most_constrained_neighbour(ctx, list(partial_map))
    if m is None:
        return []

    found: List[Mapping] = []
    seen = set()
    for n in neighbours_of_range(ctx, list(partial_map.values())):
        if not is_compatible(ctx.working_graph, ctx.query_graph, n, m, partial_map, strict=ctx.strict):
            continue

        extended = dict(partial_map)
        extended[m] = n

        for mapping in isomorphic_extension(ctx, extended):
            if not mapping.is_injective() or mapping in seen:
                continue
            seen.add(mapping)
            found.append(mapping)

    return found
