"""Pruning and ordering helpers for the extension search."""
from __future__ import annotations

from typing import Dict, Hashable, List, Optional, Sequence

import networkx as nx

from motiftools.graphs.model import adjacent_degree, neighbours
from motiftools.search.context import SearchContext, set_key


def can_support(query_graph: nx.Graph, h: Hashable, input_graph: nx.Graph, g: Hashable) -> bool:
    """
    Whether input vertex g might host query vertex h.

    Rejects when deg(g) < deg(h).  Otherwise accepts as soon as one pair
    (neighbour of h, neighbour of g) has deg(g') >= deg(h'), and rejects if
    no pair does.  This is a cheap necessary test, not a feasibility proof:
    it does not check that every neighbour of h has its own host.
    """
    if adjacent_degree(input_graph, g) < adjacent_degree(query_graph, h):
        return False

    g_nbrs = neighbours(input_graph, g)
    h_nbrs = neighbours(query_graph, h)
    for h_nbr in reversed(h_nbrs):
        h_deg = adjacent_degree(query_graph, h_nbr)
        for g_nbr in reversed(g_nbrs):
            if adjacent_degree(input_graph, g_nbr) >= h_deg:
                return True
    return False


def most_constrained_neighbour(ctx: SearchContext, domain: Sequence[Hashable]) -> Optional[Hashable]:
    """
    Next query vertex to assign: the first unassigned query neighbour of the
    domain, scanning the domain from the most recently assigned vertex back.

    Returns None when the domain has no unassigned neighbour.  Memoized per
    domain-as-set; the first ordering seen for a set decides its answer.
    """
    key = set_key(domain)
    if key in ctx.most_constrained:
        return ctx.most_constrained[key]

    result = None
    for d in reversed(domain):
        for nbr in ctx.query_neighbours_of(d):
            if nbr not in key:
                result = nbr
                break
        if result is not None:
            break

    ctx.most_constrained[key] = result
    return result


def neighbours_of_range(ctx: SearchContext, used_range: Sequence[Hashable]) -> List[Hashable]:
    """
    Candidate pool for the next assignment: working-graph neighbours of the
    used range, minus the range itself.

    Discovery order is deterministic (range from the most recent vertex back,
    neighbours in adjacency order).  Memoized per range-as-set.
    """
    key = set_key(used_range)
    cached = ctx.neighbours_of_range.get(key)
    if cached is not None:
        return cached

    pool: Dict[Hashable, None] = {}
    for r in reversed(used_range):
        for nbr in ctx.working_graph.adj[r]:
            if nbr not in key:
                pool.setdefault(nbr)

    result = list(pool)
    ctx.neighbours_of_range[key] = result
    return result


def is_compatible(
    input_graph: nx.Graph,
    query_graph: nx.Graph,
    n: Hashable,
    m: Hashable,
    partial_map: Dict[Hashable, Hashable],
    *,
    strict: bool = False,
) -> bool:
    """
    Whether assigning m -> n keeps the mapped query edges of m.

    Query neighbours d of m are scanned in adjacency order.  A mapped d
    whose image is not adjacent to n rejects.  By default the scan stops
    and accepts at the first unmapped d, so mapped neighbours listed after
    it are not checked.  With strict=True every mapped neighbour is checked.
    """
    n_adj = input_graph.adj[n]
    for d in query_graph.adj[m]:
        if d not in partial_map:
            if strict:
                continue
            return True
        if partial_map[d] not in n_adj:
            return False
    return True
