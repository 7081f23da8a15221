"""Root-elimination driver.

Each sampled input vertex g is tried as the image of every query vertex h
that it can support.  Once all h are done, g is removed from the working
graph, so every root is used exactly once and later searches run on a
smaller graph.
"""
from __future__ import annotations

import logging
from typing import Dict, Hashable, List, Optional

import networkx as nx

from motiftools.config import SAMPLE_DIVISOR
from motiftools.graphs.model import degree_sequence, validate_query_graph, validate_simple_graph
from motiftools.search.context import SearchContext
from motiftools.search.extension import isomorphic_extension
from motiftools.search.mapping import Mapping
from motiftools.search.pruning import can_support

logger = logging.getLogger(__name__)


def default_sample_count(input_graph: nx.Graph, divisor: int = SAMPLE_DIVISOR) -> int:
    """Number of root vertices sampled when the caller gives none."""
    if divisor <= 0:
        raise ValueError(f"sample divisor must be positive, got {divisor}.")
    return input_graph.number_of_nodes() // divisor


def _resolve_sample_count(input_graph: nx.Graph, sample_count: Optional[int], divisor: int) -> int:
    if sample_count is None:
        return default_sample_count(input_graph, divisor)
    if isinstance(sample_count, bool) or not isinstance(sample_count, int):
        raise TypeError(f"sample_count must be an int, got {type(sample_count).__name__}.")
    if sample_count <= 0:
        return default_sample_count(input_graph, divisor)
    return sample_count


def run_search(
    ctx: SearchContext,
    sample_count: Optional[int] = None,
    *,
    sample_divisor: int = SAMPLE_DIVISOR,
) -> List[Mapping]:
    """
    Run root elimination over an existing context.

    The context is reset first, so its caches and working graph only ever
    describe this run.  Roots are the first sample_count vertices of the
    input graph, ordered by decreasing degree.  Results are grouped by the
    last assigned input vertex of each mapping, skipping mappings equal to
    one already in the group, then flattened.
    """
    ctx.reset()
    count = _resolve_sample_count(ctx.input_graph, sample_count, sample_divisor)
    query_vertices = list(ctx.query_graph.nodes())

    by_last: Dict[Hashable, List[Mapping]] = {}
    for g in degree_sequence(ctx.input_graph, count):
        for h in query_vertices:
            if not can_support(ctx.query_graph, h, ctx.working_graph, g):
                continue

            mappings = isomorphic_extension(ctx, {h: g})
            if not mappings:
                continue
            logger.debug("maps from extension: h=%s, g=%s, count=%d", h, g, len(mappings))

            for mapping in mappings:
                group = by_last.setdefault(mapping.last_image, [])
                if mapping not in group:
                    group.append(mapping)

        ctx.remove_root(g)

    results = [mapping for group in by_last.values() for mapping in group]
    logger.info(
        "search complete: %d roots, %d mappings found for %s",
        len(ctx.roots),
        len(results),
        getattr(ctx.query_graph, "label", "query graph"),
    )
    return results


def find_mappings(
    query_graph: nx.Graph,
    input_graph: nx.Graph,
    sample_count: Optional[int] = None,
    *,
    strict: bool = False,
    validate: bool = True,
    sample_divisor: int = SAMPLE_DIVISOR,
) -> List[Mapping]:
    """
    Find occurrences of query_graph in input_graph.

    Parameters
    ----------
    query_graph : nx.Graph
        Connected pattern graph (QueryGraph or plain nx.Graph) with string ids.
    input_graph : nx.Graph
        Graph searched in.  It is cloned, never modified.
    sample_count : int, optional
        Number of root vertices to try.  Defaults to
        ``len(input_graph) // sample_divisor``; non-positive values also use
        the default.
    strict : bool
        Check every mapped query neighbour when extending instead of stopping
        at the first unmapped one.  This is a different search variant and can
        return fewer mappings.
    validate : bool
        Reject malformed graphs with GraphValidationError before searching.

    Returns
    -------
    list[Mapping]
        Empty when nothing matches.  Mappings are not deduplicated up to
        equivalence; see unique_mappings.
    """
    if validate:
        validate_query_graph(query_graph)
        validate_simple_graph(input_graph)

    ctx = SearchContext(query_graph, input_graph, strict=strict)
    return run_search(ctx, sample_count, sample_divisor=sample_divisor)
