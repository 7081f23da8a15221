"""Frequent-motif classification on top of the mapping search."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

import networkx as nx

from motiftools.config import MotifConfig
from motiftools.search.driver import find_mappings
from motiftools.search.mapping import Mapping, unique_mappings
from motiftools.utils.naming import describe_graph

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MotifFrequency:
    """
    Occurrence summary of one query graph.

    count:    number of (deduplicated) mappings found.
    frequent: count > threshold.
    mappings: the mappings, or () when only counts were requested.
    """

    label: str
    count: int
    threshold: int
    frequent: bool
    mappings: Tuple[Mapping, ...] = ()


def _label_of(query_graph: nx.Graph) -> str:
    label = getattr(query_graph, "label", None)
    if label:
        return label
    return describe_graph(query_graph.edges(), query_graph.nodes())


def count_motif(
    query_graph: nx.Graph,
    input_graph: nx.Graph,
    config: Optional[MotifConfig] = None,
    *,
    sample_count: Optional[int] = None,
    dedup: bool = True,
) -> MotifFrequency:
    """
    Search query_graph in input_graph and classify it against the threshold.

    With dedup=True, mappings that are_isomorphic to an earlier one are
    dropped before counting.
    """
    if config is None:
        config = MotifConfig()

    mappings = find_mappings(
        query_graph,
        input_graph,
        sample_count,
        strict=config.strict,
        sample_divisor=config.sample_divisor,
    )
    if dedup:
        mappings = unique_mappings(mappings, query_graph)

    label = _label_of(query_graph)
    count = len(mappings)
    frequent = count > config.threshold
    logger.info("%s: %d mappings (threshold %d, frequent=%s)", label, count, config.threshold, frequent)

    return MotifFrequency(
        label=label,
        count=count,
        threshold=config.threshold,
        frequent=frequent,
        mappings=() if config.only_counts else tuple(mappings),
    )


def find_frequent_motifs(
    query_graphs: Iterable[nx.Graph],
    input_graph: nx.Graph,
    config: Optional[MotifConfig] = None,
    *,
    sample_count: Optional[int] = None,
    dedup: bool = True,
) -> List[MotifFrequency]:
    """Frequent query graphs among *query_graphs*, in input order."""
    results = []
    for query_graph in query_graphs:
        freq = count_motif(query_graph, input_graph, config, sample_count=sample_count, dedup=dedup)
        if freq.frequent:
            results.append(freq)
    return results
