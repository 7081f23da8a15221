"""Per-search memoization context.

Every top-level search owns one SearchContext: the pristine input graph,
a private working clone that the driver shrinks, and the set-keyed caches
used by the extension search.  Nothing here is module-level state, so two
searches never see each other's caches.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Hashable, Iterable, List, Optional

import networkx as nx

from motiftools.graphs.model import clone_graph, neighbours

SetKey = FrozenSet[Hashable]


def set_key(vertices: Iterable[Hashable]) -> SetKey:
    """Order-independent cache key for a sequence of vertex ids."""
    return frozenset(vertices)


@dataclass
class SearchContext:
    """
    Mutable state of one search over (query_graph, input_graph).

    input_graph is never modified; working_graph starts as a clone of it
    and loses each root vertex once that root is exhausted.
    roots records the exhausted roots in processing order.
    """

    query_graph: nx.Graph
    input_graph: nx.Graph
    strict: bool = False
    working_graph: nx.Graph = field(init=False)
    neighbours_of_range: Dict[SetKey, List[Hashable]] = field(init=False, default_factory=dict)
    most_constrained: Dict[SetKey, Optional[Hashable]] = field(init=False, default_factory=dict)
    input_subgraphs: Dict[SetKey, nx.Graph] = field(init=False, default_factory=dict)
    query_neighbours: Dict[Hashable, List[Hashable]] = field(init=False, default_factory=dict)
    roots: List[Hashable] = field(init=False, default_factory=list)

    def __post_init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Drop all caches and start again from a fresh working clone."""
        self.working_graph = clone_graph(self.input_graph)
        self.neighbours_of_range = {}
        self.most_constrained = {}
        self.input_subgraphs = {}
        self.query_neighbours = {}
        self.roots = []

    def query_neighbours_of(self, h: Hashable) -> List[Hashable]:
        # the query graph is never modified, so its adjacency lists can be kept
        nbrs = self.query_neighbours.get(h)
        if nbrs is None:
            nbrs = neighbours(self.query_graph, h)
            self.query_neighbours[h] = nbrs
        return nbrs

    def remove_root(self, g: Hashable) -> None:
        self.working_graph.remove_node(g)
        self.roots.append(g)

    def induced_input_subgraph(self, image: Iterable[Hashable]) -> nx.Graph:
        """
        Subgraph of the pristine input graph induced by *image*.

        Every pair of mapped vertices is tested for an edge, so the result
        includes adjacencies that the query graph does not ask for.
        Cached per vertex set.
        """
        image = list(image)
        key = set_key(image)
        sub = self.input_subgraphs.get(key)
        if sub is None:
            sub = nx.Graph()
            sub.add_nodes_from(image)
            for i, u in enumerate(image):
                for v in image[i + 1:]:
                    if self.input_graph.has_edge(u, v):
                        sub.add_edge(u, v)
            self.input_subgraphs[key] = sub
        return sub
