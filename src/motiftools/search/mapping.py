from __future__ import annotations

from typing import Dict, Hashable, Iterable, List, Optional, Tuple

import networkx as nx

from motiftools.graphs.model import adjacent_degree, is_complete


class Mapping:
    """
    One occurrence of a query graph inside an input graph.

    function maps query vertices to input vertices, in assignment order.
    map_on_input_subgraph holds the images of the query edges only, while
    input_subgraph holds every edge of the pristine input graph among the
    mapped vertices.  Two mappings are equal iff their functions contain the
    same (query, input) pairs; assignment order does not matter.
    """

    __slots__ = ("function", "input_subgraph", "map_on_input_subgraph")

    def __init__(
        self,
        function: Dict[Hashable, Hashable],
        input_subgraph: Optional[nx.Graph] = None,
        map_on_input_subgraph: Optional[nx.Graph] = None,
    ):
        self.function = dict(function)
        self.input_subgraph = input_subgraph if input_subgraph is not None else nx.Graph()
        self.map_on_input_subgraph = (
            map_on_input_subgraph if map_on_input_subgraph is not None else nx.Graph()
        )

    @classmethod
    def from_query(cls, function: Dict[Hashable, Hashable], query_graph: nx.Graph) -> "Mapping":
        """Build a mapping whose map_on_input_subgraph is the image of every query edge."""
        image = nx.Graph()
        image.add_nodes_from(function.values())
        image.add_edges_from((function[u], function[v]) for u, v in query_graph.edges())
        return cls(function, map_on_input_subgraph=image)

    @property
    def pairs(self) -> List[Tuple[Hashable, Hashable]]:
        return list(self.function.items())

    @property
    def domain(self) -> frozenset:
        return frozenset(self.function)

    @property
    def image(self) -> frozenset:
        return frozenset(self.function.values())

    @property
    def last_image(self) -> Hashable:
        """Input vertex assigned last; the driver groups results by it."""
        return next(reversed(self.function.values()))

    def is_injective(self) -> bool:
        return len(set(self.function.values())) == len(self.function)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        return self.function == other.function

    def __hash__(self) -> int:
        return hash(frozenset(self.function.items()))

    def __len__(self) -> int:
        return len(self.function)

    def __repr__(self) -> str:
        body = ", ".join(f"{h}->{g}" for h, g in self.function.items())
        return f"Mapping({body})"


def are_isomorphic(a: Mapping, b: Mapping, query_graph: nx.Graph) -> bool:
    """
    Whether a and b describe the same embedding.

    Checks, short-circuiting on the first failure:
      1. same domain and same image vertex sets,
      2. same number of query-edge images,
      3. same degree for every vertex of the query-edge image graphs.
    A degree mismatch is forgiven when the query graph is complete, since
    any relabelling of a complete pattern is an automorphism.
    """
    if a.domain != b.domain or a.image != b.image:
        return False

    sub_a = a.map_on_input_subgraph
    sub_b = b.map_on_input_subgraph
    if sub_a.number_of_edges() != sub_b.number_of_edges():
        return False

    for v in sub_a.nodes():
        deg_b = adjacent_degree(sub_b, v) if v in sub_b else 0
        if adjacent_degree(sub_a, v) != deg_b:
            return is_complete(query_graph)
    return True


def unique_mappings(mappings: Iterable[Mapping], query_graph: nx.Graph) -> List[Mapping]:
    """Keep the first mapping of every are_isomorphic class, preserving order."""
    kept: List[Mapping] = []
    # only mappings over the same vertex sets can be equivalent
    buckets: Dict[Tuple[frozenset, frozenset], List[Mapping]] = {}
    for m in mappings:
        bucket = buckets.setdefault((m.domain, m.image), [])
        if not any(are_isomorphic(k, m, query_graph) for k in bucket):
            bucket.append(m)
            kept.append(m)
    return kept
