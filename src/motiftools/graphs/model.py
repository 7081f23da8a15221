"""Graph model shared by the search.

Graphs are plain simple undirected ``networkx.Graph`` objects whose vertices
are string identifiers.  Node iteration order (insertion order) and the
adjacency order of each vertex are what the search calls "natural order",
so everything here preserves them.
"""
from __future__ import annotations

from typing import Hashable, List, Optional

import networkx as nx

from motiftools.utils.connectivity import connected_components_edges, isolated_vertices
from motiftools.utils.naming import describe_graph


class GraphValidationError(ValueError):
    """Raised when a graph handed to the search is not well formed."""


class QueryGraph(nx.Graph):
    """
    Undirected pattern graph with a provenance label.

    The label lives in ``G.graph["label"]`` so it survives ``copy()``.
    Without an explicit label a structural description is returned
    (``"K3"``, ``"P4"``, ...).
    """

    def __init__(self, incoming_graph_data=None, label: Optional[str] = None, **attr):
        super().__init__(incoming_graph_data, **attr)
        if label is not None:
            self.graph["label"] = label

    @property
    def label(self) -> str:
        label = self.graph.get("label")
        if label:
            return label
        return describe_graph(self.edges(), self.nodes())

    @label.setter
    def label(self, value: str) -> None:
        self.graph["label"] = value


def neighbours(G: nx.Graph, v: Hashable) -> List[Hashable]:
    """Neighbours of *v* in adjacency (insertion) order."""
    return list(G.adj[v])


def adjacent_degree(G: nx.Graph, v: Hashable) -> int:
    return len(G.adj[v])


def clone_graph(G: nx.Graph) -> nx.Graph:
    """
    Independent copy of *G* as a plain ``nx.Graph``.

    Node order and adjacency order are preserved, and so are isolated
    vertices.  Graph/node/edge attribute dicts are not shared.
    """
    H = nx.Graph()
    H.add_nodes_from(G.nodes(data=True))
    H.add_edges_from(G.edges(data=True))
    H.graph.update(G.graph)
    return H


def is_complete(G: nx.Graph) -> bool:
    """A complete graph on n vertices has n(n-1)/2 edges."""
    n = G.number_of_nodes()
    return G.number_of_edges() == n * (n - 1) // 2


def degree_sequence(G: nx.Graph, count: Optional[int] = None) -> List[Hashable]:
    """
    Vertices ordered by non-increasing degree.

    If *count* is given, only the first *count* vertices in node order are
    taken, and that prefix is then sorted.  This is not a global top-N:
    a high-degree vertex discovered late is never included.  Ties keep node
    order.
    """
    if G.number_of_nodes() == 0:
        return []
    nodes = list(G.nodes())
    if count is not None:
        nodes = nodes[: max(count, 0)]
    return sorted(nodes, key=lambda v: -adjacent_degree(G, v))


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def validate_simple_graph(G: nx.Graph, name: str = "input graph") -> None:
    """
    Check that *G* is a simple undirected graph with string vertex ids.

    Raises GraphValidationError describing the first problem found.
    """
    if not isinstance(G, nx.Graph):
        raise GraphValidationError(f"{name} must be a networkx Graph, got {type(G).__name__}.")
    if G.is_directed():
        raise GraphValidationError(f"{name} must be undirected.")
    if G.is_multigraph():
        raise GraphValidationError(f"{name} must not have parallel edges (got a MultiGraph).")

    loops = sorted(str(v) for v, _ in nx.selfloop_edges(G))
    if loops:
        raise GraphValidationError(f"{name} has self-loop edges at {loops}.")

    bad = [v for v in G.nodes() if not isinstance(v, str)]
    if bad:
        raise GraphValidationError(
            f"{name} vertex ids must be strings; got {bad[:5]!r}. "
            "Relabel with nx.relabel_nodes(G, str)."
        )


def validate_query_graph(G: nx.Graph) -> None:
    """
    Check that *G* can be used as a query (motif) graph.

    On top of validate_simple_graph: non-empty, no isolated vertices,
    and a single connected component.
    """
    validate_simple_graph(G, name="query graph")
    if G.number_of_nodes() == 0:
        raise GraphValidationError("query graph is empty.")

    if G.number_of_nodes() > 1:
        lonely = isolated_vertices(G.edges(), G.nodes())
        if lonely:
            raise GraphValidationError(f"query graph has isolated vertices {lonely}.")

    components = connected_components_edges(G.edges(), G.nodes())
    if len(components) > 1:
        sizes = sorted((len(c) for c in components), reverse=True)
        raise GraphValidationError(
            f"query graph must be connected; found {len(components)} components of sizes {sizes}."
        )
