from __future__ import annotations

from pathlib import Path
from typing import Hashable, Iterable, Optional, Tuple, Union

import networkx as nx

from motiftools.graphs.model import GraphValidationError, QueryGraph


def _add_edges_checked(G: nx.Graph, edges: Iterable[Tuple[Hashable, Hashable]], where: str = "") -> nx.Graph:
    for i, (u, v) in enumerate(edges, start=1):
        u, v = str(u), str(v)
        at = f"{where}edge {i}"
        if u == v:
            raise GraphValidationError(f"{at}: self-loop on {u!r}.")
        if G.has_edge(u, v):
            raise GraphValidationError(f"{at}: duplicate edge ({u!r}, {v!r}).")
        G.add_edge(u, v)
    return G


def parse_edgelist(lines: Iterable[str]) -> nx.Graph:
    """
    Parse whitespace-separated ``u v`` lines into a simple undirected graph.

    Blank lines and ``#`` comments are skipped; vertex ids stay strings;
    extra columns (weights, timestamps) are ignored.  Self-loops, duplicate
    edges and one-token lines raise GraphValidationError with the line number.
    """
    G = nx.Graph()
    for lineno, raw in enumerate(lines, start=1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        parts = line.split()
        if len(parts) < 2:
            raise GraphValidationError(f"line {lineno}: expected 'u v', got {raw.strip()!r}.")
        _add_edges_checked(G, [(parts[0], parts[1])], where=f"line {lineno}: ")
    return G


def read_edgelist(path: Union[str, Path]) -> nx.Graph:
    """Read an edge-list file; see parse_edgelist."""
    with open(path, "r", encoding="utf-8") as fh:
        return parse_edgelist(fh)


def edges_to_query_graph(
    edges: Iterable[Tuple[Hashable, Hashable]],
    label: Optional[str] = None,
) -> QueryGraph:
    """Build a QueryGraph from (u, v) pairs; ids are converted with str()."""
    return _add_edges_checked(QueryGraph(label=label), edges)


def strip_graph6_header(g6: str) -> str:
    """
    Remove optional '>>graph6<<' header and whitespace.
    """
    s = g6.strip()
    if s.startswith(">>graph6<<"):
        s = s[len(">>graph6<<") :].strip()
    return s


def g6_to_graph(g6: str, label: Optional[str] = None) -> QueryGraph:
    """
    Parse a graph6 string into a QueryGraph with vertex ids "0".."n-1".
    """
    s = strip_graph6_header(g6)
    G = nx.from_graph6_bytes(s.encode("ascii"))
    H = QueryGraph(label=label)
    H.add_nodes_from(str(v) for v in G.nodes())
    H.add_edges_from((str(u), str(v)) for u, v in G.edges())
    return H
