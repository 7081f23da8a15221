from __future__ import annotations

from collections import defaultdict
from typing import Hashable, Iterable

from motiftools.utils.connectivity import is_connected_edges


def degree_string(degrees: Iterable[int]) -> str:
    """Compact non-increasing degree sequence, e.g. ``3211``."""
    return "".join(str(d) for d in sorted(degrees, reverse=True))


def describe_graph(
    edges: Iterable[tuple[Hashable, Hashable]],
    vertices: Iterable[Hashable] | None = None,
) -> str:
    """Human-readable description of a small graph.

    Returns recognizable names for common motif shapes (K2, Kn, Pn, K1,r, Cn)
    and a generic descriptor with vertex/edge counts for everything else.
    Vertex ids can be any hashable; only the structure matters.
    """
    edges = list(edges)
    adj: dict[Hashable, set[Hashable]] = defaultdict(set)
    verts: set[Hashable] = set(vertices) if vertices is not None else set()
    for u, v in edges:
        adj[u].add(v)
        adj[v].add(u)
        verts.add(u)
        verts.add(v)

    if not edges:
        return "empty" if not verts else f"E{len(verts)}"

    m = len(edges)
    n = len(verts)
    deg_seq = sorted((len(adj[v]) for v in verts), reverse=True)

    if m == n * (n - 1) // 2:
        return f"K{n}"

    connected = is_connected_edges(edges, verts)

    if connected and m == n - 1:
        if all(d <= 2 for d in deg_seq):
            return f"P{n}"
        if deg_seq.count(1) == n - 1:
            return f"K1,{n - 1}"
        return f"Tree({n}v,{degree_string(deg_seq)})"

    if connected and m == n and all(d == 2 for d in deg_seq):
        return f"C{n}"

    return f"Graph({n}v,{m}e,{degree_string(deg_seq)})"
