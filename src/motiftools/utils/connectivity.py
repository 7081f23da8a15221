from __future__ import annotations

from collections import defaultdict
from typing import Hashable, Iterable


def is_connected_edges(
    edges: Iterable[tuple[Hashable, Hashable]],
    vertices: Iterable[Hashable] | None = None,
) -> bool:
    """Check whether an edge list forms a connected graph.

    If *vertices* is provided, connectivity is checked over that vertex set
    (so isolated vertices make the graph disconnected).  Otherwise the
    vertex set is inferred from the edges.

    Semantics for degenerate cases:
      - No edges, no vertices (or empty set) -> True  (vacuously connected)
      - No edges, one vertex               -> True
      - No edges, two or more vertices      -> False
    """
    edges = list(edges)
    if vertices is not None:
        verts = set(vertices)
    else:
        verts = {v for e in edges for v in e}

    if len(verts) <= 1:
        return True

    adj: dict[Hashable, set[Hashable]] = defaultdict(set)
    for u, v in edges:
        if u in verts and v in verts:
            adj[u].add(v)
            adj[v].add(u)

    start = next(iter(verts))
    visited: set[Hashable] = set()
    stack = [start]
    while stack:
        node = stack.pop()
        if node in visited:
            continue
        visited.add(node)
        stack.extend(nbr for nbr in adj[node] if nbr not in visited)
    return len(visited) == len(verts)


def isolated_vertices(
    edges: Iterable[tuple[Hashable, Hashable]],
    vertices: Iterable[Hashable],
) -> list[Hashable]:
    """Vertices (in the given order) that touch no edge."""
    touched = {v for e in edges for v in e}
    return [v for v in vertices if v not in touched]


def connected_components_edges(
    edges: Iterable[tuple[Hashable, Hashable]],
    vertices: Iterable[Hashable] | None = None,
) -> list[set[Hashable]]:
    """Return the vertex sets of the connected components.

    Isolated vertices from *vertices* form singleton components.
    """
    edges = list(edges)
    adj: dict[Hashable, set[Hashable]] = defaultdict(set)
    order: dict[Hashable, None] = {}
    if vertices is not None:
        order.update(dict.fromkeys(vertices))
    for u, v in edges:
        adj[u].add(v)
        adj[v].add(u)
        order.setdefault(u)
        order.setdefault(v)

    seen: set[Hashable] = set()
    components: list[set[Hashable]] = []
    for start in order:
        if start in seen:
            continue
        comp: set[Hashable] = set()
        stack = [start]
        while stack:
            node = stack.pop()
            if node in comp:
                continue
            comp.add(node)
            stack.extend(nbr for nbr in adj[node] if nbr not in comp)
        components.append(comp)
        seen |= comp

    return components
