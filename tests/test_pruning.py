"""Tests for the pruning and ordering helpers and the search context."""
from conftest import make_graph
from motiftools.graphs.model import QueryGraph
from motiftools.search.context import SearchContext, set_key
from motiftools.search.pruning import (
    can_support,
    is_compatible,
    most_constrained_neighbour,
    neighbours_of_range,
)


# --- set keys ---

def test_set_key_ignores_order():
    assert set_key(["a", "b", "c"]) == set_key(["c", "a", "b"])
    assert hash(set_key(["x", "y"])) == hash(set_key(["y", "x"]))
    assert set_key(["a", "b"]) != set_key(["a", "b", "c"])


# --- can_support ---

def test_can_support_degree_reject(star):
    q = QueryGraph([("a", "b"), ("b", "c")])
    assert can_support(q, "b", star, "p") is False


def test_can_support_hub(star):
    q = QueryGraph([("a", "b"), ("b", "c")])
    assert can_support(q, "b", star, "s") is True


def test_can_support_neighbour_degrees(star):
    # a leaf of a path can sit on a leaf of the star: its neighbour "b" (deg 2)
    # lands on the hub (deg 4)
    q = QueryGraph([("a", "b"), ("b", "c")])
    assert can_support(q, "a", star, "p") is True


def test_can_support_one_pair_is_enough(star):
    # "b" has neighbours of degree 1 and 2; the hub's leaves have degree 1,
    # which is enough for "a"
    q = QueryGraph([("a", "b"), ("b", "c"), ("c", "d")])
    assert can_support(q, "b", star, "s") is True


def test_can_support_no_qualifying_pair():
    # "o" has only degree-2 neighbours, "g" only degree-1 ones
    q = QueryGraph([("o", "x"), ("o", "y"), ("x", "y")])
    G = make_graph([("g", "p"), ("g", "q")])
    assert can_support(q, "o", G, "g") is False


def test_can_support_is_loose():
    # h needs a neighbour of degree 3 ("x"), but one small neighbour pair
    # ("y" on "p") is enough to accept
    q = QueryGraph([("h", "x"), ("h", "y"), ("x", "u"), ("x", "v")])
    G = make_graph([("g", "p"), ("g", "q")])
    assert can_support(q, "h", G, "g") is True


def test_can_support_isolated_query_vertex():
    q = QueryGraph()
    q.add_node("a")
    G = make_graph([("g", "p")])
    assert can_support(q, "a", G, "g") is False


# --- most_constrained_neighbour ---

def test_most_constrained_neighbour_triangle(triangle_query, two_triangles):
    ctx = SearchContext(triangle_query, two_triangles)
    assert most_constrained_neighbour(ctx, ["a"]) == "b"
    assert most_constrained_neighbour(ctx, ["a", "b"]) == "c"
    assert most_constrained_neighbour(ctx, ["a", "b", "c"]) is None


def test_most_constrained_neighbour_scans_latest_first(path4_query, star):
    ctx = SearchContext(path4_query, star)
    assert most_constrained_neighbour(ctx, ["b", "c"]) == "d"

    fresh = SearchContext(path4_query, star)
    assert most_constrained_neighbour(fresh, ["c", "b"]) == "a"


def test_most_constrained_neighbour_memo_is_set_keyed(path4_query, star):
    ctx = SearchContext(path4_query, star)
    first = most_constrained_neighbour(ctx, ["b", "c"])
    # same set in the other order hits the cache
    assert most_constrained_neighbour(ctx, ["c", "b"]) == first
    assert list(ctx.most_constrained) == [frozenset({"b", "c"})]


# --- neighbours_of_range ---

def test_neighbours_of_range_single(triangle_query, two_triangles):
    ctx = SearchContext(triangle_query, two_triangles)
    assert neighbours_of_range(ctx, ["w"]) == ["x", "y", "z"]


def test_neighbours_of_range_excludes_range(triangle_query, two_triangles):
    ctx = SearchContext(triangle_query, two_triangles)
    pool = neighbours_of_range(ctx, ["w", "x"])
    assert pool == ["y", "z"]
    assert "w" not in pool and "x" not in pool


def test_neighbours_of_range_memo_is_set_keyed(triangle_query, two_triangles):
    ctx = SearchContext(triangle_query, two_triangles)
    first = neighbours_of_range(ctx, ["w", "x"])
    assert neighbours_of_range(ctx, ["x", "w"]) is first
    assert len(ctx.neighbours_of_range) == 1


def test_neighbours_of_range_uses_working_graph(triangle_query, two_triangles):
    ctx = SearchContext(triangle_query, two_triangles)
    ctx.remove_root("w")
    assert neighbours_of_range(ctx, ["x"]) == ["y"]
    assert two_triangles.has_node("w")


# --- is_compatible ---

def _path3():
    # adjacency of "b" is ["a", "c"]
    return QueryGraph([("a", "b"), ("b", "c")])


def test_is_compatible_mapped_neighbour_adjacent():
    G = make_graph([("p", "q"), ("r", "s")])
    assert is_compatible(G, _path3(), "p", "b", {"a": "q"}) is True


def test_is_compatible_mapped_neighbour_not_adjacent():
    G = make_graph([("p", "q"), ("r", "s")])
    assert is_compatible(G, _path3(), "p", "b", {"a": "r"}) is False


def test_is_compatible_stops_at_first_unmapped():
    # "a" is unmapped and listed before "c", so "c" -> "r" is never checked
    G = make_graph([("p", "q"), ("r", "s")])
    assert is_compatible(G, _path3(), "p", "b", {"c": "r"}) is True


def test_is_compatible_strict_checks_every_mapped_neighbour():
    G = make_graph([("p", "q"), ("r", "s")])
    assert is_compatible(G, _path3(), "p", "b", {"c": "r"}, strict=True) is False
    assert is_compatible(G, _path3(), "p", "b", {"c": "q"}, strict=True) is True


# --- context ---

def test_context_reset_restores_working_graph(triangle_query, two_triangles):
    ctx = SearchContext(triangle_query, two_triangles)
    neighbours_of_range(ctx, ["w"])
    ctx.remove_root("w")
    assert ctx.roots == ["w"]
    ctx.reset()
    assert ctx.roots == []
    assert ctx.neighbours_of_range == {}
    assert ctx.working_graph.has_node("w")


def test_context_induced_input_subgraph_uses_pristine_graph(triangle_query, two_triangles):
    ctx = SearchContext(triangle_query, two_triangles)
    ctx.remove_root("w")
    sub = ctx.induced_input_subgraph(["x", "y", "w"])
    assert sorted(tuple(sorted(e)) for e in sub.edges()) == [("w", "x"), ("w", "y"), ("x", "y")]
    assert ctx.induced_input_subgraph(["w", "y", "x"]) is sub
