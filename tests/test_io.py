"""Tests for motiftools.io."""
import pytest

from motiftools.graphs.model import GraphValidationError, QueryGraph
from motiftools.io.edgelist import (
    edges_to_query_graph,
    g6_to_graph,
    parse_edgelist,
    read_edgelist,
)


# --- edge lists ---

def test_parse_edgelist_basic():
    G = parse_edgelist([
        "# two triangles",
        "w x",
        "x y 0.5",
        "",
        "y w  # closing edge",
    ])
    assert list(G.nodes()) == ["w", "x", "y"]
    assert G.number_of_edges() == 3


def test_parse_edgelist_keeps_ids_as_strings():
    G = parse_edgelist(["1 2", "2 10"])
    assert set(G.nodes()) == {"1", "2", "10"}


def test_parse_edgelist_duplicate_edge():
    with pytest.raises(GraphValidationError, match="line 3: .*duplicate"):
        parse_edgelist(["a b", "b c", "b a"])


def test_parse_edgelist_self_loop():
    with pytest.raises(GraphValidationError, match="self-loop"):
        parse_edgelist(["a a"])


def test_parse_edgelist_malformed_line():
    with pytest.raises(GraphValidationError, match="line 2"):
        parse_edgelist(["a b", "c"])


def test_read_edgelist(tmp_path):
    path = tmp_path / "graph.txt"
    path.write_text("s p\ns q\ns r\n", encoding="utf-8")
    G = read_edgelist(path)
    assert G.degree("s") == 3


# --- query graphs ---

def test_edges_to_query_graph():
    q = edges_to_query_graph([(1, 2), (2, 3)], label="p3")
    assert isinstance(q, QueryGraph)
    assert q.label == "p3"
    assert set(q.nodes()) == {"1", "2", "3"}


def test_edges_to_query_graph_duplicate():
    with pytest.raises(GraphValidationError, match="duplicate"):
        edges_to_query_graph([("a", "b"), ("a", "b")])


# --- graph6 ---

def test_g6_to_graph_triangle():
    q = g6_to_graph("Bw")
    assert set(q.nodes()) == {"0", "1", "2"}
    assert q.number_of_edges() == 3
    assert q.label == "K3"


def test_g6_to_graph_header():
    q = g6_to_graph(">>graph6<<Bw", label="tri")
    assert q.label == "tri"
