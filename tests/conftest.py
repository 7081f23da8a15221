import networkx as nx
import pytest

from motiftools.graphs.model import QueryGraph


def make_graph(edges, nodes=None):
    """Simple graph with string vertices, nodes first so their order is fixed."""
    G = nx.Graph()
    if nodes is not None:
        G.add_nodes_from(nodes)
    G.add_edges_from(edges)
    return G


@pytest.fixture
def triangle_query():
    return QueryGraph([("a", "b"), ("b", "c"), ("c", "a")], label="triangle")


@pytest.fixture
def path4_query():
    return QueryGraph([("a", "b"), ("b", "c"), ("c", "d")], label="path")


@pytest.fixture
def two_triangles():
    # triangles w-x-y and w-y-z sharing the edge w-y
    return make_graph([("w", "x"), ("x", "y"), ("y", "w"), ("w", "z"), ("z", "y")])


@pytest.fixture
def star():
    return make_graph([("s", "p"), ("s", "q"), ("s", "r"), ("s", "t")])
