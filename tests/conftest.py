import networkx as nx
import pytest
from spanforest.modules.kruskal import kruskal_spanning_tree
from spanforest.modules.prim import prim_spanning_tree


@pytest.fixture(params=[kruskal_spanning_tree, prim_spanning_tree], ids=["kruskal", "prim"])
def algorithm(request):
    return request.param


@pytest.fixture
def disconnected_squares() -> nx.Graph:
    """
    Two squares sharing no vertices:

      A -- B   E -- F
      |    |   |    |
      C -- D   G -- H
    """

    g = nx.Graph()
    g.add_nodes_from("ABCDEFGH")
    g.add_weighted_edges_from([
        ("A", "B", 5), ("A", "C", 10), ("B", "D", 15), ("C", "D", 20),
        ("E", "F", 20), ("E", "G", 15), ("G", "H", 10), ("F", "H", 5),
    ])
    return g


@pytest.fixture
def connected_five() -> nx.Graph:
    g = nx.Graph()
    g.add_nodes_from("ABCDE")
    g.add_weighted_edges_from([
        ("A", "B", 2), ("A", "C", 3), ("B", "D", 5),
        ("C", "D", 20), ("D", "E", 5), ("A", "E", 100),
    ])
    return g
