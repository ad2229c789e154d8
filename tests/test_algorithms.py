import networkx as nx
import pytest
from spanforest.custom_types import InvalidGraphError
from spanforest.modules.utils import check_spanning_forest


def test_disconnected_graph_gives_forest(algorithm, disconnected_squares):
    tree = algorithm(disconnected_squares)
    assert tree.weight == 60.0
    assert len(tree) == 6
    for u, v in [("A", "B"), ("A", "C"), ("B", "D"), ("E", "G"), ("G", "H"), ("F", "H")]:
        assert (u, v) in tree
    assert not tree.has_edge("C", "D")
    assert not tree.has_edge("E", "F")


def test_connected_graph(algorithm, connected_five):
    tree = algorithm(connected_five)
    assert tree.weight == 15.0
    assert tree.edges == frozenset({("A", "B"), ("A", "C"), ("B", "D"), ("D", "E")})


def test_empty_graph(algorithm):
    tree = algorithm(nx.Graph())
    assert len(tree) == 0
    assert tree.weight == 0.0


def test_single_vertex(algorithm):
    g = nx.Graph()
    g.add_node("A")
    tree = algorithm(g)
    assert len(tree) == 0
    assert tree.weight == 0.0


def test_isolated_vertices_contribute_no_edges(algorithm):
    g = nx.Graph()
    g.add_nodes_from(range(5))
    g.add_edge(0, 1, weight=1.0)
    tree = algorithm(g)
    assert tree.edges == frozenset({(0, 1)})
    assert check_spanning_forest(g, tree)


def test_parallel_edges_keep_lightest_copy(algorithm):
    g = nx.MultiGraph()
    g.add_edge("A", "B", weight=3.0)
    g.add_edge("A", "B", weight=1.0)
    g.add_edge("B", "A", weight=2.0)
    g.add_edge("B", "C", weight=4.0)
    tree = algorithm(g)
    assert tree.weight == 5.0
    assert tree.edges == frozenset({("A", "B", 1), ("B", "C", 0)})


def test_lighter_path_beats_parallel_edges(algorithm):
    g = nx.MultiGraph()
    g.add_edge("A", "B", weight=10.0)
    g.add_edge("A", "B", weight=9.0)
    g.add_edge("A", "C", weight=1.0)
    g.add_edge("C", "B", weight=2.0)
    tree = algorithm(g)
    assert tree.weight == 3.0
    assert not tree.has_edge("A", "B")


def test_self_loops_are_never_selected(algorithm):
    g = nx.MultiGraph()
    g.add_edge("A", "A", weight=-5.0)
    g.add_edge("A", "B", weight=1.0)
    g.add_edge("B", "B", weight=0.0)
    tree = algorithm(g)
    assert tree.edges == frozenset({("A", "B", 0)})
    assert tree.weight == 1.0


def test_only_self_loops(algorithm):
    g = nx.MultiGraph()
    g.add_edge(1, 1, weight=1.0)
    g.add_edge(1, 1, weight=2.0)
    tree = algorithm(g)
    assert len(tree) == 0
    assert tree.weight == 0.0


def test_negative_and_zero_weights(algorithm):
    g = nx.Graph()
    g.add_weighted_edges_from([(0, 1, -4.0), (1, 2, 0.0), (0, 2, -1.0), (2, 3, 2.5)])
    tree = algorithm(g)
    assert tree.weight == pytest.approx(-2.5)
    assert tree.edges == frozenset({(0, 1), (0, 2), (2, 3)})


def test_missing_weight_defaults_to_one(algorithm):
    g = nx.path_graph(4)
    tree = algorithm(g)
    assert tree.weight == 3.0
    assert len(tree) == 3


def test_simple_graph_edges_named_like_graph_edges(algorithm, connected_five):
    tree = algorithm(connected_five)
    assert tree.edges <= set(connected_five.edges)


def test_multigraph_edges_named_like_graph_edges(algorithm):
    g = nx.MultiGraph()
    g.add_nodes_from([3, 1, 2])
    g.add_weighted_edges_from([(2, 3, 1.0), (1, 3, 2.0), (2, 1, 5.0), (1, 2, 0.5)])
    tree = algorithm(g)
    assert tree.edges <= set(g.edges(keys=True))
    assert tree.weight == 1.5


def test_none_graph_is_rejected(algorithm):
    with pytest.raises(InvalidGraphError):
        algorithm(None)


def test_non_graph_is_rejected(algorithm):
    with pytest.raises(InvalidGraphError):
        algorithm([("A", "B", 1.0)])


def test_directed_graph_is_rejected(algorithm):
    with pytest.raises(InvalidGraphError):
        algorithm(nx.DiGraph([(0, 1)]))


def test_graph_is_not_mutated(algorithm, disconnected_squares):
    before = nx.to_dict_of_dicts(disconnected_squares)
    algorithm(disconnected_squares)
    assert nx.to_dict_of_dicts(disconnected_squares) == before


def test_repeated_runs_are_identical(algorithm):
    g = nx.Graph()
    # every weight ties, so only the tie-break decides
    g.add_weighted_edges_from([(u, v, 1.0) for u in range(6) for v in range(u + 1, 6)])
    assert algorithm(g) == algorithm(g)
