from __future__ import annotations
from disjoint_set import DisjointSet
from typing import Optional
import math
import random
import networkx as nx
from ..custom_types import SpanningTree
import consts
import logging
logger = logging.getLogger(__name__)


def check_spanning_forest(graph: nx.Graph, tree: SpanningTree) -> bool:
    """
    Independently verifies that tree is a spanning forest of graph: every
    edge belongs to graph, no edge closes a cycle, and there are exactly
    |V| - k edges for k connected components. Says nothing about minimality.
    """

    ds: DisjointSet = DisjointSet()
    for node in graph.nodes:
        ds.find(node)
    for edge in tree.edges:
        u, v = edge[0], edge[1]
        if not graph.has_edge(*edge):
            logger.warning(f"edge {edge} is not in the graph")
            return False
        if ds.connected(u, v):
            logger.warning(f"edge {edge} closes a cycle")
            return False
        ds.union(u, v)
    expected = graph.number_of_nodes() - nx.number_connected_components(graph)
    if len(tree) != expected:
        logger.warning(f"forest has {len(tree)} edges, expected {expected}")
        return False
    return True


def gen_random_weighted_graph(n_nodes: int, edge_prob: float, seed: Optional[int] = None, multigraph: bool = True) -> nx.Graph:
    """
    Generates a G(n, p) random graph where every edge gets an independent
    uniform random weight in [0, 1).

    Arguments:
        n_nodes: number of vertices, labeled 0..n_nodes-1
        edge_prob: probability of each possible edge being present
        seed: seeds both the graph structure and the weights
        multigraph: return an nx.MultiGraph instead of an nx.Graph
    Returns:
        weighted undirected graph
    """

    rng = random.Random(seed)
    structure: nx.Graph = nx.gnp_random_graph(n_nodes, edge_prob, seed=rng)
    graph: nx.Graph = nx.MultiGraph() if multigraph else nx.Graph()
    graph.add_nodes_from(structure.nodes)
    for u, v in structure.edges:
        graph.add_edge(u, v, **{consts.WEIGHT_ATTR: rng.random()})
    return graph


def weights_match(a: float, b: float) -> bool:
    return math.isclose(a, b, rel_tol=0.0, abs_tol=consts.WEIGHT_TOLERANCE)
