from __future__ import annotations
from typing import Union
import networkx as nx
from linetimer import CodeTimer
from ..custom_types import SpanningTree, SpanningTreeAlgorithm, UnknownAlgorithmError
from .graph_access import validate_graph
from .kruskal import kruskal_spanning_tree
from .prim import prim_spanning_tree
import consts
import logging
logger = logging.getLogger(__name__)


SPANNING_TREE_ALGORITHMS: dict[str, SpanningTreeAlgorithm] = {
    "kruskal": kruskal_spanning_tree,
    "prim": prim_spanning_tree,
}


def get_algorithm(name: str) -> SpanningTreeAlgorithm:
    try:
        return SPANNING_TREE_ALGORITHMS[name]
    except KeyError:
        raise UnknownAlgorithmError(f"unknown spanning tree algorithm {name!r}, expected one of {sorted(SPANNING_TREE_ALGORITHMS)}") from None


def compute_spanning_tree(graph: nx.Graph, algorithm: Union[str, SpanningTreeAlgorithm] = consts.DEFAULT_ALGORITHM) -> SpanningTree:
    """
    Computes a minimum spanning forest of graph with the chosen algorithm.
    Every registered algorithm returns a forest of the same total weight; the
    exact edges may differ when several minimum forests exist.

    Arguments:
        graph: undirected networkx Graph or MultiGraph
        algorithm: name registered in SPANNING_TREE_ALGORITHMS, or any
        callable taking a graph and returning a SpanningTree
    Returns:
        the minimum spanning forest
    """

    validate_graph(graph)
    if isinstance(algorithm, str):
        algorithm = get_algorithm(algorithm)
    name = getattr(algorithm, "__name__", repr(algorithm))
    logger.info(f"using {name} on graph with {graph.number_of_nodes()} nodes and {graph.number_of_edges()} edges")
    with CodeTimer(name, logger_func=logger.debug):
        tree: SpanningTree = algorithm(graph)
    logger.info(f"{name} selected {len(tree)} edges with total weight {tree.weight}")
    return tree
