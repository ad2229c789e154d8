from __future__ import annotations
import networkx as nx
from ..custom_types import Edge, SpanningTree
from .graph_access import validate_graph, vertices, weighted_edges
from .union_find import DisjointSet
import logging
logger = logging.getLogger(__name__)


def kruskal_spanning_tree(graph: nx.Graph) -> SpanningTree:
    """
    Kruskal's algorithm. Sorts every edge by weight and keeps each edge that
    joins two different components of the forest built so far. Disconnected
    graphs produce a spanning forest.

    Equal weights are broken by graph.edges() order, since sorted() is
    stable, so repeated runs on the same graph pick the same edges.

    Arguments:
        graph: undirected networkx Graph or MultiGraph
    Returns:
        SpanningTree holding the selected edges and their total weight
    """

    validate_graph(graph)
    nodes = vertices(graph)
    ds: DisjointSet = DisjointSet(nodes)
    candidates = sorted((e for e in weighted_edges(graph) if e[1] != e[2]), key=lambda e: e[3])
    logger.debug(f"kruskal: sorted {len(candidates)} edges over {len(nodes)} nodes")

    max_edges = max(len(nodes) - 1, 0)
    tree_edges: list[Edge] = []
    weight = 0.0
    for edge, u, v, w in candidates:
        if len(tree_edges) == max_edges:
            break
        if ds.union(u, v):
            tree_edges.append(edge)
            weight += w
    return SpanningTree(tree_edges, weight)
