from __future__ import annotations
import heapq
import itertools
import networkx as nx
from ..custom_types import Edge, Node, SpanningTree
from .graph_access import validate_graph, vertices, incident_edges
import logging
logger = logging.getLogger(__name__)


def prim_spanning_tree(graph: nx.Graph) -> SpanningTree:
    """
    Prim's algorithm, restarted from every vertex not yet reached so that
    disconnected graphs produce a spanning forest.

    The frontier is a plain heap of edges leaving the visited set. Entries
    whose far endpoint got visited after they were pushed are skipped when
    popped instead of being removed, so every edge is pushed at most twice.

    Arguments:
        graph: undirected networkx Graph or MultiGraph
    Returns:
        SpanningTree holding the selected edges and their total weight
    """

    validate_graph(graph)
    nodes = vertices(graph)
    order: dict[Node, int] = {n: i for i, n in enumerate(nodes)}
    visited: set[Node] = set()
    tree_edges: list[Edge] = []
    weight = 0.0
    # ties on weight go to whichever edge was pushed first; nodes are never compared
    counter = itertools.count()

    for root in nodes:
        if root in visited:
            continue
        visited.add(root)
        frontier: list = []
        _push_incident(graph, root, order, visited, frontier, counter)
        component_size = 1
        while frontier:
            w, _, edge, far = heapq.heappop(frontier)
            if far in visited:
                continue
            visited.add(far)
            tree_edges.append(edge)
            weight += w
            component_size += 1
            _push_incident(graph, far, order, visited, frontier, counter)
        logger.debug(f"prim: component rooted at {root!r} spans {component_size} nodes")

    return SpanningTree(tree_edges, weight)


def _push_incident(graph: nx.Graph, node: Node, order: dict[Node, int], visited: set[Node], frontier: list, counter) -> None:
    for edge, _, nbr, w in incident_edges(graph, node, order):
        if nbr not in visited:
            heapq.heappush(frontier, (w, next(counter), edge, nbr))
