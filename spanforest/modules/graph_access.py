from __future__ import annotations
from typing import Iterator
import networkx as nx
from ..custom_types import Node, WeightedEdge, InvalidGraphError
import consts

"""
Read-only view of a networkx graph as the spanning tree algorithms see it.

Both algorithms name an edge by the same tuple, (u, v) for simple graphs and
(u, v, key) for multigraphs, with u and v in the order that graph.edges()
reports them. incident_edges() hands back that same identity so a Prim tree
and a Kruskal tree over one graph can be compared edge for edge.
"""


def validate_graph(graph) -> None:
    if graph is None:
        raise InvalidGraphError("graph must not be None")
    if not isinstance(graph, nx.Graph):
        raise InvalidGraphError("expected a networkx graph, got %s" % type(graph).__name__)
    if graph.is_directed():
        raise InvalidGraphError("spanning trees are only defined here for undirected graphs")


def vertices(graph: nx.Graph) -> list[Node]:
    return list(graph.nodes)


def weighted_edges(graph: nx.Graph) -> Iterator[WeightedEdge]:
    """Yields every edge of graph as (edge, u, v, weight)."""

    if graph.is_multigraph():
        for u, v, key, w in graph.edges(keys=True, data=consts.WEIGHT_ATTR, default=consts.DEFAULT_WEIGHT):
            yield (u, v, key), u, v, w
    else:
        for u, v, w in graph.edges(data=consts.WEIGHT_ATTR, default=consts.DEFAULT_WEIGHT):
            yield (u, v), u, v, w


def incident_edges(graph: nx.Graph, node: Node, order: dict[Node, int]) -> Iterator[WeightedEdge]:
    """
    Yields every edge touching node as (edge, node, neighbor, weight). A
    self-loop is yielded once with neighbor == node.

    Arguments:
        graph: undirected networkx graph
        node: vertex whose incident edges are wanted
        order: position of each vertex in graph.nodes, used to recover the
        orientation graph.edges() gives the edge
    Returns:
        iterator over weighted incident edges
    """

    if graph.is_multigraph():
        for _, nbr, key, w in graph.edges(node, keys=True, data=consts.WEIGHT_ATTR, default=consts.DEFAULT_WEIGHT):
            yield _edge_identity(node, nbr, order) + (key,), node, nbr, w
    else:
        for _, nbr, w in graph.edges(node, data=consts.WEIGHT_ATTR, default=consts.DEFAULT_WEIGHT):
            yield _edge_identity(node, nbr, order), node, nbr, w


def _edge_identity(node: Node, nbr: Node, order: dict[Node, int]) -> tuple:
    # graph.edges() reports each edge from whichever endpoint was added to the graph first
    if order[nbr] < order[node]:
        return (nbr, node)
    return (node, nbr)
