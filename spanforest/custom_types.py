from __future__ import annotations
from typing import Callable, Hashable, Iterable, Iterator, Optional, Tuple, Union
import networkx as nx


Node: type = Hashable
Edge: type = Union[Tuple[Node, Node], Tuple[Node, Node, Hashable]]
WeightedEdge: type = Tuple[Edge, Node, Node, float]


class InvalidGraphError(ValueError):
    """Raised when a spanning tree is requested for something that is not an undirected networkx graph."""


class UnknownAlgorithmError(KeyError):
    """Raised when a spanning tree algorithm is looked up by a name that is not registered."""


class SpanningTree:
    """
    Immutable result of a minimum spanning tree computation. When the input
    graph is disconnected this is really a spanning forest, holding |V| - k
    edges for a graph with k connected components.

    Fields:
        edges: frozenset of selected edge identities, (u, v) for simple graphs
        and (u, v, key) for multigraphs
        weight: sum of the weights of the selected edges

    Methods:
        to_graph: builds a networkx MultiGraph out of the selected edges
    """

    __slots__ = ("_edges", "_weight")

    _edges: frozenset[Edge]
    _weight: float

    def __init__(self, edges: Iterable[Edge], weight: float) -> None:
        object.__setattr__(self, "_edges", frozenset(edges))
        object.__setattr__(self, "_weight", float(weight))

    def __setattr__(self, name, value):
        raise AttributeError("%s is immutable" % self.__class__.__name__)

    @property
    def edges(self) -> frozenset[Edge]:
        return self._edges

    @property
    def weight(self) -> float:
        return self._weight

    def __len__(self) -> int:
        return len(self._edges)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self._edges)

    def __contains__(self, edge) -> bool:
        """Edge membership that ignores which endpoint is listed first."""

        if edge in self._edges:
            return True
        if isinstance(edge, tuple) and len(edge) >= 2:
            return (edge[1], edge[0], *edge[2:]) in self._edges
        return False

    def has_edge(self, u: Node, v: Node) -> bool:
        """True if any selected edge joins u and v, regardless of edge key."""

        return any({e[0], e[1]} == {u, v} for e in self._edges)

    def to_graph(self, nodes: Optional[Iterable[Node]] = None) -> nx.MultiGraph:
        forest: nx.MultiGraph = nx.MultiGraph()
        if nodes is not None:
            forest.add_nodes_from(nodes)
        for edge in self._edges:
            forest.add_edge(*edge)
        return forest

    def __eq__(self, other) -> bool:
        if not isinstance(other, SpanningTree):
            return NotImplemented
        return self._edges == other._edges and self._weight == other._weight

    def __hash__(self) -> int:
        return hash((self._edges, self._weight))

    def __repr__(self) -> str:
        number_of_edges = len(self)
        s = "" if number_of_edges == 1 else "s"
        return "<%s [%d edge%s], weight: %s>" % (self.__class__.__name__, number_of_edges, s, self._weight)


SpanningTreeAlgorithm: type = Callable[[nx.Graph], SpanningTree]
