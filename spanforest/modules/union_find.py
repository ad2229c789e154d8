from __future__ import annotations
from typing import Iterable
from ..custom_types import Node


class DisjointSet:
    """
    Union-find over graph vertices with union by rank and path compression.
    Every vertex has to be registered with make_set() before any other
    operation touches it; using an unregistered vertex fails an assertion.

    Fields:
        parent: maps each vertex to its parent; roots map to themselves
        rank: upper bound on the height of the tree under each root
    """

    parent: dict[Node, Node]
    rank: dict[Node, int]

    def __init__(self, nodes: Iterable[Node] = ()) -> None:
        self.parent = {}
        self.rank = {}
        for node in nodes:
            self.make_set(node)

    def make_set(self, node: Node) -> None:
        assert node not in self.parent, f"{node!r} is already registered"
        self.parent[node] = node
        self.rank[node] = 0

    def find(self, node: Node) -> Node:
        assert node in self.parent, f"{node!r} was never registered with make_set()"
        root = node
        while self.parent[root] != root:
            root = self.parent[root]
        # point everything on the path straight at the root
        while self.parent[node] != root:
            self.parent[node], node = root, self.parent[node]
        return root

    def union(self, a: Node, b: Node) -> bool:
        """
        Merges the components of a and b.

        Returns:
            False if a and b were already connected, True if two components
            were merged
        """

        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        if self.rank[root_a] < self.rank[root_b]:
            root_a, root_b = root_b, root_a
        self.parent[root_b] = root_a
        if self.rank[root_a] == self.rank[root_b]:
            self.rank[root_a] += 1
        return True

    def connected(self, a: Node, b: Node) -> bool:
        return self.find(a) == self.find(b)

    def __contains__(self, node: Node) -> bool:
        return node in self.parent

    def __len__(self) -> int:
        return len(self.parent)

    def __repr__(self) -> str:
        return "<%s [%d nodes]>" % (self.__class__.__name__, len(self))
