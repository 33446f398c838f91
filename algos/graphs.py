"""Graph algorithms: shortest paths, traversal, bipartiteness, ordering, spanning trees."""

from __future__ import annotations

import math
import string
from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    """A weighted edge from ``u`` to ``v``."""

    u: int
    v: int
    weight: int


class NegativeCycleError(ValueError):
    """Raised when a graph holds a cycle of negative total weight."""


class Graph:
    """An undirected graph stored as adjacency lists.

    Each new neighbour goes to the front of a vertex's list.
    """

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self._adjacency: list[list[int]] = [[] for _ in range(vertex_count)]

    def __len__(self) -> int:
        return len(self._adjacency)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise IndexError(f"vertex {vertex} out of range")

    def add_edge(self, u: int, v: int) -> None:
        """Connect ``u`` and ``v`` in both directions."""
        self._check(u)
        self._check(v)
        self._adjacency[u].insert(0, v)
        self._adjacency[v].insert(0, u)

    def neighbours(self, vertex: int) -> list[int]:
        """Vertices adjacent to ``vertex``, most recently added first."""
        self._check(vertex)
        return list(self._adjacency[vertex])


def bellman_ford(
    vertex_count: int, edges: Iterable[Edge], source: int
) -> list[float]:
    """Shortest distances from ``source``; unreachable vertices get ``math.inf``.

    Raises ``NegativeCycleError`` when a reachable negative cycle exists.
    """
    if not 0 <= source < vertex_count:
        raise IndexError(f"source {source} out of range")
    edge_list = list(edges)
    for edge in edge_list:
        if not (0 <= edge.u < vertex_count and 0 <= edge.v < vertex_count):
            raise IndexError(f"edge {edge} refers to a missing vertex")
    dist: list[float] = [math.inf] * vertex_count
    dist[source] = 0
    for _ in range(vertex_count - 1):
        for edge in edge_list:
            candidate = dist[edge.u] + edge.weight
            if candidate < dist[edge.v]:
                dist[edge.v] = candidate
    if any(dist[edge.u] + edge.weight < dist[edge.v] for edge in edge_list):
        raise NegativeCycleError("graph contains a negative-weight cycle")
    return dist


def breadth_first(graph: Graph, start: int) -> list[int]:
    """Vertices reachable from ``start`` in breadth-first visiting order."""
    visited = {start}
    order: list[int] = []
    queue = deque([start])
    graph.neighbours(start)
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for neighbour in graph.neighbours(vertex):
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return order


def is_bipartite(graph: Graph) -> bool:
    """True when the vertices can be two-coloured with no edge inside a colour."""
    colour: dict[int, int] = {}
    for first in range(len(graph)):
        if first in colour:
            continue
        colour[first] = 1
        stack = [first]
        while stack:
            vertex = stack.pop()
            for neighbour in graph.neighbours(vertex):
                if neighbour not in colour:
                    colour[neighbour] = 1 - colour[vertex]
                    stack.append(neighbour)
                elif colour[neighbour] == colour[vertex]:
                    return False
    return True


def topological_sort(adjacency: Sequence[Iterable[int]]) -> list[int]:
    """Order the vertices of a directed graph so every edge points forward.

    Uses Kahn's algorithm. Vertices on or behind a cycle are left out, so a
    result shorter than the vertex count means the graph is not acyclic.
    """
    successors = [list(targets) for targets in adjacency]
    indegree = [0] * len(successors)
    for targets in successors:
        for target in targets:
            indegree[target] += 1
    queue = deque(vertex for vertex, count in enumerate(indegree) if count == 0)
    order: list[int] = []
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for target in successors[vertex]:
            indegree[target] -= 1
            if indegree[target] == 0:
                queue.append(target)
    return order


def kruskal(matrix: Sequence[Sequence[int]]) -> list[Edge]:
    """Minimum spanning forest of a cost adjacency matrix (0 means no edge).

    Edges are read from the lower triangle as ``Edge(i, j, cost)`` with
    ``i > j`` and returned in the order they were accepted.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("cost matrix must be square")
    candidates = [
        Edge(i, j, matrix[i][j])
        for i in range(1, size)
        for j in range(i)
        if matrix[i][j] != 0
    ]
    candidates.sort(key=lambda edge: edge.weight)
    parent = list(range(size))

    def find(vertex: int) -> int:
        while parent[vertex] != vertex:
            parent[vertex] = parent[parent[vertex]]
            vertex = parent[vertex]
        return vertex

    tree: list[Edge] = []
    for edge in candidates:
        root_u, root_v = find(edge.u), find(edge.v)
        if root_u != root_v:
            tree.append(edge)
            parent[root_v] = root_u
    return tree


def spanning_tree_cost(edges: Iterable[Edge]) -> int:
    """Total weight of the given edges."""
    return sum(edge.weight for edge in edges)


def _vertex_name(vertex: int) -> str:
    if not 0 <= vertex < len(string.ascii_uppercase):
        raise ValueError(f"vertex {vertex} has no letter name")
    return string.ascii_uppercase[vertex]


def format_spanning_tree(edges: Iterable[Edge]) -> str:
    """Report listing each edge by vertex letters, followed by the total cost."""
    edge_list = list(edges)
    lines = "".join(
        f"\n{_vertex_name(edge.u)} - {_vertex_name(edge.v)} : {edge.weight}"
        for edge in edge_list
    )
    return f"{lines}\nSpanning tree cost: {spanning_tree_cost(edge_list)}"