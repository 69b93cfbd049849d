"""Adjacency-list graphs, traversals, shortest paths and a disjoint-set forest."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass


class Graph:
    """Graph on vertices ``0 .. vertices - 1`` stored as adjacency lists.

    Neighbours keep the order in which their edges were added, and every
    traversal visits them in that order.
    """

    def __init__(self, vertices: int, directed: bool = False) -> None:
        if vertices < 0:
            raise ValueError(f"vertex count must not be negative, got {vertices}")
        self._adjacency: list[list[int]] = [[] for _ in range(vertices)]
        self._directed = directed

    @property
    def vertices(self) -> int:
        return len(self._adjacency)

    @property
    def directed(self) -> bool:
        return self._directed

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        return f"Graph(vertices={self.vertices}, directed={self._directed})"

    def _check(self, u: int) -> None:
        if not 0 <= u < len(self._adjacency):
            raise IndexError(f"vertex {u} is not in a graph of {self.vertices} vertices")

    def add_edge(self, u: int, v: int) -> None:
        """Add the edge ``u -> v``, and ``v -> u`` too when the graph is undirected."""
        self._check(u)
        self._check(v)
        self._adjacency[u].append(v)
        if not self._directed:
            self._adjacency[v].append(u)

    def neighbours(self, u: int) -> list[int]:
        """Return the vertices reachable from ``u`` by one edge, in insertion order."""
        self._check(u)
        return list(self._adjacency[u])

    def bfs(self, start: int = 0) -> list[int]:
        """Return the vertices reachable from ``start`` in breadth-first order."""
        self._check(start)
        seen = {start}
        order: list[int] = []
        pending = deque([start])
        while pending:
            u = pending.popleft()
            order.append(u)
            for v in self._adjacency[u]:
                if v not in seen:
                    seen.add(v)
                    pending.append(v)
        return order

    def _preorder(self, start: int, seen: set[int]) -> Iterator[int]:
        seen.add(start)
        yield start
        stack = [iter(self._adjacency[start])]
        while stack:
            for v in stack[-1]:
                if v not in seen:
                    seen.add(v)
                    yield v
                    stack.append(iter(self._adjacency[v]))
                    break
            else:
                stack.pop()

    def dfs(self, start: int = 0) -> list[int]:
        """Return the vertices reachable from ``start`` in depth-first order."""
        self._check(start)
        return list(self._preorder(start, set()))

    def has_path(self, src: int, dest: int) -> bool:
        """Return True if ``dest`` can be reached from ``src``."""
        self._check(src)
        self._check(dest)
        return any(v == dest for v in self._preorder(src, set()))

    def all_paths(self, src: int, dest: int) -> list[list[int]]:
        """Return every simple path from ``src`` to ``dest``, in depth-first order."""
        self._check(src)
        self._check(dest)
        on_path: set[int] = set()
        path: list[int] = []
        found: list[list[int]] = []

        def walk(u: int) -> None:
            if u == dest:
                found.append([*path, dest])
                return
            on_path.add(u)
            path.append(u)
            for v in self._adjacency[u]:
                if v not in on_path:
                    walk(v)
            path.pop()
            on_path.discard(u)

        walk(src)
        return found

    def is_bipartite(self) -> bool:
        """Return True if the vertices split into two sets with no edge inside either."""
        colour: dict[int, bool] = {}
        for start in range(self.vertices):
            if start in colour:
                continue
            colour[start] = False
            pending = deque([start])
            while pending:
                u = pending.popleft()
                for v in self._adjacency[u]:
                    if v not in colour:
                        colour[v] = not colour[u]
                        pending.append(v)
                    elif colour[v] == colour[u]:
                        return False
        return True

    def has_cycle(self) -> bool:
        """Return True if the graph contains a cycle.

        Directed graphs look for an edge back to a vertex on the current
        search path; undirected graphs for an edge to a visited vertex other
        than the parent.
        """
        if self._directed:
            return self._has_directed_cycle()
        return self._has_undirected_cycle()

    def _has_directed_cycle(self) -> bool:
        seen: set[int] = set()
        for start in range(self.vertices):
            if start in seen:
                continue
            seen.add(start)
            on_path = {start}
            stack: list[tuple[int, Iterator[int]]] = [(start, iter(self._adjacency[start]))]
            while stack:
                u, neighbours = stack[-1]
                for v in neighbours:
                    if v in on_path:
                        return True
                    if v not in seen:
                        seen.add(v)
                        on_path.add(v)
                        stack.append((v, iter(self._adjacency[v])))
                        break
                else:
                    on_path.discard(u)
                    stack.pop()
        return False

    def _has_undirected_cycle(self) -> bool:
        seen: set[int] = set()
        for start in range(self.vertices):
            if start in seen:
                continue
            seen.add(start)
            stack: list[tuple[int, int, Iterator[int]]] = [
                (start, -1, iter(self._adjacency[start]))
            ]
            while stack:
                u, parent, neighbours = stack[-1]
                for v in neighbours:
                    if v not in seen:
                        seen.add(v)
                        stack.append((v, u, iter(self._adjacency[v])))
                        break
                    if v != parent:
                        return True
                else:
                    stack.pop()
        return False

    def topological_sort(self) -> list[int]:
        """Return all vertices so that each comes before those its edges lead to."""
        seen: set[int] = set()
        finished: list[int] = []
        for start in range(self.vertices):
            if start in seen:
                continue
            seen.add(start)
            stack: list[tuple[int, Iterator[int]]] = [(start, iter(self._adjacency[start]))]
            while stack:
                u, neighbours = stack[-1]
                for v in neighbours:
                    if v not in seen:
                        seen.add(v)
                        stack.append((v, iter(self._adjacency[v])))
                        break
                else:
                    finished.append(u)
                    stack.pop()
        finished.reverse()
        return finished


@dataclass(frozen=True)
class Edge:
    """Weighted edge leading to vertex ``v``."""

    v: int
    wt: int


def bellman_ford(graph: Sequence[Iterable[Edge]], src: int) -> list[float]:
    """Return shortest distances from ``src`` in a graph that may have negative weights.

    ``graph[u]`` holds the edges leaving ``u``. Unreachable vertices get
    ``math.inf``. Every edge is relaxed ``V - 1`` times; negative cycles are
    not reported.
    """
    size = len(graph)
    if not 0 <= src < size:
        raise IndexError(f"vertex {src} is not in a graph of {size} vertices")
    edges = [list(out) for out in graph]
    dist: list[float] = [math.inf] * size
    dist[src] = 0
    for _ in range(size - 1):
        for u, out in enumerate(edges):
            if dist[u] == math.inf:
                continue
            for edge in out:
                candidate = dist[u] + edge.wt
                if candidate < dist[edge.v]:
                    dist[edge.v] = candidate
    return dist


def can_finish(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> bool:
    """Return True if all courses can be taken.

    Each pair ``(a, b)`` means course ``b`` must be taken before course ``a``.
    """
    graph = Graph(num_courses, directed=True)
    for course, required in prerequisites:
        graph.add_edge(required, course)
    return not graph.has_cycle()


class DisjointSet:
    """Union-find forest with path compression and union by rank."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"size must not be negative, got {n}")
        self.parent: list[int] = list(range(n))
        self.rank: list[int] = [0] * n

    def __len__(self) -> int:
        return len(self.parent)

    def find(self, x: int) -> int:
        """Return the representative of ``x``'s set, compressing the path to it."""
        if not 0 <= x < len(self.parent):
            raise IndexError(f"element {x} is not in a set of {len(self.parent)}")
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of ``a`` and ``b``; return False if they were already one."""
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False
        if self.rank[root_a] == self.rank[root_b]:
            self.parent[root_b] = root_a
            self.rank[root_a] += 1
        elif self.rank[root_a] > self.rank[root_b]:
            self.parent[root_b] = root_a
        else:
            self.parent[root_a] = root_b
        return True

    def info(self) -> list[tuple[int, int]]:
        """Return ``(parent, rank)`` for each element in order."""
        return list(zip(self.parent, self.rank))