"""Graph traversals, shortest paths, spanning trees and tree queries."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Hashable, Iterable, Mapping, Sequence
from typing import Any, NamedTuple, Union

__all__ = [
    "Edge",
    "NegativeCycleError",
    "build_undirected",
    "bfs_order",
    "bfs_levels",
    "dfs_order",
    "connected_components",
    "has_cycle",
    "is_bipartite",
    "topological_sort",
    "bellman_ford",
    "kruskal",
    "prim",
    "lowest_common_ancestor",
    "tree_diameter",
    "subtree_sums",
]

Adjacency = Union[Mapping[Any, Sequence[Any]], Sequence[Sequence[Any]]]


class Edge(NamedTuple):
    """A weighted edge from ``u`` to ``v``."""

    u: int
    v: int
    weight: float


class NegativeCycleError(ValueError):
    """Raised when a negative-weight cycle is reachable from the source."""


def _neighbours(adjacency: Adjacency, vertex: Any) -> Sequence[Any]:
    if isinstance(adjacency, Mapping):
        return adjacency.get(vertex, ())
    if isinstance(vertex, int) and 0 <= vertex < len(adjacency):
        return adjacency[vertex]
    return ()


def build_undirected(edges: Iterable[tuple[Hashable, Hashable]]) -> dict[Any, list[Any]]:
    """Build an adjacency dict in which every edge is listed at both ends."""
    adjacency: dict[Any, list[Any]] = {}
    for a, b in edges:
        adjacency.setdefault(a, []).append(b)
        adjacency.setdefault(b, []).append(a)
    return adjacency


def bfs_order(adjacency: Adjacency, start: Any) -> list[Any]:
    """Vertices reachable from ``start`` in breadth-first order."""
    return list(bfs_levels(adjacency, start))


def bfs_levels(adjacency: Adjacency, start: Any) -> dict[Any, int]:
    """Distance in edges from ``start`` to each reachable vertex, in visit order."""
    levels = {start: 0}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for child in _neighbours(adjacency, current):
            if child not in levels:
                levels[child] = levels[current] + 1
                queue.append(child)
    return levels


def dfs_order(adjacency: Adjacency, start: Any) -> list[Any]:
    """Vertices reachable from ``start`` in depth-first (preorder) order."""
    order = [start]
    visited = {start}
    stack = [iter(_neighbours(adjacency, start))]
    while stack:
        for child in stack[-1]:
            if child not in visited:
                visited.add(child)
                order.append(child)
                stack.append(iter(_neighbours(adjacency, child)))
                break
        else:
            stack.pop()
    return order


def connected_components(adjacency: Adjacency, vertices: Iterable[Any]) -> list[list[Any]]:
    """Split ``vertices`` into connected components, each in depth-first order."""
    seen: set[Any] = set()
    components: list[list[Any]] = []
    for vertex in vertices:
        if vertex in seen:
            continue
        component = dfs_order(adjacency, vertex)
        seen.update(component)
        components.append(component)
    return components


def has_cycle(adjacency: Adjacency, vertices: Iterable[Any]) -> bool:
    """True if the undirected graph has a cycle; self-loops are ignored."""
    visited: set[Any] = set()
    for start in vertices:
        if start in visited:
            continue
        visited.add(start)
        # Each frame: vertex, parent, neighbour iterator, whether the parent edge was skipped.
        stack: list[list[Any]] = [[start, None, iter(_neighbours(adjacency, start)), False]]
        while stack:
            frame = stack[-1]
            vertex, parent, neighbours = frame[0], frame[1], frame[2]
            for child in neighbours:
                if child == vertex:
                    continue
                if parent is not None and child == parent and not frame[3]:
                    frame[3] = True
                    continue
                if child in visited:
                    return True
                visited.add(child)
                stack.append([child, vertex, iter(_neighbours(adjacency, child)), False])
                break
            else:
                stack.pop()
    return False


def is_bipartite(adjacency: Adjacency, vertex_count: int) -> bool:
    """True if vertices ``0..vertex_count-1`` can be two-coloured."""
    colour: dict[int, int] = {}
    for start in range(vertex_count):
        if start in colour:
            continue
        colour[start] = 1
        stack = [start]
        while stack:
            vertex = stack.pop()
            for child in _neighbours(adjacency, vertex):
                if child not in colour:
                    colour[child] = 1 - colour[vertex]
                    stack.append(child)
                elif colour[child] == colour[vertex]:
                    return False
    return True


def topological_sort(vertex_count: int, adjacency: Adjacency) -> list[int]:
    """Kahn's algorithm over vertices ``0..vertex_count-1`` of a directed graph."""
    indegree = [0] * vertex_count
    for vertex in range(vertex_count):
        for child in _neighbours(adjacency, vertex):
            indegree[child] += 1
    queue = deque(v for v in range(vertex_count) if indegree[v] == 0)
    order: list[int] = []
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for child in _neighbours(adjacency, vertex):
            indegree[child] -= 1
            if indegree[child] == 0:
                queue.append(child)
    if len(order) != vertex_count:
        raise ValueError("graph has a cycle")
    return order


def bellman_ford(
    vertex_count: int, edges: Iterable[Edge | tuple[int, int, float]], source: int
) -> list[float]:
    """Shortest distances from ``source``; unreachable vertices are ``math.inf``."""
    edge_list = [Edge(*edge) for edge in edges]
    dist = [math.inf] * vertex_count
    dist[source] = 0
    for _ in range(vertex_count - 1):
        changed = False
        for u, v, weight in edge_list:
            if dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
                changed = True
        if not changed:
            break
    for u, v, weight in edge_list:
        if dist[u] + weight < dist[v]:
            raise NegativeCycleError("graph contains a negative-weight cycle")
    return dist


def _square(weights: Iterable[Sequence[float]]) -> list[list[float]]:
    rows = [list(row) for row in weights]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("weight matrix is not square")
    return rows


def kruskal(weights: Iterable[Sequence[float]]) -> list[Edge]:
    """Minimum spanning forest of a weight matrix (0 means no edge)."""
    rows = _square(weights)
    n = len(rows)
    candidates = [
        Edge(i, j, rows[i][j]) for i in range(1, n) for j in range(i) if rows[i][j] != 0
    ]
    candidates.sort(key=lambda edge: edge.weight)
    parent = list(range(n))

    def find(x: int) -> int:
        while parent[x] != x:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    chosen: list[Edge] = []
    for edge in candidates:
        a, b = find(edge.u), find(edge.v)
        if a != b:
            parent[b] = a
            chosen.append(edge)
    return chosen


def prim(weights: Iterable[Sequence[float]]) -> list[Edge]:
    """Minimum spanning tree of a connected weight matrix (0 means no edge).

    Returns ``Edge(parent, v, weight)`` for each vertex ``v`` from 1 upwards.
    """
    rows = _square(weights)
    n = len(rows)
    if n == 0:
        return []
    key = [math.inf] * n
    parent: list[int] = [-1] * n
    in_tree = [False] * n
    key[0] = 0
    for _ in range(n):
        u = min((v for v in range(n) if not in_tree[v]), key=key.__getitem__)
        if key[u] == math.inf:
            raise ValueError("graph is not connected")
        in_tree[u] = True
        for v in range(n):
            weight = rows[u][v]
            if weight and not in_tree[v] and weight < key[v]:
                parent[v] = u
                key[v] = weight
    return [Edge(parent[v], v, rows[v][parent[v]]) for v in range(1, n)]


def _tree_walk(
    edges: Iterable[tuple[Any, Any]], root: Any
) -> tuple[dict[Any, Any], dict[Any, int], list[Any]]:
    """Parents, depths and preorder of a tree rooted at ``root``."""
    adjacency = build_undirected(edges)
    parents: dict[Any, Any] = {root: None}
    depths = {root: 0}
    order: list[Any] = []
    stack = [root]
    while stack:
        vertex = stack.pop()
        order.append(vertex)
        for child in reversed(adjacency.get(vertex, [])):
            if child in parents:
                continue
            parents[child] = vertex
            depths[child] = depths[vertex] + 1
            stack.append(child)
    return parents, depths, order


def lowest_common_ancestor(
    edges: Iterable[tuple[Any, Any]], root: Any, a: Any, b: Any
) -> Any:
    """Deepest vertex that lies on the paths from ``root`` to both ``a`` and ``b``."""
    parents, _, _ = _tree_walk(edges, root)
    for vertex in (a, b):
        if vertex not in parents:
            raise ValueError(f"vertex {vertex!r} is not in the tree")
    ancestors = set()
    vertex = a
    while vertex is not None:
        ancestors.add(vertex)
        vertex = parents[vertex]
    vertex = b
    while vertex not in ancestors:
        vertex = parents[vertex]
    return vertex


def tree_diameter(edges: Iterable[tuple[Any, Any]]) -> int:
    """Number of edges on the longest path in a tree."""
    edge_list = list(edges)
    if not edge_list:
        return 0
    start = edge_list[0][0]
    _, depths, _ = _tree_walk(edge_list, start)
    farthest = max(depths, key=depths.__getitem__)
    _, depths, _ = _tree_walk(edge_list, farthest)
    return max(depths.values())


def subtree_sums(edges: Iterable[tuple[int, int]], root: int) -> dict[int, tuple[int, int]]:
    """For each vertex: (sum of vertex labels in its subtree, count of even labels)."""
    parents, _, order = _tree_walk(edges, root)
    totals = {v: v for v in order}
    evens = {v: 1 if v % 2 == 0 else 0 for v in order}
    for vertex in reversed(order):
        parent = parents[vertex]
        if parent is not None:
            totals[parent] += totals[vertex]
            evens[parent] += evens[vertex]
    return {v: (totals[v], evens[v]) for v in sorted(order)}