"""Undirected graphs stored as adjacency matrices: traversals, paths and
minimum spanning trees."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Iterator, Sequence

Matrix = Sequence[Sequence[int]]


def _check_vertex(vertex_count: int, vertex: int) -> None:
    if not 0 <= vertex < vertex_count:
        raise ValueError(f"vertex {vertex} out of range for {vertex_count} vertices")


def _size(matrix: Matrix) -> int:
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("adjacency matrix must be square")
    return n


def _neighbours(matrix: Matrix, vertex: int) -> Iterator[int]:
    return (i for i, weight in enumerate(matrix[vertex]) if weight and i != vertex)


def adjacency_matrix(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Symmetric 0/1 matrix for an undirected graph with the given edges."""
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    matrix = [[0] * vertex_count for _ in range(vertex_count)]
    for first, second in edges:
        _check_vertex(vertex_count, first)
        _check_vertex(vertex_count, second)
        matrix[first][second] = matrix[second][first] = 1
    return matrix


def weighted_matrix(
    vertex_count: int, edges: Iterable[tuple[int, int, int]]
) -> list[list[int]]:
    """Symmetric matrix of edge weights; 0 means no edge."""
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    matrix = [[0] * vertex_count for _ in range(vertex_count)]
    for first, second, weight in edges:
        _check_vertex(vertex_count, first)
        _check_vertex(vertex_count, second)
        matrix[first][second] = matrix[second][first] = weight
    return matrix


def _dfs_visit(matrix: Matrix, start: int, visited: list[bool]) -> list[int]:
    order = [start]
    visited[start] = True
    stack = [_neighbours(matrix, start)]
    while stack:
        for following in stack[-1]:
            if not visited[following]:
                visited[following] = True
                order.append(following)
                stack.append(_neighbours(matrix, following))
                break
        else:
            stack.pop()
    return order


def _bfs_visit(matrix: Matrix, start: int, visited: list[bool]) -> list[int]:
    order = []
    visited[start] = True
    pending = deque([start])
    while pending:
        vertex = pending.popleft()
        order.append(vertex)
        for neighbour in _neighbours(matrix, vertex):
            if not visited[neighbour]:
                visited[neighbour] = True
                pending.append(neighbour)
    return order


def dfs_from(matrix: Matrix, start: int) -> list[int]:
    """Depth-first visiting order from ``start``, lower-numbered neighbours first."""
    n = _size(matrix)
    _check_vertex(n, start)
    return _dfs_visit(matrix, start, [False] * n)


def dfs(matrix: Matrix) -> list[int]:
    """Depth-first order over every component, each started from its
    lowest unvisited vertex."""
    n = _size(matrix)
    visited = [False] * n
    order: list[int] = []
    for vertex in range(n):
        if not visited[vertex]:
            order.extend(_dfs_visit(matrix, vertex, visited))
    return order


def bfs_from(matrix: Matrix, start: int) -> list[int]:
    """Breadth-first visiting order from ``start``, lower-numbered neighbours first."""
    n = _size(matrix)
    _check_vertex(n, start)
    return _bfs_visit(matrix, start, [False] * n)


def bfs(matrix: Matrix) -> list[int]:
    """Breadth-first order over every component, each started from its
    lowest unvisited vertex."""
    n = _size(matrix)
    visited = [False] * n
    order: list[int] = []
    for vertex in range(n):
        if not visited[vertex]:
            order.extend(_bfs_visit(matrix, vertex, visited))
    return order


def path_bfs(matrix: Matrix, start: int, end: int) -> list[int] | None:
    """A shortest path found by breadth-first search, listed from ``end``
    back to ``start``, or None when ``end`` cannot be reached."""
    n = _size(matrix)
    _check_vertex(n, start)
    _check_vertex(n, end)
    if start == end:
        return [start]
    parent: dict[int, int | None] = {start: None}
    pending = deque([start])
    while pending:
        vertex = pending.popleft()
        for neighbour in _neighbours(matrix, vertex):
            if neighbour in parent:
                continue
            parent[neighbour] = vertex
            if neighbour == end:
                path = [end]
                current = end
                while current != start:
                    current = parent[current]  # type: ignore[assignment]
                    path.append(current)
                return path
            pending.append(neighbour)
    return None


def path_dfs(matrix: Matrix, start: int, end: int) -> list[int] | None:
    """A path found by depth-first search, listed from ``end`` back to
    ``start``, or None when ``end`` cannot be reached."""
    n = _size(matrix)
    _check_vertex(n, start)
    _check_vertex(n, end)
    visited: set[int] = set()

    def search(vertex: int) -> list[int] | None:
        if vertex == end:
            return [end]
        visited.add(vertex)
        for neighbour in _neighbours(matrix, vertex):
            if neighbour not in visited:
                path = search(neighbour)
                if path is not None:
                    path.append(vertex)
                    return path
        return None

    return search(start)


def prim_mst(matrix: Matrix) -> list[tuple[int, int, int]]:
    """Edges of a minimum spanning tree grown from vertex 0 by Prim's
    algorithm, one ``(smaller, larger, weight)`` per vertex 1..n-1."""
    n = _size(matrix)
    if n == 0:
        return []
    visited = [False] * n
    weight: list[float] = [math.inf] * n
    parent = [-1] * n
    weight[0] = 0
    for _ in range(n):
        vertex = min((v for v in range(n) if not visited[v]), key=weight.__getitem__)
        if weight[vertex] == math.inf:
            raise ValueError("graph is not connected")
        visited[vertex] = True
        for neighbour, edge in enumerate(matrix[vertex]):
            if edge and not visited[neighbour] and edge < weight[neighbour]:
                weight[neighbour] = edge
                parent[neighbour] = vertex
    return [
        (min(parent[v], v), max(parent[v], v), int(weight[v])) for v in range(1, n)
    ]