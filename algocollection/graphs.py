"""Undirected graphs over nodes numbered 1 to n: search, shortest paths, cycles."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable


def _check_node(n: int, node: int) -> None:
    if not 1 <= node <= n:
        raise ValueError(f"node {node} is outside 1..{n}")


def adjacency(n: int, edges: Iterable[tuple[int, int]]) -> dict[int, list[int]]:
    """Neighbour lists of an undirected graph on nodes ``1..n``.

    Neighbours appear in the order their edges are given; a self-loop lists
    the node twice.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    graph: dict[int, list[int]] = {node: [] for node in range(1, n + 1)}
    for x, y in edges:
        _check_node(n, x)
        _check_node(n, y)
        graph[x].append(y)
        graph[y].append(x)
    return graph


def bfs_distances(n: int, edges: Iterable[tuple[int, int]], source: int) -> dict[int, int]:
    """Number of edges on a shortest path from ``source`` to each reachable node."""
    graph = adjacency(n, edges)
    _check_node(n, source)
    distances = {source: 0}
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for neighbour in graph[node]:
            if neighbour not in distances:
                distances[neighbour] = distances[node] + 1
                queue.append(neighbour)
    return distances


def dijkstra(
    n: int, edges: Iterable[tuple[int, int, int]], source: int
) -> dict[int, int | None]:
    """Shortest weighted distance from ``source`` to every node ``1..n``.

    Edges are undirected ``(x, y, weight)`` triples with non-negative weights.
    Unreachable nodes map to None.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    _check_node(n, source)
    graph: dict[int, list[tuple[int, int]]] = {node: [] for node in range(1, n + 1)}
    for x, y, weight in edges:
        _check_node(n, x)
        _check_node(n, y)
        if weight < 0:
            raise ValueError("edge weights must not be negative")
        graph[x].append((y, weight))
        graph[y].append((x, weight))

    best: dict[int, int] = {source: 0}
    heap = [(0, source)]
    while heap:
        distance, node = heapq.heappop(heap)
        if distance > best[node]:
            continue
        for neighbour, weight in graph[node]:
            candidate = distance + weight
            if neighbour not in best or candidate < best[neighbour]:
                best[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))
    return {node: best.get(node) for node in range(1, n + 1)}


def message_route(n: int, edges: Iterable[tuple[int, int]]) -> list[int] | None:
    """Nodes on a shortest route of at least one hop from node 1 to node ``n``.

    Returns None when there is no such route.
    """
    graph = adjacency(n, edges)
    if n < 1:
        raise ValueError("n must be at least 1")
    parent: dict[int, int] = {}
    visited = {1}
    queue = deque([1])
    while queue and n not in parent:
        node = queue.popleft()
        for neighbour in graph[node]:
            if neighbour == n:
                parent[n] = node
                break
            if neighbour not in visited:
                visited.add(neighbour)
                parent[neighbour] = node
                queue.append(neighbour)
    if n not in parent:
        return None
    route = [n]
    node = parent[n]
    while node != 1:
        route.append(node)
        node = parent[node]
    route.append(1)
    route.reverse()
    return route


def is_connected(n: int, edges: Iterable[tuple[int, int]]) -> bool:
    """True when every node ``1..n`` can be reached from node 1."""
    graph = adjacency(n, edges)
    if n < 1:
        raise ValueError("n must be at least 1")
    visited = {1}
    stack = [1]
    while stack:
        node = stack.pop()
        for neighbour in graph[node]:
            if neighbour not in visited:
                visited.add(neighbour)
                stack.append(neighbour)
    return len(visited) == n


def find_cycle(n: int, edges: Iterable[tuple[int, int]]) -> list[int] | None:
    """A cycle as a list of nodes that starts and ends on the same node, or None.

    Repeated edges between the same two nodes count as one edge.
    """
    graph = adjacency(n, edges)
    visited: set[int] = set()
    parent: dict[int, int] = {}
    for root in range(1, n + 1):
        if root in visited:
            continue
        visited.add(root)
        stack = [(root, None, iter(graph[root]))]
        while stack:
            node, came_from, neighbours = stack[-1]
            for neighbour in neighbours:
                if neighbour == came_from:
                    continue
                if neighbour in visited:
                    if parent.get(neighbour) == node and neighbour != node:
                        continue
                    cycle = [neighbour]
                    current = node
                    while current != neighbour:
                        cycle.append(current)
                        current = parent[current]
                    cycle.append(neighbour)
                    return cycle
                parent[neighbour] = node
                visited.add(neighbour)
                stack.append((neighbour, node, iter(graph[neighbour])))
                break
            else:
                stack.pop()
    return None