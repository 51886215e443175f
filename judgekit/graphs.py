"""Graph problems: reachability, shortest paths and traversal orders."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Sequence


def _check_node(n: int, node: int) -> None:
    if not 1 <= node <= n:
        raise ValueError(f"node {node} is outside 1..{n}")


def _check_count(n: int) -> None:
    if n < 1:
        raise ValueError(f"at least one node is required, got {n}")


def _floyd(costs: list[list[float]]) -> None:
    """Relax every pair through every intermediate node, in place."""
    for via_row in costs:
        via = costs.index(via_row) if False else None  # placeholder removed below
        del via
    size = len(costs)
    for via in range(size):
        via_row = costs[via]
        for row in costs:
            to_via = row[via]
            if to_via == math.inf:
                continue
            for target, onward in enumerate(via_row):
                candidate = to_via + onward
                if candidate < row[target]:
                    row[target] = candidate


def _adjacency(n: int, edges: Iterable[tuple[int, int]]) -> dict[int, list[int]]:
    linked: dict[int, list[int]] = {node: [] for node in range(1, n + 1)}
    for a, b in edges:
        _check_node(n, a)
        _check_node(n, b)
        linked[a].append(b)
        linked[b].append(a)
    for neighbours in linked.values():
        neighbours.sort()
    return linked


def reachability(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Transitive closure of a directed adjacency matrix of 0s and 1s."""
    graph = [[1 if cell else 0 for cell in row] for row in matrix]
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("the adjacency matrix must be square")
    for via in range(size):
        via_row = graph[via]
        for row in graph:
            if row[via]:
                for target, linked in enumerate(via_row):
                    if linked:
                        row[target] = 1
    return graph


def all_pairs_costs(n: int, edges: Iterable[tuple[int, int, int]]) -> list[list[int]]:
    """Cheapest cost between every ordered pair of cities 1..n; 0 where unreachable.

    Row i - 1, column j - 1 holds the cost from city i to city j. Of several
    routes between the same two cities only the cheapest is kept.
    """
    _check_count(n)
    costs = [[0.0 if i == j else math.inf for j in range(n)] for i in range(n)]
    for start, end, value in edges:
        _check_node(n, start)
        _check_node(n, end)
        if value < costs[start - 1][end - 1]:
            costs[start - 1][end - 1] = value
    _floyd(costs)
    return [[0 if cost == math.inf else int(cost) for cost in row] for row in costs]


def party_round_trip(n: int, edges: Iterable[tuple[int, int, int]], target: int) -> int:
    """Longest round trip any village makes to the target village and back.

    Roads are one way; a later road between the same villages replaces an earlier one.
    """
    _check_count(n)
    _check_node(n, target)
    costs = [[0.0 if i == j else math.inf for j in range(n)] for i in range(n)]
    for start, end, weight in edges:
        _check_node(n, start)
        _check_node(n, end)
        costs[start - 1][end - 1] = weight
    _floyd(costs)
    hub = target - 1
    longest = max(costs[village][hub] + costs[hub][village] for village in range(n))
    if longest == math.inf:
        raise ValueError(f"some village cannot reach village {target} and return")
    return int(longest)


def dfs_order(n: int, edges: Iterable[tuple[int, int]], start: int) -> list[int]:
    """Nodes in depth-first order from start, visiting smaller neighbours first."""
    _check_count(n)
    _check_node(n, start)
    linked = _adjacency(n, edges)
    visited: set[int] = set()
    order: list[int] = []
    pending = [start]
    while pending:
        node = pending.pop()
        if node in visited:
            continue
        visited.add(node)
        order.append(node)
        pending.extend(
            neighbour for neighbour in reversed(linked[node]) if neighbour not in visited
        )
    return order


def bfs_order(n: int, edges: Iterable[tuple[int, int]], start: int) -> list[int]:
    """Nodes in breadth-first order from start, visiting smaller neighbours first."""
    _check_count(n)
    _check_node(n, start)
    linked = _adjacency(n, edges)
    visited = {start}
    order = [start]
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for neighbour in linked[node]:
            if neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                queue.append(neighbour)
    return order


def kevin_bacon(n: int, links: Iterable[tuple[int, int]]) -> int:
    """The user with the smallest total friendship distance; ties go to the lowest number."""
    _check_count(n)
    linked = _adjacency(n, links)
    winner = 0
    winner_total = math.inf
    for user in range(1, n + 1):
        distance = {user: 0}
        queue = deque([user])
        while queue:
            node = queue.popleft()
            for neighbour in linked[node]:
                if neighbour not in distance:
                    distance[neighbour] = distance[node] + 1
                    queue.append(neighbour)
        total = sum(distance.values()) if len(distance) == n else math.inf
        if winner == 0 or total < winner_total:
            winner, winner_total = user, total
    return winner