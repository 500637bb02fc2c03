"""Approximate vertex covers of undirected graphs."""

from __future__ import annotations

import math
from collections import defaultdict, deque

from .graph import Graph

_COVER_TOLERANCE = 0.00001


def _pair_reverse_entries(graph: Graph) -> list[int | None]:
    """Map each edge entry to the entry storing the same edge the other way."""
    partner: list[int | None] = [None] * graph.m
    pending: defaultdict[tuple[int, int], deque[int]] = defaultdict(deque)
    for u in range(graph.n):
        for j in graph.edge_range(u):
            v = graph.end_v[j]
            waiting = pending[(v, u)]
            if waiting:
                k = waiting.popleft()
                partner[j] = k
                partner[k] = j
            else:
                pending[(u, v)].append(j)
    return partner


def vertex_cover_weighted(graph: Graph) -> int:
    """Size of a weighted vertex cover found by the local-ratio method.

    Uses ``graph.vertex_weights``. Each round every uncovered edge takes the
    smaller of its endpoints' weight-per-degree ratios, each vertex pays the
    sum over its uncovered edges, and vertices whose weight is used up join
    the cover. Isolated vertices are not counted.
    """
    if graph.vertex_weights is None:
        raise ValueError("weighted vertex cover needs vertex weights")
    if len(graph.vertex_weights) != graph.n:
        raise ValueError("there must be one vertex weight per vertex")

    weight = [float(w) for w in graph.vertex_weights]
    degree = [graph.degree(v) for v in range(graph.n)]
    covered = [d == 0 for d in degree]
    edge_done = [False] * graph.m
    delta = [0.0] * graph.m
    partner = _pair_reverse_entries(graph)

    def ratio(v: int) -> float:
        return weight[v] / degree[v] if degree[v] else math.inf

    remaining = graph.m
    while remaining > 0:
        for u in range(graph.n):
            if covered[u]:
                continue
            for j in graph.edge_range(u):
                if not edge_done[j]:
                    delta[j] = min(ratio(u), ratio(graph.end_v[j]))

        progress = False
        for u in range(graph.n):
            if covered[u]:
                continue
            weight[u] -= sum(delta[j] for j in graph.edge_range(u) if not edge_done[j])
            if weight[u] > _COVER_TOLERANCE:
                continue
            covered[u] = True
            progress = True
            remaining -= 2 * degree[u]
            for j in graph.edge_range(u):
                if edge_done[j]:
                    continue
                edge_done[j] = True
                degree[graph.end_v[j]] -= 1
                k = partner[j]
                if k is not None:
                    edge_done[k] = True
        if not progress:
            break

    return sum(1 for v in range(graph.n) if covered[v] and graph.degree(v) > 0)


def vertex_cover_unweighted(graph: Graph) -> int:
    """Size of a greedy cover that repeatedly takes the edge of largest degree sum.

    Both endpoints of the chosen edge join the cover and their degrees drop
    to zero; ties go to the first edge in storage order.
    """
    degree = [graph.degree(v) for v in range(graph.n)]
    covered = [False] * graph.n
    remaining = graph.m
    while remaining > 0:
        best = 0
        pick: tuple[int, int] | None = None
        for u in range(graph.n):
            if degree[u] == 0:
                continue
            for v in graph.neighbors(u):
                total = degree[u] + degree[v]
                if total > best:
                    best = total
                    pick = (u, v)
        if pick is None:
            break
        remaining -= best
        u, v = pick
        degree[u] = degree[v] = 0
        covered[u] = covered[v] = True
    return sum(covered)