"""Biconnected components and articulation points of undirected graphs."""

from __future__ import annotations

from typing import Iterator

from .graph import Graph


def _require_vertices(graph: Graph) -> None:
    if graph.n == 0:
        raise ValueError("the graph has no vertices")


def biconnected_components(graph: Graph) -> tuple[int, list[int]]:
    """Label the biconnected components reachable from vertex 0.

    Returns ``(total, labels)``. Components are numbered from 1 in the order
    they are closed by the depth-first search; vertices never reached keep
    label 0. A vertex shared by several components carries the label of one
    of them. ``total`` is one more than the largest label.
    """
    _require_vertices(graph)
    n = graph.n
    dfs_number = [0] * n
    highwater = [0] * n
    labels = [0] * n
    edge_stack: list[tuple[int, int]] = []
    last = 0
    count = 0

    def enter(v: int) -> Iterator[int]:
        nonlocal last
        last += 1
        dfs_number[v] = highwater[v] = last
        return iter(graph.edge_range(v))

    frames: list[tuple[int, int, Iterator[int]]] = [(0, -1, enter(0))]
    while frames:
        v, parent, positions = frames[-1]
        descended = False
        for i in positions:
            w = graph.end_v[i]
            if dfs_number[w] == 0:
                edge_stack.append((v, w))
                frames.append((w, v, enter(w)))
                descended = True
                break
            if dfs_number[w] < dfs_number[v] and w != parent:
                edge_stack.append((v, w))
                highwater[v] = min(highwater[v], dfs_number[w])
        if descended:
            continue

        frames.pop()
        if not frames:
            break
        p = frames[-1][0]
        child = v
        highwater[p] = min(highwater[p], highwater[child])
        if dfs_number[p] <= highwater[child]:
            count += 1
            a, b = edge_stack.pop()
            labels[a] = labels[b] = count
            while (a, b) != (p, child):
                a, b = edge_stack.pop()
                if labels[a] == 0:
                    labels[a] = count
                if labels[b] == 0:
                    labels[b] = count

    return max(labels) + 1, labels


def find_articulation_points(graph: Graph) -> list[bool]:
    """Flag the articulation points found by a search from vertex 0.

    The search root is flagged when it has more than one edge; any other
    vertex is flagged when some child cannot reach above it.
    """
    _require_vertices(graph)
    n = graph.n
    seen = [False] * n
    low = [0] * n
    disc = [0] * n
    pred = [-1] * n
    articulation = [False] * n
    clock = 0

    def enter(u: int) -> Iterator[int]:
        nonlocal clock
        seen[u] = True
        clock += 1
        low[u] = disc[u] = clock
        return iter(graph.edge_range(u))

    frames: list[tuple[int, Iterator[int]]] = [(0, enter(0))]
    while frames:
        u, positions = frames[-1]
        descended = False
        for i in positions:
            v = graph.end_v[i]
            if not seen[v]:
                pred[v] = u
                frames.append((v, enter(v)))
                descended = True
                break
            if v != pred[u]:
                low[u] = min(low[u], disc[v])
        if descended:
            continue

        frames.pop()
        if not frames:
            break
        child = u
        u = frames[-1][0]
        low[u] = min(low[u], low[child])
        if pred[u] == -1:
            if graph.degree(u) > 1:
                articulation[u] = True
        elif low[child] >= disc[u]:
            articulation[u] = True

    return articulation