"""Vertex betweenness centrality by Brandes-style shortest-path counting."""

from __future__ import annotations

from collections import defaultdict

from .graph import Graph

PAR_BFS_MAX_NUM_PHASES = 500


def _check_sources(num_srcs: int) -> None:
    if num_srcs < 0:
        raise ValueError("the number of sources must not be negative")


def _accumulate_from(
    graph: Graph, s: int, bc: list[float], max_phases: int | None = None
) -> None:
    """Add the dependencies of shortest paths from ``s`` to ``bc``.

    Self loops are ignored. The source itself receives nothing. With
    ``max_phases`` set, a search needing that many phases raises ValueError.
    """
    dist = {s: 0}
    sigma = {s: 1.0}
    preds: defaultdict[int, list[int]] = defaultdict(list)
    levels = [[s]]
    while levels[-1]:
        next_level = []
        for v in levels[-1]:
            d_next = dist[v] + 1
            for w in graph.neighbors(v):
                if w == v:
                    continue
                d_w = dist.get(w)
                if d_w is None:
                    dist[w] = d_next
                    sigma[w] = sigma[v]
                    preds[w].append(v)
                    next_level.append(w)
                elif d_w == d_next:
                    sigma[w] += sigma[v]
                    preds[w].append(v)
        levels.append(next_level)
        if max_phases is not None and len(levels) - 1 >= max_phases:
            raise ValueError(
                f"diameter of the network exceeds the limit of {max_phases} phases"
            )

    delta: defaultdict[int, float] = defaultdict(float)
    for level in reversed(levels[1:]):
        for w in level:
            share = (1 + delta[w]) / sigma[w]
            for v in preds[w]:
                delta[v] += sigma[v] * share
            bc[w] += delta[w]


def vertex_betweenness_centrality_simple(graph: Graph, num_srcs: int) -> list[float]:
    """Betweenness from the first ``num_srcs`` vertex ids as sources.

    Vertices without edges among them are skipped but still count towards
    ``num_srcs``.
    """
    _check_sources(num_srcs)
    if num_srcs > graph.n:
        raise ValueError(
            f"cannot use {num_srcs} sources in a graph of {graph.n} vertices"
        )
    bc = [0.0] * graph.n
    for s in range(num_srcs):
        if graph.degree(s) == 0:
            continue
        _accumulate_from(graph, s, bc)
    return bc


def vertex_betweenness_centrality_par_bfs(graph: Graph, num_srcs: int) -> list[float]:
    """Betweenness from the first ``num_srcs`` vertices that have edges.

    A search whose depth reaches the phase limit raises ValueError.
    """
    _check_sources(num_srcs)
    bc = [0.0] * graph.n
    traversals = 0
    for s in range(graph.n):
        if graph.degree(s) == 0:
            continue
        traversals += 1
        if traversals == num_srcs + 1:
            break
        _accumulate_from(graph, s, bc, PAR_BFS_MAX_NUM_PHASES)
    return bc


def vertex_betweenness_centrality(graph: Graph, num_srcs: int) -> list[float]:
    """Betweenness centrality of every vertex, using ``num_srcs`` sources."""
    return vertex_betweenness_centrality_simple(graph, num_srcs)