"""Edge betweenness centrality over the community edge records of a graph."""

from __future__ import annotations

import random

from .graph import CEdge, CVertex, Graph

DEFAULT_SEED = 129832
MAX_NUM_PHASES = 1000


def _records(graph: Graph) -> tuple[list[CVertex], list[CEdge]]:
    if graph.cvl is None or graph.cel is None:
        raise ValueError("the graph has no community vertex and edge records")
    if len(graph.cvl) != graph.n + 1:
        raise ValueError("there must be n + 1 community vertex records")
    if graph.cvl[graph.n].num_edges > len(graph.cel):
        raise ValueError("community vertex records point past the edge records")
    return graph.cvl, graph.cel


def _shuffled_sources(n: int, rng: random.Random) -> list[int]:
    sources = list(range(n))
    for i in range(n):
        j = int(n * rng.random())
        sources[i], sources[j] = sources[j], sources[i]
    return sources


def _accumulate_from(s: int, cvl: list[CVertex], cel: list[CEdge]) -> None:
    """Add the dependencies of all shortest paths from ``s`` to the edge scores."""
    level = {s: 1}
    sigma = {s: 1}
    children: dict[int, list[tuple[int, int]]] = {}
    order = [s]
    frontier = [s]
    d_phase = 1
    while frontier:
        d_phase += 1
        if d_phase >= MAX_NUM_PHASES:
            raise ValueError(
                f"search from {s} needs more than {MAX_NUM_PHASES} phases"
            )
        next_frontier = []
        for v in frontier:
            sigma_v = sigma[v]
            kids = children.setdefault(v, [])
            for j in range(cvl[v].num_edges, cvl[v + 1].num_edges):
                edge = cel[j]
                if edge.mask != 0:
                    continue
                w = edge.dest
                d_w = level.get(w)
                if d_w is None:
                    level[w] = d_phase
                    sigma[w] = sigma_v
                    kids.append((w, j))
                    next_frontier.append(w)
                elif d_w == d_phase:
                    sigma[w] += sigma_v
                    kids.append((w, j))
        order.extend(next_frontier)
        frontier = next_frontier

    delta: dict[int, float] = {}
    for v in reversed(order):
        sigma_v = sigma[v]
        total = 0.0
        for w, j in children.get(v, ()):
            incr = sigma_v * (1 + delta[w]) / sigma[w]
            cel[j].cval += incr
            total += incr
        delta[v] = total


def evaluate_edge_centrality_bcpart(
    graph: Graph,
    curr_component1: int = -1,
    curr_component2: int = -1,
    seed: int | None = None,
) -> list[float]:
    """Accumulate edge betweenness into ``graph.cel[*].cval`` and return the scores.

    Masked edges are ignored. With ``curr_component1`` set to -1 every vertex
    with edges is a source and scores add to the existing values. Otherwise
    only vertices whose community is one of the two given ones serve as
    sources, and the scores of their edges are cleared first. Sources are
    visited in an order shuffled with ``seed``.
    """
    cvl, cel = _records(graph)
    n = graph.n
    rng = random.Random(DEFAULT_SEED if seed is None else seed)
    sources = _shuffled_sources(n, rng)

    restricted = curr_component1 != -1
    part = (curr_component1, curr_component2)

    if restricted:
        for v in range(n):
            if cvl[v].comm_id not in part:
                continue
            for j in range(cvl[v].num_edges, cvl[v + 1].num_edges):
                cel[j].cval = 0.0

    for s in sources:
        if cvl[s + 1].num_edges - cvl[s].num_edges == 0:
            continue
        if restricted and cvl[s].comm_id not in part:
            continue
        _accumulate_from(s, cvl, cel)

    return [edge.cval for edge in cel]