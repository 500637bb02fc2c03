"""Quality measures of communities: modularity, conductance, clustering."""

from __future__ import annotations

import math
from typing import Sequence

from .graph import Graph


def _check_membership(graph: Graph, membership: Sequence[int]) -> None:
    if len(membership) != graph.n:
        raise ValueError("there must be one membership entry per vertex")


def _modularity_undirected(
    graph: Graph, membership: Sequence[int], num_components: int
) -> float:
    m_inv = 1.0 / graph.m
    inside = [0] * num_components
    outgoing = [0] * num_components
    for u in range(graph.n):
        cid = membership[u]
        if cid < 0:
            continue
        for v in graph.neighbors(u):
            if v < u:
                continue
            if membership[v] == cid:
                inside[cid] += 1
            else:
                outgoing[cid] += 1
    total = sum(ls - (m_inv * lp) * (0.25 * lp) for ls, lp in zip(inside, outgoing))
    return total * m_inv


def _modularity_directed(
    graph: Graph, membership: Sequence[int], num_components: int
) -> float:
    m_inv = 1.0 / graph.m
    inside = [0] * num_components
    outgoing = [0] * num_components
    incoming = [0] * num_components
    for u in range(graph.n):
        cid = membership[u]
        if cid < 0:
            continue
        for v in graph.neighbors(u):
            vcid = membership[v]
            if vcid == cid:
                inside[cid] += 1
            else:
                outgoing[cid] += 1
                if vcid >= 0:
                    incoming[vcid] += 1
    total = sum(
        ls - (m_inv * lp) * li for ls, lp, li in zip(inside, outgoing, incoming)
    )
    return total * m_inv


def community_modularity(
    graph: Graph, membership: Sequence[int] | None, num_components: int
) -> float:
    """Modularity of the whole decomposition given by ``membership``.

    Vertices with a negative id belong to no community. Returns NaN for a
    missing membership or a non-positive component count, and 0 for a graph
    without vertices or edges.
    """
    if membership is None or num_components <= 0:
        return math.nan
    if graph.n == 0 or graph.m == 0:
        return 0.0
    _check_membership(graph, membership)
    if any(cid >= num_components for cid in membership):
        raise ValueError("a membership id is not below the number of components")
    if graph.undirected:
        return _modularity_undirected(graph, membership, num_components)
    return _modularity_directed(graph, membership, num_components)


def single_community_modularity(
    graph: Graph, membership: Sequence[int] | None, component: int
) -> float:
    """Modularity contribution of one community.

    Returns NaN for a missing membership or a graph without edges.
    """
    if membership is None:
        return math.nan
    _check_membership(graph, membership)
    m = graph.m // 2 if graph.undirected else graph.m
    if m == 0:
        return math.nan

    internal = 0
    volume = 0
    for u in range(graph.n):
        if membership[u] != component:
            continue
        internal += sum(1 for v in graph.neighbors(u) if membership[v] == component)
        volume += graph.degree(u)

    if internal % 2:
        raise ValueError("internal edges of the community are not paired")
    internal //= 2
    external = volume - internal
    scale = 4.0 * m if graph.undirected else float(m)
    return (internal - (external * float(external)) / scale) / m


def single_community_conductance(
    graph: Graph, membership: Sequence[int], component: int
) -> float:
    """Cut size of a community over the smaller of its two volumes.

    Returns infinity when the community cuts no edge.
    """
    _check_membership(graph, membership)
    degree_in = 0
    degree_out = 0
    cross_edges = 0
    for u in range(graph.n):
        if membership[u] == component:
            degree_in += graph.degree(u)
            cross_edges += sum(
                1 for v in graph.neighbors(u) if membership[v] != component
            )
        else:
            degree_out += graph.degree(u)

    if not cross_edges:
        return math.inf
    volume = degree_in if degree_in < degree_out else degree_out
    return cross_edges / volume if volume else math.inf


def single_community_clustering_coefficient(
    graph: Graph, membership: Sequence[int], community: int
) -> float:
    """Ratio of closed to open triples inside one community.

    Adjacency lists are merged as if sorted. Returns 0 when there are
    neither triangles nor open triples.
    """
    _check_membership(graph, membership)
    end_v = graph.end_v
    offsets = graph.num_edges
    triangles = 0
    open_triples = 0
    for u in range(graph.n):
        if membership[u] != community:
            continue
        u_start, u_end = offsets[u], offsets[u + 1]
        for v in graph.neighbors(u):
            if membership[v] != community:
                continue
            k, l, v_end = u_start, offsets[v], offsets[v + 1]
            v_degree = 0
            closed = 0
            while k < u_end and l < v_end:
                w = end_v[k]
                x = end_v[l]
                if membership[w] == community:
                    v_degree += 1
                    if w == x:
                        closed += 1
                if w == x:
                    k += 1
                    l += 1
                elif w > x:
                    l += 1
                else:
                    k += 1
            open_triples += v_degree
            triangles += closed

    if open_triples:
        return triangles / open_triples
    if triangles:
        return math.inf
    return 0.0