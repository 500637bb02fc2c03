from collections import deque

import pytest

from snapgraph.edge_betweenness import evaluate_edge_centrality_bcpart
from snapgraph.graph import CEdge, CVertex, build_csr


def with_records(n, edges, comm=None):
    graph = build_csr(n, [u for u, _ in edges], [v for _, v in edges], True)
    graph.cvl = [CVertex(num_edges=o) for o in graph.num_edges]
    if comm is not None:
        for v, c in enumerate(comm):
            graph.cvl[v].comm_id = c
    graph.cel = [CEdge(dest=d, eid=e) for d, e in zip(graph.end_v, graph.edge_id)]
    return graph


def distance_sum(graph, masked=frozenset()):
    total = 0
    for s in range(graph.n):
        dist = {s: 0}
        queue = deque([s])
        while queue:
            u = queue.popleft()
            for j in graph.edge_range(u):
                if j in masked:
                    continue
                w = graph.end_v[j]
                if w not in dist:
                    dist[w] = dist[u] + 1
                    queue.append(w)
        total += sum(dist.values())
    return total


GRID_EDGES = [(0, 1), (1, 2), (3, 4), (4, 5), (0, 3), (1, 4), (2, 5), (2, 6)]


def test_path_scores_worked_example():
    graph = with_records(3, [(0, 1), (1, 2)])
    scores = evaluate_edge_centrality_bcpart(graph)
    assert scores == pytest.approx([2.0, 2.0, 2.0, 2.0])
    assert [e.cval for e in graph.cel] == scores


def test_total_equals_sum_of_distances():
    graph = with_records(7, GRID_EDGES)
    scores = evaluate_edge_centrality_bcpart(graph)
    assert sum(scores) == pytest.approx(distance_sum(graph))


def test_undirected_scores_are_symmetric():
    graph = with_records(7, GRID_EDGES)
    scores = evaluate_edge_centrality_bcpart(graph)
    by_pair = {}
    for u in range(graph.n):
        for j in graph.edge_range(u):
            by_pair[(u, graph.end_v[j])] = scores[j]
    for (u, v), value in by_pair.items():
        assert value == pytest.approx(by_pair[(v, u)])


def test_seed_does_not_change_scores():
    first = evaluate_edge_centrality_bcpart(with_records(7, GRID_EDGES), seed=1)
    second = evaluate_edge_centrality_bcpart(with_records(7, GRID_EDGES), seed=99)
    assert first == pytest.approx(second)


def test_unrestricted_run_accumulates():
    graph = with_records(7, GRID_EDGES)
    once = evaluate_edge_centrality_bcpart(graph)
    twice = evaluate_edge_centrality_bcpart(graph)
    assert twice == pytest.approx([2 * x for x in once])


def test_restricted_run_clears_previous_scores():
    graph = with_records(7, GRID_EDGES, comm=[0] * 7)
    once = evaluate_edge_centrality_bcpart(graph, 0, 0)
    again = evaluate_edge_centrality_bcpart(graph, 0, 0)
    assert again == pytest.approx(once)


def test_masked_edges_are_skipped():
    graph = with_records(4, [(0, 1), (1, 2), (2, 3), (3, 0)])
    masked = {j for j, e in enumerate(graph.cel) if {e.eid} == {0}}
    for j in masked:
        graph.cel[j].mask = 1
    scores = evaluate_edge_centrality_bcpart(graph)
    for j in masked:
        assert scores[j] == 0.0
    assert sum(scores) == pytest.approx(distance_sum(graph, frozenset(masked)))


def test_component_restriction_leaves_other_edges_alone():
    edges = [(0, 1), (1, 2), (3, 4), (4, 5)]
    graph = with_records(6, edges, comm=[0, 0, 0, 1, 1, 1])
    for edge in graph.cel:
        edge.cval = 5.0
    scores = evaluate_edge_centrality_bcpart(graph, 0, 0)
    for u in range(graph.n):
        for j in graph.edge_range(u):
            if u >= 3:
                assert scores[j] == 5.0
            else:
                assert scores[j] == pytest.approx(2.0)


def test_isolated_vertices_contribute_nothing():
    graph = with_records(5, [(0, 1), (1, 2)])
    scores = evaluate_edge_centrality_bcpart(graph)
    assert sum(scores) == pytest.approx(distance_sum(graph))


def test_missing_records_raise():
    graph = build_csr(3, [0, 1], [1, 2], True)
    with pytest.raises(ValueError):
        evaluate_edge_centrality_bcpart(graph)


def test_wrong_record_count_raises():
    graph = with_records(3, [(0, 1), (1, 2)])
    graph.cvl = graph.cvl[:-1]
    with pytest.raises(ValueError):
        evaluate_edge_centrality_bcpart(graph)