import pytest

from snapgraph.graph import build_csr
from snapgraph.vertex_betweenness import (
    vertex_betweenness_centrality,
    vertex_betweenness_centrality_par_bfs,
    vertex_betweenness_centrality_simple,
)


def _path(n, undirected=True):
    return build_csr(n, range(n - 1), range(1, n), undirected)


def _star(leaves):
    return build_csr(leaves + 1, [0] * leaves, range(1, leaves + 1), True)


def test_path_of_three_all_sources():
    graph = _path(3)
    assert vertex_betweenness_centrality(graph, 3) == [0.0, 2.0, 0.0]


def test_directed_path():
    graph = _path(3, undirected=False)
    assert vertex_betweenness_centrality_simple(graph, 3) == [0.0, 1.0, 0.0]


def test_star_leaves_have_zero_and_center_positive():
    graph = _star(4)
    bc = vertex_betweenness_centrality_simple(graph, graph.n)
    assert bc[1:] == [0.0] * 4
    assert bc[0] > 0


def test_simple_and_par_bfs_agree_on_all_sources():
    graph = build_csr(5, [0, 0, 1, 2, 3], [1, 2, 3, 3, 4], True)
    simple = vertex_betweenness_centrality_simple(graph, graph.n)
    par = vertex_betweenness_centrality_par_bfs(graph, graph.n)
    assert simple == pytest.approx(par)


def test_dispatcher_matches_simple():
    graph = _star(3)
    assert vertex_betweenness_centrality(graph, 2) == vertex_betweenness_centrality_simple(
        graph, 2
    )


def test_zero_sources_gives_zeros():
    graph = _path(4)
    assert vertex_betweenness_centrality_simple(graph, 0) == [0.0] * 4
    assert vertex_betweenness_centrality_par_bfs(graph, 0) == [0.0] * 4


def test_cycle_is_symmetric():
    graph = build_csr(4, [0, 1, 2, 3], [1, 2, 3, 0], True)
    bc = vertex_betweenness_centrality_simple(graph, 4)
    assert all(value == pytest.approx(bc[0]) for value in bc)
    assert bc[0] > 0


def test_isolated_vertex_counts_differently():
    # vertex 0 is isolated; 1-2-3 is a path
    graph = build_csr(4, [1, 2], [2, 3], True)
    simple = vertex_betweenness_centrality_simple(graph, 1)
    par = vertex_betweenness_centrality_par_bfs(graph, 1)
    assert simple == [0.0] * 4
    assert par[2] > 0
    assert par[0] == par[1] == par[3] == 0.0


def test_self_loop_is_ignored():
    plain = _path(4)
    looped = build_csr(4, [0, 1, 2, 1], [1, 2, 3, 1], True)
    assert vertex_betweenness_centrality_simple(looped, 4) == pytest.approx(
        vertex_betweenness_centrality_simple(plain, 4)
    )


def test_par_bfs_phase_limit():
    graph = _path(502)
    with pytest.raises(ValueError):
        vertex_betweenness_centrality_par_bfs(graph, 1)


def test_simple_handles_deep_path():
    graph = _path(502)
    bc = vertex_betweenness_centrality_simple(graph, 1)
    assert bc[0] == 0.0
    assert bc[-1] == 0.0
    assert bc[1] > bc[2] > bc[3] > 0


def test_negative_sources_rejected():
    graph = _path(3)
    with pytest.raises(ValueError):
        vertex_betweenness_centrality_simple(graph, -1)
    with pytest.raises(ValueError):
        vertex_betweenness_centrality_par_bfs(graph, -1)


def test_simple_rejects_more_sources_than_vertices():
    graph = _path(3)
    with pytest.raises(ValueError):
        vertex_betweenness_centrality_simple(graph, 4)


def test_par_bfs_accepts_more_sources_than_vertices():
    graph = _path(3)
    assert vertex_betweenness_centrality_par_bfs(graph, 10) == pytest.approx(
        vertex_betweenness_centrality_simple(graph, 3)
    )