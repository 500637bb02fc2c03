import pytest

from snapgraph.bfs import bfs_frontier_expansion
from snapgraph.graph import build_csr


def _undirected(n, edges):
    return build_csr(n, [u for u, _ in edges], [v for _, v in edges], True)


def test_path_is_fully_visited():
    g = _undirected(4, [(0, 1), (1, 2), (2, 3)])
    assert bfs_frontier_expansion(g, 0, 3) == g.n


def test_only_the_component_of_the_source_is_counted():
    g = _undirected(5, [(0, 1), (1, 2), (3, 4)])
    assert bfs_frontier_expansion(g, 0, 5) == 3
    assert bfs_frontier_expansion(g, 4, 5) == 2


def test_self_loops_and_isolated_source():
    g = _undirected(3, [(0, 0), (1, 2)])
    assert bfs_frontier_expansion(g, 0, 1) == 1


def test_middle_source_needs_smaller_diameter():
    g = _undirected(5, [(0, 1), (1, 2), (2, 3), (3, 4)])
    assert bfs_frontier_expansion(g, 2, 2) == g.n
    with pytest.raises(ValueError):
        bfs_frontier_expansion(g, 0, 2)


def test_directed_search_follows_out_edges():
    g = build_csr(3, [0, 1], [1, 2], False)
    assert bfs_frontier_expansion(g, 0, 2) == 3
    assert bfs_frontier_expansion(g, 2, 2) == 1


def test_bad_arguments():
    g = _undirected(2, [(0, 1)])
    with pytest.raises(ValueError):
        bfs_frontier_expansion(g, 2, 1)
    with pytest.raises(ValueError):
        bfs_frontier_expansion(g, 0, -1)