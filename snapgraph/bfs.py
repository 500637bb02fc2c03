"""Level-synchronous breadth-first search."""

from __future__ import annotations

from .graph import Graph


def bfs_frontier_expansion(graph: Graph, src: int, diameter: int) -> int:
    """Number of vertices reachable from ``src``.

    The search expands one frontier at a time and skips self loops.
    ``diameter`` bounds the depth of the search: a graph whose vertices lie
    farther than that from ``src`` raises ValueError.
    """
    if not 0 <= src < graph.n:
        raise ValueError(f"source vertex {src} is outside 0..{graph.n - 1}")
    if diameter < 0:
        raise ValueError("diameter must not be negative")

    visited = [False] * graph.n
    visited[src] = True
    frontier = [src]
    count = 1
    levels = 1
    while frontier:
        next_frontier = []
        for v in frontier:
            for w in graph.neighbors(v):
                if w != v and not visited[w]:
                    visited[w] = True
                    next_frontier.append(w)
        if next_frontier:
            levels += 1
            if levels > diameter + 1:
                raise ValueError(
                    f"search from {src} goes deeper than the diameter {diameter}"
                )
        count += len(next_frontier)
        frontier = next_frontier
    return count