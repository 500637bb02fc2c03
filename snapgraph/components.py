"""Connected components over the community edge records of a graph."""

from __future__ import annotations

from collections import deque

from .graph import Graph


def _records(graph: Graph):
    if graph.cvl is None or graph.cel is None:
        raise ValueError("the graph has no community vertex and edge records")
    if len(graph.cvl) != graph.n + 1:
        raise ValueError("there must be n + 1 community vertex records")
    return graph.cvl, graph.cel


def aux_connected_components_init(graph: Graph) -> int:
    """Give every vertex the id of its connected component; return the count.

    Components are numbered from 0 in order of their lowest vertex.
    """
    cvl, cel = _records(graph)
    n = graph.n
    for record in cvl[:n]:
        record.comm_id = -1

    num_components = 0
    for i in range(n):
        if cvl[i].comm_id != -1:
            continue
        cvl[i].comm_id = num_components
        queue = deque([i])
        while queue:
            u = queue.popleft()
            for j in range(cvl[u].num_edges, cvl[u + 1].num_edges):
                v = cel[j].dest
                if cvl[v].comm_id == -1:
                    cvl[v].comm_id = num_components
                    queue.append(v)
        num_components += 1
    return num_components


def aux_connected_components_update(
    graph: Graph, num_components: int, maxbc_component: int
) -> int:
    """Check whether masked edges have split component ``maxbc_component``.

    Vertices reachable over unmasked edges from the component's first vertex
    move to component ``num_components``. Returns 1 if the component split,
    0 if it did not (its vertices keep their id) and -1 if it has no vertex.
    """
    cvl, cel = _records(graph)
    n = graph.n
    start = next((i for i in range(n) if cvl[i].comm_id == maxbc_component), None)
    if start is None:
        return -1

    cvl[start].comm_id = num_components
    reached = [start]
    queue = deque([start])
    while queue:
        u = queue.popleft()
        for j in range(cvl[u].num_edges, cvl[u + 1].num_edges):
            edge = cel[j]
            if edge.mask != 0:
                continue
            v = edge.dest
            if cvl[v].comm_id == maxbc_component:
                cvl[v].comm_id = num_components
                reached.append(v)
                queue.append(v)

    if any(record.comm_id == maxbc_component for record in cvl[:n]):
        return 1
    for v in reached:
        cvl[v].comm_id = maxbc_component
    return 0