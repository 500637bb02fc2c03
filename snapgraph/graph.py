"""Compressed adjacency representation shared by the readers, generators and kernels."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from itertools import accumulate
from typing import Iterable, Sequence


class GraphFormatError(ValueError):
    """Raised when a graph description cannot be read."""


class WeightType(IntEnum):
    """Kind of edge weight stored with a graph."""

    UNSET = -1
    NONE = 0
    INT = 1
    LONG = 2
    FLOAT = 3
    DOUBLE = 4


@dataclass
class CVertex:
    """Vertex record used by community and centrality routines."""

    num_edges: int = 0
    comm_id: int = -1


@dataclass
class CEdge:
    """Edge record used by community and centrality routines."""

    dest: int = 0
    eid: int = 0
    mask: int = 0
    cval: float = 0.0


@dataclass
class Graph:
    """A graph in compressed sparse row form.

    ``num_edges`` has ``n + 1`` offsets into ``end_v``; the edges leaving
    vertex ``v`` are ``end_v[num_edges[v]:num_edges[v + 1]]``. Undirected
    graphs store every edge once in each direction.
    """

    num_edges: list[int] = field(default_factory=lambda: [0])
    end_v: list[int] = field(default_factory=list)
    edge_id: list[int] = field(default_factory=list)
    undirected: bool = True
    zero_indexed: bool = True
    weight_type: WeightType = WeightType.UNSET
    edge_weights: list[float] | None = None
    vertex_weights: list[float] | None = None
    min_weight: float = 0.0
    max_weight: float = 1.0
    cvl: list[CVertex] | None = None
    cel: list[CEdge] | None = None

    def __post_init__(self) -> None:
        if not self.num_edges or self.num_edges[0] != 0:
            raise ValueError("edge offsets must start at 0")
        if any(b < a for a, b in zip(self.num_edges, self.num_edges[1:])):
            raise ValueError("edge offsets must not decrease")
        if self.num_edges[-1] != len(self.end_v):
            raise ValueError("last edge offset must equal the number of edges")
        if len(self.edge_id) != len(self.end_v):
            raise ValueError("edge ids and edge targets differ in length")
        if self.edge_weights is not None and len(self.edge_weights) != len(self.end_v):
            raise ValueError("edge weights and edge targets differ in length")

    @property
    def n(self) -> int:
        """Number of vertices."""
        return len(self.num_edges) - 1

    @property
    def m(self) -> int:
        """Number of stored (directed) edge entries."""
        return len(self.end_v)

    def edge_range(self, v: int) -> range:
        """Positions in ``end_v`` of the edges leaving ``v``."""
        return range(self.num_edges[v], self.num_edges[v + 1])

    def degree(self, v: int) -> int:
        """Out-degree of ``v``."""
        return self.num_edges[v + 1] - self.num_edges[v]

    def neighbors(self, v: int) -> list[int]:
        """Targets of the edges leaving ``v``, in storage order."""
        return self.end_v[self.num_edges[v]:self.num_edges[v + 1]]


def build_csr(
    n: int,
    src: Iterable[int],
    dest: Iterable[int],
    undirected: bool,
    weights: Iterable[float] | None = None,
) -> Graph:
    """Build a graph from parallel edge lists.

    Edge ``i`` gets id ``i``. Within each vertex's block the edges are laid
    out from the end backwards, in the order they appear in the lists.
    """
    sources: Sequence[int] = list(src)
    targets: Sequence[int] = list(dest)
    if len(sources) != len(targets):
        raise ValueError("source and destination lists differ in length")
    edge_weights = None if weights is None else list(weights)
    if edge_weights is not None and len(edge_weights) != len(sources):
        raise ValueError("weight list and edge lists differ in length")
    if n < 0:
        raise ValueError("vertex count must not be negative")

    degree = [0] * n
    for u, v in zip(sources, targets):
        if not (0 <= u < n and 0 <= v < n):
            raise ValueError(f"edge ({u}, {v}) refers to a vertex outside 0..{n - 1}")
        degree[u] += 1
        if undirected:
            degree[v] += 1

    offsets = [0, *accumulate(degree)]
    total = offsets[-1]
    end_v = [0] * total
    edge_id = [0] * total
    stored_weights = None if edge_weights is None else [0.0] * total
    remaining = list(degree)

    def place(owner: int, target: int, eid: int) -> None:
        remaining[owner] -= 1
        pos = offsets[owner] + remaining[owner]
        end_v[pos] = target
        edge_id[pos] = eid
        if stored_weights is not None:
            stored_weights[pos] = edge_weights[eid]

    for i, (u, v) in enumerate(zip(sources, targets)):
        place(u, v, i)
        if undirected:
            place(v, u, i)

    return Graph(
        num_edges=offsets,
        end_v=end_v,
        edge_id=edge_id,
        undirected=bool(undirected),
        weight_type=WeightType.NONE if stored_weights is None else WeightType.UNSET,
        edge_weights=stored_weights,
    )