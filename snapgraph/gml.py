"""Reader for graphs in the GML format."""

from __future__ import annotations

import os
import re
from bisect import bisect_left
from dataclasses import dataclass, field
from itertools import accumulate
from typing import Iterable, Iterator

from .graph import Graph, GraphFormatError, WeightType

_INT_RE = re.compile(r"\s*([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")
_FLOAT_RE = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


@dataclass
class GmlEdge:
    """An edge leaving a vertex: index of the target vertex, weight and id."""

    target: int
    weight: float = 1.0
    id: int = 0


@dataclass
class GmlVertex:
    """A vertex with its GML id, optional label and outgoing edges."""

    id: int = 0
    label: str | None = None
    edges: list[GmlEdge] = field(default_factory=list)

    @property
    def degree(self) -> int:
        """Number of edges leaving the vertex."""
        return len(self.edges)


@dataclass
class GmlNetwork:
    """Vertices sorted by GML id, each holding its adjacency."""

    vertices: list[GmlVertex] = field(default_factory=list)
    directed: bool = False

    def find_vertex(self, vertex_id: int) -> int:
        """Index of the vertex with the given GML id; KeyError if absent."""
        pos = bisect_left(self.vertices, vertex_id, key=lambda v: v.id)
        if pos < len(self.vertices) and self.vertices[pos].id == vertex_id:
            return pos
        raise KeyError(vertex_id)


def _scan_int(line: str, keyword: str) -> int | None:
    pos = line.find(keyword)
    if pos < 0:
        return None
    match = _INT_RE.match(line, pos + len(keyword))
    if match is None:
        return None
    sign, digits = match.groups()
    if digits[:2].lower() == "0x":
        value = int(digits, 16)
    elif digits.startswith("0"):
        value = int(digits, 8)
    else:
        value = int(digits)
    return -value if sign == "-" else value


def _scan_float(line: str, keyword: str) -> float | None:
    pos = line.find(keyword)
    if pos < 0:
        return None
    match = _FLOAT_RE.match(line, pos + len(keyword))
    return None if match is None else float(match.group(1))


def _apply_node_line(vertex: GmlVertex, line: str) -> None:
    vertex_id = _scan_int(line, "id")
    if vertex_id is not None:
        vertex.id = vertex_id
    label_pos = line.find("label")
    if label_pos < 0:
        return
    start = line.find('"')
    if start < 0:
        rest = line[label_pos + len("label"):].split()
        if rest:
            vertex.label = rest[0]
        return
    stop = line.find('"', start + 1)
    vertex.label = line[start + 1:] if stop < 0 else line[start + 1:stop]


def _read_vertices(lines: list[str], count: int) -> list[GmlVertex]:
    it = iter(lines)
    vertices = []
    for _ in range(count):
        line = next((candidate for candidate in it if "node" in candidate), None)
        if line is None:
            raise GraphFormatError("node block runs past the end of the file")
        vertex = GmlVertex()
        _apply_node_line(vertex, line)
        if "]" not in line:
            for line in it:
                _apply_node_line(vertex, line)
                if "]" in line:
                    break
        vertices.append(vertex)
    return vertices


def _scan_edge_line(line: str, s: int, t: int, w: float) -> tuple[int, int, float]:
    source = _scan_int(line, "source")
    target = _scan_int(line, "target")
    value = _scan_float(line, "value")
    return (
        s if source is None else source,
        t if target is None else target,
        w if value is None else value,
    )


def _edge_records(lines: list[str]) -> Iterator[tuple[int, int, int, float]]:
    """Yield (ordinal, source id, target id, weight) for each complete edge.

    The ordinal counts the lines visited while looking for edge blocks; the
    lines inside a block are not counted.
    """
    it = iter(lines)
    ordinal = 0
    for line in it:
        ordinal += 1
        if "edge" not in line:
            continue
        s, t, w = _scan_edge_line(line, -1, -1, 1.0)
        if "]" not in line:
            for line in it:
                s, t, w = _scan_edge_line(line, s, t, w)
                if "]" in line:
                    break
        if s >= 0 and t >= 0:
            yield ordinal, s, t, w


def read_gml_network(lines: Iterable[str]) -> GmlNetwork:
    """Parse GML lines into a network.

    Every network is read as undirected, whatever its ``directed`` key says.
    Edges without a ``value`` get weight 1.
    """
    text = [line.rstrip("\r\n") for line in lines]
    count = sum("node" in line for line in text)
    vertices = sorted(_read_vertices(text, count), key=lambda v: v.id)
    network = GmlNetwork(vertices=vertices, directed=False)

    for ordinal, s, t, w in _edge_records(text):
        try:
            vs = network.find_vertex(s)
            vt = network.find_vertex(t)
        except KeyError as exc:
            raise GraphFormatError(
                f"edge ({s}, {t}) refers to an unknown node {exc.args[0]}"
            ) from exc
        network.vertices[vs].edges.append(GmlEdge(vt, w, ordinal))
        if not network.directed:
            network.vertices[vt].edges.append(GmlEdge(vs, w, ordinal))
    return network


def network_to_graph(network: GmlNetwork) -> Graph:
    """Convert a parsed network into an undirected, double-weighted graph."""
    vertices = network.vertices
    offsets = [0, *accumulate(v.degree for v in vertices)]
    total = offsets[-1]
    if total % 2:
        raise GraphFormatError("odd number of edge entries in an undirected network")
    if not vertices:
        raise GraphFormatError("network has no vertices")
    if total <= 0:
        raise GraphFormatError("network has no edges")
    edges = [edge for vertex in vertices for edge in vertex.edges]
    return Graph(
        num_edges=offsets,
        end_v=[edge.target for edge in edges],
        edge_id=[edge.id for edge in edges],
        undirected=True,
        zero_indexed=False,
        weight_type=WeightType.DOUBLE,
        edge_weights=[edge.weight for edge in edges],
    )


def read_gml_graph(path: str | os.PathLike[str]) -> Graph:
    """Read a GML file into a graph."""
    with open(path, encoding="utf-8") as handle:
        network = read_gml_network(handle)
    return network_to_graph(network)