"""Reader for DIMACS shortest-path style graph files."""

from __future__ import annotations

import os
from typing import Iterable

from .graph import Graph, GraphFormatError, WeightType, build_csr


def _parse_problem_line(line: str) -> tuple[int, int]:
    tokens = line[1:].split()
    if len(tokens) < 3:
        raise GraphFormatError(f"malformed problem line: {line.rstrip()!r}")
    try:
        n = int(tokens[1])
        m = int(tokens[2])
    except ValueError as exc:
        raise GraphFormatError(f"malformed problem line: {line.rstrip()!r}") from exc
    if n <= 0 or m <= 0:
        raise GraphFormatError("vertex and edge counts must be positive")
    return n, m


def parse_dimacs_graph(lines: Iterable[str]) -> Graph:
    """Build a graph from the lines of a DIMACS file.

    Lines starting with ``c`` are comments. The first other line must be the
    problem line ``p <kind> n m``; every following line describes one edge as
    ``<tag> u v w`` with one-based vertex ids and an integer weight. DIMACS
    graphs are undirected, weighted and one-indexed.
    """
    it = iter(lines)
    header = None
    for line in it:
        if line.startswith("c") or not line.strip():
            continue
        if not line.startswith("p"):
            raise GraphFormatError(f"expected a problem line, got {line.rstrip()!r}")
        header = _parse_problem_line(line)
        break
    if header is None:
        raise GraphFormatError("no problem line found")
    n, m = header

    src: list[int] = []
    dest: list[int] = []
    weights: list[int] = []
    for line in it:
        if line.startswith("c") or not line.strip():
            continue
        edge_number = len(src) + 1
        fields = line[1:].split()
        if len(fields) < 3:
            raise GraphFormatError(f"error reading edge # {edge_number} in the input")
        try:
            u, v, w = int(fields[0]), int(fields[1]), int(fields[2])
        except ValueError as exc:
            raise GraphFormatError(
                f"error reading edge # {edge_number} in the input"
            ) from exc
        if not (1 <= u <= n and 1 <= v <= n):
            raise GraphFormatError(f"error reading edge # {edge_number} in the input")
        src.append(u - 1)
        dest.append(v - 1)
        weights.append(w)

    if len(src) != m:
        raise GraphFormatError(
            f"number of edges specified in problem line ({m}) does not match "
            f"the total number of edges ({len(src)}) in file"
        )

    graph = build_csr(n, src, dest, True, weights)
    graph.weight_type = WeightType.INT
    graph.zero_indexed = False
    return graph


def read_dimacs_graph(path: str | os.PathLike[str]) -> Graph:
    """Read a DIMACS graph file."""
    with open(path, encoding="utf-8") as handle:
        return parse_dimacs_graph(handle)