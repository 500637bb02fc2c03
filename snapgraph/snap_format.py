"""Reader for the plain-text SNAP edge-list format."""

from __future__ import annotations

import os
from typing import Iterable

from .graph import Graph, GraphFormatError, WeightType, build_csr

_WEIGHT_CODES = {
    "u": WeightType.NONE,
    "i": WeightType.INT,
    "l": WeightType.LONG,
    "f": WeightType.FLOAT,
    "d": WeightType.DOUBLE,
}


def _parse_problem_line(line: str) -> tuple[int, int, str, str, str]:
    tokens = line[1:].split()
    if len(tokens) < 3:
        raise GraphFormatError(f"malformed problem line: {line.rstrip()!r}")
    try:
        n = int(tokens[0])
        m = int(tokens[1])
    except ValueError as exc:
        raise GraphFormatError(f"malformed problem line: {line.rstrip()!r}") from exc
    flags = "".join(tokens[2:])
    if len(flags) < 3:
        raise GraphFormatError(f"malformed problem line: {line.rstrip()!r}")
    direction, weight_code, index_code = flags[0], flags[1], flags[2]
    if n <= 0 or m <= 0:
        raise GraphFormatError("vertex and edge counts must be positive")
    if direction not in "udr":
        raise GraphFormatError(f"unknown direction flag {direction!r}")
    if weight_code not in _WEIGHT_CODES:
        raise GraphFormatError(f"unknown weight flag {weight_code!r}")
    if index_code not in "01":
        raise GraphFormatError(f"unknown indexing flag {index_code!r}")
    return n, m, direction, weight_code, index_code


def parse_snap_graph(lines: Iterable[str]) -> Graph:
    """Build a graph from the lines of a SNAP-format file.

    Lines before the ``p`` problem line are ignored. The problem line reads
    ``p n m D W I`` where ``D`` is ``u`` (undirected), ``d`` (directed) or
    ``r`` (undirected, each edge listed in both directions), ``W`` is the
    weight type and ``I`` is ``0`` for zero-based or ``1`` for one-based ids.
    """
    it = iter(lines)
    header = None
    for line in it:
        if line.startswith("p"):
            header = _parse_problem_line(line)
            break
    if header is None:
        raise GraphFormatError("no problem line found")

    n, m, direction, weight_code, index_code = header
    undirected = direction in "ur"
    repeated = direction == "r"
    weight_type = _WEIGHT_CODES[weight_code]
    zero_indexed = index_code == "0"
    base = 0 if zero_indexed else 1
    parse_weight = int if weight_type in (WeightType.INT, WeightType.LONG) else float

    src: list[int] = []
    dest: list[int] = []
    weights: list[float] = []
    for line in it:
        fields = line.split()
        if not fields:
            continue
        needed = 2 if weight_type == WeightType.NONE else 3
        if len(fields) < needed:
            raise GraphFormatError(f"malformed edge line: {line.rstrip()!r}")
        try:
            u = int(fields[0])
            v = int(fields[1])
            w = parse_weight(fields[2]) if needed == 3 else None
        except ValueError as exc:
            raise GraphFormatError(f"malformed edge line: {line.rstrip()!r}") from exc
        if not (base <= u < n + base and base <= v < n + base):
            raise GraphFormatError(f"edge ({u}, {v}) is out of range for {n} vertices")
        if repeated and u > v:
            continue
        src.append(u - base)
        dest.append(v - base)
        if w is not None:
            weights.append(w)

    if not repeated and len(src) != m:
        raise GraphFormatError(
            f"number of edges specified in problem line ({m}) does not match "
            f"the total number of edges ({len(src)}) in file"
        )

    graph = build_csr(
        n,
        src,
        dest,
        undirected,
        weights if weight_type != WeightType.NONE else None,
    )
    graph.weight_type = weight_type
    graph.zero_indexed = zero_indexed
    return graph


def read_snap_graph(path: str | os.PathLike[str]) -> Graph:
    """Read a SNAP-format graph file."""
    with open(path, encoding="utf-8") as handle:
        return parse_snap_graph(handle)