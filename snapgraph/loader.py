"""Load a graph by format name."""

from __future__ import annotations

import os
from typing import Callable

from .dimacs import read_dimacs_graph
from .generators import gen_random_graph, gen_rmat_graph
from .gml import read_gml_graph
from .graph import Graph, GraphFormatError
from .snap_format import read_snap_graph


def _empty_graph(path: str | os.PathLike[str]) -> Graph:
    """Formats whose readers produce a graph with no vertices."""
    return Graph()


_LOADERS: dict[str, Callable[[str | os.PathLike[str]], Graph]] = {
    "snap": read_snap_graph,
    "dimacs": read_dimacs_graph,
    "metis": _empty_graph,
    "gml": read_gml_graph,
    "rand": gen_random_graph,
    "rmat": gen_rmat_graph,
    "sqm": _empty_graph,
    "lm": _empty_graph,
}


def load_graph(path: str | os.PathLike[str], graph_type: str) -> Graph:
    """Read or generate a graph; ``graph_type`` names the file format.

    For ``rand`` and ``rmat`` the file is a generator configuration.
    """
    try:
        loader = _LOADERS[graph_type]
    except KeyError:
        raise GraphFormatError(f"Invalid graph format ({graph_type})") from None
    return loader(path)