"""CSR graphs with readers, generators, kernels, community metrics and betweenness."""

__version__ = "0.4.0"

__all__ = [
    "graph",
    "snap_format",
    "dimacs",
    "gml",
    "vertex_cover",
    "generators",
    "loader",
    "biconnected",
    "bfs",
    "components",
    "community",
    "edge_betweenness",
    "vertex_betweenness",
]