# snapgraph

A pure-Python library for analysing sparse, small-world networks. Graphs are
held in compressed sparse row (CSR) form. The library reads a few text
formats and generates synthetic graphs. It also provides traversal and
decomposition kernels, community quality measures and betweenness centrality.

There are no runtime dependencies.

## Installation

```
pip install snapgraph
```

To run the test suite:

```
pip install "snapgraph[test]"
pytest
```

## The graph type

`snapgraph.graph.Graph` is a dataclass with these fields:

- `num_edges`: `n + 1` offsets into `end_v`.
- `end_v`: edge targets.
- `edge_id`: one id per stored edge entry.
- Flags and settings: `undirected`, `zero_indexed`, `weight_type` (a `WeightType`), `min_weight` and `max_weight`.
- Optional weights: `edge_weights` and `vertex_weights`.
- Optional community records: `cvl` (a list of `CVertex`) and `cel` (a list of `CEdge`).

An undirected graph stores each edge once in each direction.

The graph has these members:

- The properties `n` (vertices) and `m` (stored edge entries).
- The methods `degree(v)`, `neighbors(v)` and `edge_range(v)`.

Inconsistent offsets or list lengths raise `ValueError` on construction.

`build_csr(n, src, dest, undirected, weights=None)` builds a graph from parallel edge lists. Edge `i` gets id `i`.

```python
from snapgraph.graph import build_csr
from snapgraph.vertex_betweenness import vertex_betweenness_centrality

g = build_csr(4, [0, 1, 2], [1, 2, 3], undirected=True)
print(g.n, g.m, g.neighbors(1))
bc = vertex_betweenness_centrality(g, g.n)
```

## Reading and generating graphs

`snapgraph.loader.load_graph(path, graph_type)` chooses a reader or generator by name:

| `graph_type` | result |
|--------------|--------|
| `snap`   | SNAP edge list with a `p n m D W I` problem line (see `snapgraph.snap_format`) |
| `dimacs` | DIMACS file: undirected, integer-weighted, 1-indexed |
| `gml`    | GML network, always read as undirected with double weights |
| `rand`   | uniformly random graph generated from a config file |
| `rmat`   | R-MAT graph generated from a config file |
| `metis`, `sqm`, `lm` | an empty graph with no vertices |

An unknown name raises `snapgraph.graph.GraphFormatError`. The readers raise the same error for malformed input.

You can also call the readers directly:

- `snapgraph.snap_format`: `parse_snap_graph(lines)` and `read_snap_graph(path)`.
  In the problem line, `D` is one of:
  - `u`: undirected.
  - `d`: directed.
  - `r`: undirected, with each edge listed both ways; only the copy with `u <= v` is kept.

  `W` is one of `u`, `i`, `l`, `f` or `d`. `I` is `0` for zero-based ids or `1` for one-based ids.
- `snapgraph.dimacs`: `parse_dimacs_graph(lines)` and `read_dimacs_graph(path)`.
- `snapgraph.gml`:
  - `read_gml_network(lines)` returns a `GmlNetwork` of `GmlVertex`/`GmlEdge` records. It has `find_vertex(vertex_id)`.
  - `network_to_graph(network)` converts such a network to a `Graph`.
  - `read_gml_graph(path)` reads a file straight into a `Graph`.

### Generators

`snapgraph.generators` offers two levels of entry point:

- `gen_rmat_graph(path, seed=None)` and `gen_random_graph(path, seed=None)` read a config file and generate a graph from it.
- `generate_rmat(config, params, seed=None)` and `generate_random(config, seed=None)` take a `GeneratorConfig` (and an `RMatParams`) instead.
- `parse_rmat_config`, `parse_random_config`, `read_rmat_config` and `read_random_config` parse the settings.

Config files hold `name value` lines. Lines starting with `#` are comments.

- All generators accept the keys `n`, `m`, `undirected`, `weight_type` (0–4), `min_weight` and `max_weight`.
- R-MAT also accepts `a`, `b` and `c`, each strictly between 0 and 1. Their defaults are 0.45, 0.25 and 0.15, and `d = 1 - a - b - c`.
- R-MAT also accepts `permute_vertices`, which defaults to on.
- An unknown key produces a warning.

Without a seed, both generators use 2387. For R-MAT only, setting the environment variable `SEED_WITH_TIME` seeds from the clock and process id instead.

## Kernels

- `snapgraph.biconnected.biconnected_components(graph)` labels the biconnected components reachable from vertex 0.
  - It returns `(total, labels)`.
  - Labels start at 1, and vertices that are never reached keep label 0.
- `snapgraph.biconnected.find_articulation_points(graph)` returns one boolean per vertex.
- `snapgraph.bfs.bfs_frontier_expansion(graph, src, diameter)` returns the number of vertices reachable from `src`. It raises `ValueError` if the search goes deeper than `diameter`.
- `snapgraph.components.aux_connected_components_init(graph)` works on `graph.cvl`/`graph.cel`. It writes component ids into the `comm_id` fields and returns the number of components.
- `snapgraph.components.aux_connected_components_update(graph, num_components, maxbc_component)` checks whether masked edges have split a component. It returns:
  - `1` if the component split;
  - `0` if it did not;
  - `-1` if the component is empty.
- `snapgraph.vertex_cover.vertex_cover_weighted(graph)` uses `graph.vertex_weights` and is a local-ratio heuristic.
- `snapgraph.vertex_cover.vertex_cover_unweighted(graph)` is a greedy heuristic.
- Both vertex-cover functions return the size of the cover they find.

## Metrics

- `snapgraph.community.community_modularity(graph, membership, num_components)` is the modularity of a whole partition.
  - Vertices with a negative id belong to no community.
  - It returns NaN for a missing membership or a non-positive component count.
- `snapgraph.community.single_community_modularity(graph, membership, component)` scores one community.
- `snapgraph.community.single_community_conductance(graph, membership, component)` returns infinity when the community cuts no edge.
- `snapgraph.community.single_community_clustering_coefficient(graph, membership, community)` scores one community's clustering.
- `snapgraph.vertex_betweenness.vertex_betweenness_centrality(graph, num_srcs)` returns a list of scores. With `num_srcs == graph.n` it is exact.
  - `vertex_betweenness_centrality_simple` uses the first `num_srcs` vertex ids as sources.
  - `vertex_betweenness_centrality_par_bfs` uses the first `num_srcs` vertices that have edges. It stops with `ValueError` past 500 search levels.
- `snapgraph.edge_betweenness.evaluate_edge_centrality_bcpart(graph, curr_component1=-1, curr_component2=-1, seed=None)` works on `graph.cvl`/`graph.cel`.
  - It adds edge betweenness into each `CEdge.cval` and returns the scores.
  - Edges with a non-zero `mask` are ignored.
  - When `curr_component1` is not -1, only sources in the two given communities are used, and the scores of their edges are cleared first.

## What the package does not do

- There is no command-line program; everything is called from Python.
- The `metis`, `sqm` and `lm` graph types give an empty graph. There is no METIS reader and no mesh generator.
- There is no GraphML reader.
- There is no strongly-connected-components kernel and no graph-diameter kernel.
- Every computation runs sequentially in one thread.