import math
from collections import Counter

import pytest

from snapgraph.generators import (
    GeneratorConfig,
    RMatParams,
    gen_random_graph,
    gen_rmat_graph,
    generate_random,
    generate_rmat,
    parse_random_config,
    parse_rmat_config,
    read_random_config,
    read_rmat_config,
)
from snapgraph.graph import GraphFormatError, WeightType


def test_rmat_defaults():
    config, params = parse_rmat_config(["n 16\n", "m 40\n"])
    assert (params.a, params.b, params.c) == (0.45, 0.25, 0.15)
    assert params.permute_vertices is True
    assert config.n == 16 and config.m == 40
    assert config.weight_type == WeightType.UNSET


def test_rmat_config_values_and_comments():
    lines = [
        "# a comment\n",
        "\n",
        "n 32\n",
        "m 100\n",
        "a 0.5\n",
        "b 0.2\n",
        "c 0.1\n",
        "permute_vertices 0\n",
        "undirected 0\n",
        "weight_type 4\n",
        "min_weight 2\n",
        "max_weight 9\n",
    ]
    config, params = parse_rmat_config(lines)
    assert (params.a, params.b, params.c) == (0.5, 0.2, 0.1)
    assert params.permute_vertices is False
    assert config.undirected is False
    assert config.weight_type == WeightType.DOUBLE
    assert (config.min_weight, config.max_weight) == (2.0, 9.0)


def test_random_config_warns_on_unknown():
    with pytest.warns(UserWarning):
        config = parse_random_config(["n 5\n", "m 3\n", "a 0.3\n"])
    assert config.n == 5 and config.m == 3


@pytest.mark.parametrize(
    "line", ["n 0\n", "m -1\n", "undirected 2\n", "weight_type 5\n", "n abc\n", "n\n"]
)
def test_invalid_random_config(line):
    with pytest.raises(GraphFormatError):
        parse_random_config([line])


@pytest.mark.parametrize("line", ["a 0\n", "b 1\n", "c 1.5\n"])
def test_invalid_rmat_probability(line):
    with pytest.raises(GraphFormatError):
        parse_rmat_config([line])


def test_rmat_probabilities_must_sum_below_one():
    config = GeneratorConfig(n=8, m=4)
    with pytest.raises(ValueError):
        generate_rmat(config, RMatParams(a=0.5, b=0.3, c=0.2))


def test_missing_size_rejected():
    with pytest.raises(ValueError):
        generate_random(GeneratorConfig(n=0, m=3))
    with pytest.raises(ValueError):
        generate_rmat(GeneratorConfig(n=4, m=0), RMatParams())


def test_random_undirected_invariants():
    config = GeneratorConfig(n=10, m=25, undirected=True)
    graph = generate_random(config, seed=11)
    assert graph.n == config.n
    assert graph.m == 2 * config.m
    counts = Counter(graph.edge_id)
    assert set(counts) == set(range(config.m))
    assert all(c == 2 for c in counts.values())
    assert graph.zero_indexed is True


def test_random_is_reproducible():
    config = GeneratorConfig(n=12, m=30, undirected=False)
    first = generate_random(config, seed=3)
    second = generate_random(config, seed=3)
    assert first.end_v == second.end_v
    assert first.num_edges == second.num_edges
    assert first.m == config.m


def test_random_double_weights_in_range():
    config = GeneratorConfig(
        n=6, m=20, undirected=False, weight_type=WeightType.DOUBLE,
        min_weight=1.0, max_weight=5.0,
    )
    graph = generate_random(config, seed=7)
    assert graph.weight_type == WeightType.DOUBLE
    assert len(graph.edge_weights) == graph.m
    assert all(1.0 <= w < 5.0 for w in graph.edge_weights)


def test_random_int_weights_are_integers():
    config = GeneratorConfig(
        n=6, m=20, undirected=True, weight_type=WeightType.INT,
        min_weight=0.0, max_weight=10.0,
    )
    graph = generate_random(config, seed=1)
    assert all(isinstance(w, int) and 0 <= w < 10 for w in graph.edge_weights)


def test_rmat_vertices_in_range_and_degrees_sum():
    config = GeneratorConfig(n=64, m=200, undirected=True)
    graph = generate_rmat(config, RMatParams(), seed=5)
    assert graph.n == config.n
    assert graph.m == 2 * config.m
    assert all(0 <= v < config.n for v in graph.end_v)
    assert sum(graph.degree(v) for v in range(graph.n)) == graph.m


def test_rmat_without_permutation_directed():
    config = GeneratorConfig(n=16, m=50, undirected=False)
    graph = generate_rmat(config, RMatParams(permute_vertices=False), seed=2)
    again = generate_rmat(config, RMatParams(permute_vertices=False), seed=2)
    assert graph.m == config.m
    assert graph.end_v == again.end_v


def test_rmat_double_weights_are_floored():
    config = GeneratorConfig(
        n=16, m=30, undirected=False, weight_type=WeightType.DOUBLE,
        min_weight=0.0, max_weight=100.0,
    )
    graph = generate_rmat(config, RMatParams(), seed=9)
    assert all(w == math.floor(w) and 0 <= w < 100 for w in graph.edge_weights)


def test_file_based_generation(tmp_path):
    rand_cfg = tmp_path / "rand.cfg"
    rand_cfg.write_text("n 8\nm 12\nundirected 1\n")
    rmat_cfg = tmp_path / "rmat.cfg"
    rmat_cfg.write_text("n 8\nm 12\nundirected 0\n")
    assert read_random_config(rand_cfg).m == 12
    assert read_rmat_config(rmat_cfg)[0].undirected is False
    assert gen_random_graph(rand_cfg, seed=4).m == 24
    assert gen_rmat_graph(rmat_cfg, seed=4).m == 12