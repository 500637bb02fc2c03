"""Synthetic graph generators: R-MAT and uniformly random edge lists."""

from __future__ import annotations

import logging
import math
import os
import random
import time
import warnings
from dataclasses import dataclass
from typing import Iterable

from .graph import Graph, GraphFormatError, WeightType, build_csr

DEFAULT_SEED = 2387

_log = logging.getLogger(__name__)


@dataclass
class GeneratorConfig:
    """Size, direction and weight settings shared by the generators."""

    n: int = 0
    m: int = 0
    undirected: bool = True
    weight_type: WeightType = WeightType.UNSET
    min_weight: float = 0.0
    max_weight: float = 1.0


@dataclass
class RMatParams:
    """Quadrant probabilities of the R-MAT recursion.

    The fourth probability ``d`` is whatever ``a``, ``b`` and ``c`` leave.
    """

    a: float = 0.45
    b: float = 0.25
    c: float = 0.15
    permute_vertices: bool = True

    @property
    def d(self) -> float:
        """Probability of the lower-right quadrant."""
        return 1 - (self.a + self.b + self.c)


def _config_entries(lines: Iterable[str]) -> Iterable[tuple[str, float, str]]:
    """Yield (name, value, line) for each setting, skipping comments and blanks."""
    for line in lines:
        tokens = line.split()
        if not tokens or tokens[0].startswith("#"):
            continue
        if len(tokens) < 2:
            raise GraphFormatError(f"missing value in config line: {line.rstrip()!r}")
        try:
            value = float(tokens[1])
        except ValueError as exc:
            raise GraphFormatError(
                f"malformed value in config line: {line.rstrip()!r}"
            ) from exc
        yield tokens[0], value, line


def _apply_common(config: GeneratorConfig, name: str, value: float) -> bool:
    """Apply a setting understood by every generator; False if unknown."""
    if name == "n":
        config.n = int(value)
        if config.n <= 0:
            raise GraphFormatError("n must be positive")
    elif name == "m":
        config.m = int(value)
        if config.m <= 0:
            raise GraphFormatError("m must be positive")
    elif name == "undirected":
        flag = int(value)
        if flag not in (0, 1):
            raise GraphFormatError("undirected must be 0 or 1")
        config.undirected = bool(flag)
    elif name == "weight_type":
        kind = int(value)
        if not 0 <= kind <= 4:
            raise GraphFormatError("weight_type must be between 0 and 4")
        config.weight_type = WeightType(kind)
    elif name == "max_weight":
        config.max_weight = value
    elif name == "min_weight":
        config.min_weight = value
    else:
        return False
    return True


def _warn_unknown(line: str) -> None:
    warnings.warn(f"Unknown parameter: {line.rstrip()}", stacklevel=3)


def parse_rmat_config(lines: Iterable[str]) -> tuple[GeneratorConfig, RMatParams]:
    """Read R-MAT settings, one ``name value`` pair per line."""
    config = GeneratorConfig()
    params = RMatParams()
    for name, value, line in _config_entries(lines):
        if _apply_common(config, name, value):
            continue
        if name in ("a", "b", "c"):
            if not 0 < value < 1:
                raise GraphFormatError(f"{name} must lie strictly between 0 and 1")
            setattr(params, name, value)
        elif name == "permute_vertices":
            params.permute_vertices = bool(int(value))
        else:
            _warn_unknown(line)
    return config, params


def parse_random_config(lines: Iterable[str]) -> GeneratorConfig:
    """Read random-graph settings, one ``name value`` pair per line."""
    config = GeneratorConfig()
    for name, value, line in _config_entries(lines):
        if not _apply_common(config, name, value):
            _warn_unknown(line)
    return config


def read_rmat_config(path: str | os.PathLike[str]) -> tuple[GeneratorConfig, RMatParams]:
    """Read an R-MAT configuration file."""
    with open(path, encoding="utf-8") as handle:
        return parse_rmat_config(handle)


def read_random_config(path: str | os.PathLike[str]) -> GeneratorConfig:
    """Read a random-graph configuration file."""
    with open(path, encoding="utf-8") as handle:
        return parse_random_config(handle)


def _check_size(config: GeneratorConfig) -> None:
    if config.n <= 0:
        raise ValueError("the configuration must give a positive n")
    if config.m <= 0:
        raise ValueError("the configuration must give a positive m")


def _quadrant(p: float, a: float, b: float, c: float) -> tuple[int, int]:
    """Row and column halves chosen by the draw ``p``."""
    if p < a:
        return 0, 0
    if p < a + b:
        return 0, 1
    if p < a + b + c:
        return 1, 0
    return 1, 1


def _finish(graph: Graph, config: GeneratorConfig) -> Graph:
    graph.weight_type = WeightType(config.weight_type)
    graph.zero_indexed = True
    graph.min_weight = config.min_weight
    graph.max_weight = config.max_weight
    return graph


def generate_rmat(
    config: GeneratorConfig, params: RMatParams, seed: int | None = None
) -> Graph:
    """Generate an R-MAT graph.

    Each edge descends ``log2(n)`` levels of the adjacency matrix, choosing a
    quadrant at each level with probabilities that are jittered by up to 10%
    and renormalised. Without an explicit seed the fixed default is used,
    unless the environment variable ``SEED_WITH_TIME`` is set.
    """
    _check_size(config)
    if not params.a + params.b + params.c < 1:
        raise ValueError("a + b + c must be less than 1")
    if seed is None:
        if os.environ.get("SEED_WITH_TIME"):
            seed = int(time.time()) ^ os.getpid()
        else:
            seed = DEFAULT_SEED
    rng = random.Random(seed)
    n, m = config.n, config.m
    scale = int(math.log2(n))
    _log.info("Scale: %d", scale)

    src: list[int] = []
    dest: list[int] = []
    for _ in range(m):
        u = v = 1
        step = n // 2
        av, bv, cv, dv = params.a, params.b, params.c, params.d
        du, dvv = _quadrant(rng.random(), av, bv, cv)
        u += du * step
        v += dvv * step
        for _level in range(1, scale):
            step //= 2
            av *= 0.95 + 0.1 * rng.random()
            bv *= 0.95 + 0.1 * rng.random()
            cv *= 0.95 + 0.1 * rng.random()
            dv *= 0.95 + 0.1 * rng.random()
            total = av + bv + cv + dv
            av, bv, cv, dv = av / total, bv / total, cv / total, dv / total
            du, dvv = _quadrant(rng.random(), av, bv, cv)
            u += du * step
            v += dvv * step
        src.append(u - 1)
        dest.append(v - 1)

    if params.permute_vertices:
        perm = list(range(n))
        for i in range(n):
            j = int(n * rng.random())
            perm[i], perm[j] = perm[j], perm[i]
        src = [perm[u] for u in src]
        dest = [perm[v] for v in dest]

    lo, span = config.min_weight, config.max_weight - config.min_weight
    kind = config.weight_type
    weights: list[float] | None
    if kind == WeightType.INT:
        weights = [int(lo + int(span * rng.random())) for _ in range(m)]
    elif kind == WeightType.LONG:
        weights = [int(lo + int(span) * rng.random()) for _ in range(m)]
    elif kind in (WeightType.FLOAT, WeightType.DOUBLE):
        weights = [lo + math.floor(span * rng.random()) for _ in range(m)]
    else:
        weights = None

    return _finish(build_csr(n, src, dest, config.undirected, weights), config)


def generate_random(config: GeneratorConfig, seed: int | None = None) -> Graph:
    """Generate a graph whose edge endpoints are drawn uniformly at random."""
    _check_size(config)
    rng = random.Random(DEFAULT_SEED if seed is None else seed)
    n, m = config.n, config.m

    src: list[int] = []
    dest: list[int] = []
    for _ in range(m):
        src.append(int(n * rng.random()))
        dest.append(int(n * rng.random()))

    lo, span = config.min_weight, config.max_weight - config.min_weight
    kind = config.weight_type
    weights: list[float] | None
    if kind == WeightType.INT:
        weights = [int(lo + int(span * rng.random())) for _ in range(m)]
    elif kind == WeightType.LONG:
        weights = [int(lo + int(span) * rng.random()) for _ in range(m)]
    elif kind in (WeightType.FLOAT, WeightType.DOUBLE):
        weights = [lo + span * rng.random() for _ in range(m)]
    else:
        weights = None

    return _finish(build_csr(n, src, dest, config.undirected, weights), config)


def gen_rmat_graph(path: str | os.PathLike[str], seed: int | None = None) -> Graph:
    """Generate an R-MAT graph from a configuration file."""
    config, params = read_rmat_config(path)
    return generate_rmat(config, params, seed)


def gen_random_graph(path: str | os.PathLike[str], seed: int | None = None) -> Graph:
    """Generate a random graph from a configuration file."""
    return generate_random(read_random_config(path), seed)