[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "snapgraph"
version = "0.4.0"
description = "Graph loading, generation, kernels and community metrics for sparse small-world networks"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "network",
    "csr",
    "betweenness",
    "modularity",
    "conductance",
    "rmat",
    "biconnected",
    "vertex-cover",
    "gml",
    "dimacs",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["snapgraph"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
