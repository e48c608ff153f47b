[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algolab"
version = "0.1.0"
description = "Classic data structures and algorithms: lists, stacks, queues, heaps, hashing, sorting, sparse matrices, graphs, shortest paths, spanning trees and job scheduling."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "sorting",
    "hashing",
    "sparse-matrix",
    "graph",
    "shortest-path",
    "spanning-tree",
    "topological-sort",
    "scheduling",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algolab-schedule = "algolab.scheduling:main"
algolab-trains = "algolab.trains:main"
algolab-sparse = "algolab.sparse_matrix:main"
algolab-graph = "algolab.graph:main"

[tool.hatch.build.targets.wheel]
packages = ["algolab"]

[tool.hatch.build.targets.sdist]
include = ["algolab", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
