[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsalab"
version = "0.1.0"
description = "Classic data-structure and algorithm exercises: recursion, sorting, sets, binary search trees and graphs."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "recursion",
    "sorting",
    "binary-search-tree",
    "dijkstra",
    "depth-first-search",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsalab-recursion = "dsalab.recursion:main"
dsalab-timespan = "dsalab.timespan:main"
dsalab-squares = "dsalab.squares:main"
dsalab-sorter = "dsalab.sorter:main"
dsalab-intset = "dsalab.intset:main"
dsalab-trees = "dsalab.treedriver:main"
dsalab-containers = "dsalab.containers:main"
dsalab-graphs = "dsalab.graph_driver:main"

[tool.hatch.build.targets.wheel]
packages = ["dsalab"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
