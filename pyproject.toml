[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "treegraph"
version = "0.1.0"
description = "Adjacency-list graphs with depth- and breadth-first traversal, a linked binary min-heap, tree printing and Huffman coding"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "traversal", "heap", "priority queue", "huffman", "binary tree", "red-black tree"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
treegraph = "treegraph.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["treegraph"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
