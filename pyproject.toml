[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sdpgraph"
version = "0.1.0"
description = "Graph colouring and clique finding with semidefinite programming relaxations"
requires-python = ">=3.10"
keywords = ["graph", "coloring", "clique", "semidefinite programming", "lovasz theta"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "numpy",
    "matplotlib",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sdpgraph = "sdpgraph.cli:main"
sdpgraph-generate = "sdpgraph.generate:main"
sdpgraph-tester = "sdpgraph.tester:main"
sdpgraph-visualize = "sdpgraph.visualize:main"

[tool.hatch.build.targets.wheel]
packages = ["sdpgraph"]

[tool.pytest.ini_options]
addopts = "-ra"
