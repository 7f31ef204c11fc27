[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bicomponents"
version = "0.1.0"
description = "Biconnected components, bridges and greedy maximal cliques of undirected graphs"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "biconnected components",
    "articulation points",
    "bridges",
    "union-find",
    "cliques",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bicomponents = "bicomponents.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bicomponents"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
