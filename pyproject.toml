[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algocraft"
version = "0.1.0"
description = "Classic algorithms: sorting, searching, graphs, geometry, clustering and string processing"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "sorting",
    "searching",
    "graphs",
    "shortest-paths",
    "spanning-tree",
    "convex-hull",
    "closest-pair",
    "kmeans",
    "n-queens",
    "string-matching",
    "burrows-wheeler",
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algocraft-nqueens = "algocraft.puzzles:main"

[tool.hatch.build.targets.wheel]
packages = ["algocraft"]

[tool.pytest.ini_options]
addopts = "-ra"
