[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "proclab"
version = "0.1.0"
description = "Procedural generation toolkit: Fortune's Voronoi diagrams, step-by-step maze generators and biome classification"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "voronoi",
    "fortune",
    "red-black-tree",
    "maze",
    "procedural-generation",
    "prim",
    "hunt-and-kill",
    "recursive-backtracker",
    "biomes",
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
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
proclab-maze = "proclab.maze.app:main"

[tool.hatch.build.targets.wheel]
packages = ["proclab"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
