[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adventgrid"
version = "0.1.0"
description = "Solvers for ten grid, list and sequence puzzles, with a small rectangular grid container"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "grid", "advent", "solver"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
adventgrid-day01 = "adventgrid.day01:main"
adventgrid-day02 = "adventgrid.day02:main"
adventgrid-day03 = "adventgrid.day03:main"
adventgrid-day04 = "adventgrid.day04:main"
adventgrid-day05 = "adventgrid.day05:main"
adventgrid-day06 = "adventgrid.day06:main"
adventgrid-day07 = "adventgrid.day07:main"
adventgrid-day08 = "adventgrid.day08:main"
adventgrid-day09 = "adventgrid.day09:main"
adventgrid-day10 = "adventgrid.day10:main"

[tool.hatch.build.targets.wheel]
packages = ["adventgrid"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
