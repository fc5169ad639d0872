[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aocsolve"
version = "0.1.0"
description = "Solvers for a collection of daily programming puzzles from 2020, 2021 and 2024"
requires-python = ">=3.10"
keywords = ["puzzles", "advent", "solutions", "algorithms"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["aocsolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
