[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zonekit"
version = "0.1.0"
description = "Building blocks for numeric abstract interpretation: bounded integers, sparse weighted graphs, difference-constraint graph algorithms and weak topological orderings."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "abstract interpretation",
    "difference constraints",
    "static analysis",
    "weak topological ordering",
    "widening",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["zonekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
