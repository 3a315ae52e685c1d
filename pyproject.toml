[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rltoolkit"
version = "0.1.0"
description = "Building blocks for roguelike games: random generators, geometry, line and circle rasterisation, field of view, A* pathfinding and map generators."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "roguelike",
    "field-of-view",
    "pathfinding",
    "astar",
    "procedural-generation",
    "dungeon",
    "cave",
    "bresenham",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rltoolkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
