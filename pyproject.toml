[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "slotarena"
version = "0.1.0"
description = "Game-logic core of a top-down arena shooter: vectors, A* grid pathfinding, scenes, collisions, animation, input, player and enemies"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "astar", "pathfinding", "collision", "game-loop"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["slotarena"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
