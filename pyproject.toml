[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dungeonkit"
version = "0.1.0"
description = "Engine-free game logic for a grid-based dungeon roguelike: maps, autotiling, path finding, animation timing, stats and spells."
requires-python = ">=3.10"
dependencies = []
keywords = ["roguelike", "dungeon", "game", "tilemap", "autotiling", "pathfinding", "animation"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
packages = ["dungeonkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
