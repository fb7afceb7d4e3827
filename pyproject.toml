[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "redstone"
version = "0.1.0"
description = "A terminal roguelike: descend through eight themed dungeon levels, fight monsters and collect loot."
requires-python = ">=3.10"
dependencies = []
keywords = ["roguelike", "game", "terminal", "ascii", "dungeon", "rpg"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
redstone = "redstone.game:main"

[tool.hatch.build.targets.wheel]
packages = ["redstone"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
