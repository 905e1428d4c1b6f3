[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gridsweeper"
version = "0.1.0"
description = "Minesweeper building blocks: board generation, flood-fill reveal, window layout and menu helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["minesweeper", "game", "puzzle", "flood-fill"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gridsweeper"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
