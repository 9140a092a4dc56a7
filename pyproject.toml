[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nonogram"
version = "0.1.0"
description = "A terminal nonogram puzzle game with a backtracking solver, hints and a puzzle editor"
requires-python = ">=3.10"
dependencies = []
keywords = ["nonogram", "picross", "griddlers", "puzzle", "game", "solver", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: English",
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

[project.scripts]
nonogram = "nonogram.game:main"

[tool.hatch.build.targets.wheel]
packages = ["nonogram"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
