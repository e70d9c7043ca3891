[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "torrehanoi"
version = "1.0.0"
description = "Terminal Tower of Hanoi game with a saved history of played matches"
requires-python = ">=3.10"
dependencies = []
keywords = ["hanoi", "tower of hanoi", "puzzle", "game", "terminal"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
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
torrehanoi = "torrehanoi.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["torrehanoi"]

[tool.pytest.ini_options]
addopts = "-ra"
