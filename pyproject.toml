[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bytebloom"
version = "0.1.0"
description = "A terminal gardening simulation: plant, tend and harvest crops and trade them on a shifting market."
requires-python = ">=3.10"
keywords = ["game", "simulation", "gardening", "terminal", "farming"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bytebloom = "bytebloom.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bytebloom"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
