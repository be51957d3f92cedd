[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sorrow"
version = "0.1.0"
description = "A small incremental game simulation with catnip, wood, buildings and seasons, and a text report of its state."
requires-python = ">=3.10"
dependencies = []
keywords = ["idle", "incremental", "game", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sorrow = "sorrow.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sorrow"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
