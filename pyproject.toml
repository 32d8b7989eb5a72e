[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "radiant"
version = "0.0.1"
description = "Small game toolkit: vector and matrix math, 2D box physics, an input event queue, a frame clock, and simple file and log helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "physics", "vector", "matrix", "simulation", "events"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["radiant"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
