[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "snakesim"
version = "0.1.0"
description = "A small simulation of snakes built from jointed chains that chase food and bump into each other"
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["simulation", "animation", "inverse kinematics", "snakes", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
snakesim = "snakesim.app:main"

[tool.hatch.build.targets.wheel]
packages = ["snakesim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
