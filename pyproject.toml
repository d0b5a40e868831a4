[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "monopolis"
version = "0.1.0"
description = "A property-trading board game engine: board, tiles, players, rent, houses, mortgages and turns."
requires-python = ">=3.10"
dependencies = []
keywords = ["board game", "property trading", "dice", "game engine", "turn based"]
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["monopolis"]

[tool.pytest.ini_options]
addopts = "-ra"
