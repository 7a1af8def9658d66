[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ultimatesim"
version = "0.1.0"
description = "Deterministic entity-component simulation of settlements, economies, navies and beliefs"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "ecs", "entity-component-system", "procedural", "perlin", "pathfinding"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["ultimatesim"]

[tool.pytest.ini_options]
addopts = "-ra"
