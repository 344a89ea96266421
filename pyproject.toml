[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "battlesim"
version = "0.1.0"
description = "Turn-based battle simulation driven by a command script, built on a small entity-component-system core"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "ecs", "entity-component-system", "turn-based", "battle"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
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
battlesim = "battlesim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["battlesim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
