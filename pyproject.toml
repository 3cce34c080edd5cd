[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pocketapps"
version = "0.1.0"
description = "Small terminal games and tools: Hunt the Wumpus, a three-point shootout, a coffee shop manager, a team catalog and more"
requires-python = ">=3.10"
dependencies = []
keywords = ["games", "terminal", "wumpus", "basketball", "coffee-shop", "linked-list"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pocketapps-shootout = "pocketapps.shootout:main"
pocketapps-coffee = "pocketapps.coffee.cli:main"
pocketapps-catalog = "pocketapps.catalog.cli:main"
pocketapps-wumpus = "pocketapps.wumpus.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pocketapps"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
