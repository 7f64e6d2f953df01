[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skynav"
version = "0.1.0"
description = "Console flight planner: direct, connecting, custom, multi-leg and layover trips over a small city network"
requires-python = ">=3.10"
dependencies = []
keywords = ["flights", "travel", "dijkstra", "graph", "booking", "itinerary"]
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
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
skynav = "skynav.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["skynav"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
