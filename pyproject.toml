[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vecindex"
version = "0.1.0"
description = "Building blocks for vector similarity indexes: parameter configs, bitsets, binary sets, distances and visit-trace records"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["vector", "similarity search", "ann", "index", "distance", "bitset", "config"]
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
    "Topic :: Database",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["vecindex"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
