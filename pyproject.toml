[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "influencegraph"
version = "0.1.0"
description = "SCC/CAC partitioning and influence-power measurement for directed social graphs"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "social-network",
    "influence",
    "strongly-connected-components",
    "partitioning",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
influencegraph = "influencegraph.cli:main"
influencegraph-partition = "influencegraph.cli:partition_main"
influencegraph-serial = "influencegraph.serial:main"

[tool.hatch.build.targets.wheel]
packages = ["influencegraph"]

[tool.pytest.ini_options]
addopts = "-ra"
