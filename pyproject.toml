[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spatialgo"
version = "0.1.0"
description = "Small spatial and optimisation algorithms: k-means, TSP solvers, polygon offsetting and an R-tree"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "k-means",
    "clustering",
    "traveling salesman",
    "genetic algorithm",
    "simulated annealing",
    "polygon offset",
    "r-tree",
    "spatial index",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
spatialgo-kmeans = "spatialgo.kmeans_cli:main"
spatialgo-anneal = "spatialgo.annealing:main"
spatialgo-genetic = "spatialgo.genetic:main"
spatialgo-stretch = "spatialgo.polygon:main"
spatialgo-rtree = "spatialgo.rtree:main"

[tool.hatch.build.targets.wheel]
packages = ["spatialgo"]

[tool.pytest.ini_options]
addopts = "-ra"
