"""Spatial and optimisation algorithms: k-means, TSP heuristics, polygon offsetting, geometry primitives and an R-tree."""

__version__ = "0.1.0"

__all__ = [
    "annealing",
    "genetic",
    "kmeans",
    "kmeans_cli",
    "polygon",
    "rtree",
    "shapes",
]