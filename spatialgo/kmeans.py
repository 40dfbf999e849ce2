"""K-means clustering (Lloyd's algorithm) with k-means++ seeding."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Sequence

Point = tuple[float, ...]


@dataclass(frozen=True)
class ClusteringParameters:
    """Configuration for :func:`kmeans_lloyd`.

    ``max_iteration`` stops the run after that many iterations, ``min_delta``
    stops it once no mean moves further than that distance, and
    ``random_seed`` makes the k-means++ seeding reproducible.
    """

    k: int
    max_iteration: int | None = None
    min_delta: float | None = None
    random_seed: int | None = None

    def __post_init__(self) -> None:
        if self.k <= 0:
            raise ValueError("k must be greater than zero")


def distance_squared(point_a: Sequence[float], point_b: Sequence[float]) -> float:
    """Squared euclidean distance between two points."""
    return sum((a - b) * (a - b) for a, b in zip(point_a, point_b))


def distance(point_a: Sequence[float], point_b: Sequence[float]) -> float:
    """Euclidean distance between two points."""
    return math.sqrt(distance_squared(point_a, point_b))


def closest_distance(means: Sequence[Sequence[float]], data: Sequence[Sequence[float]]) -> list[float]:
    """Squared distance from each data point to its nearest mean."""
    return [min(distance_squared(point, mean) for mean in means) for point in data]


def random_plusplus(data: Sequence[Sequence[float]], k: int, seed: int) -> list[Point]:
    """Pick ``k`` initial means from ``data`` using k-means++ weighting."""
    if k <= 0:
        raise ValueError("k must be greater than zero")
    if not data:
        raise ValueError("data must not be empty")
    rng = random.Random(seed)
    means: list[Point] = [tuple(data[rng.randrange(len(data))])]
    indices = range(len(data))
    for _ in range(1, k):
        weights = closest_distance(means, data)
        if sum(weights) > 0:
            (index,) = rng.choices(indices, weights=weights)
        else:
            index = rng.randrange(len(data))
        means.append(tuple(data[index]))
    return means


def closest_mean(point: Sequence[float], means: Sequence[Sequence[float]]) -> int:
    """Index of the mean nearest to ``point``; the first wins on ties."""
    if not means:
        raise ValueError("means must not be empty")
    best_index = 0
    best = distance_squared(point, means[0])
    for index, mean in enumerate(means[1:], start=1):
        d = distance_squared(point, mean)
        if d < best:
            best, best_index = d, index
    return best_index


def calculate_clusters(data: Sequence[Sequence[float]], means: Sequence[Sequence[float]]) -> list[int]:
    """Cluster index of the nearest mean for every data point."""
    return [closest_mean(point, means) for point in data]


def calculate_means(
    data: Sequence[Sequence[float]],
    clusters: Sequence[int],
    old_means: Sequence[Sequence[float]],
    k: int,
) -> list[Point]:
    """New means from cluster assignments; empty clusters keep their old mean."""
    dims = len(data[0]) if data else (len(old_means[0]) if old_means else 0)
    sums = [[0.0] * dims for _ in range(k)]
    counts = [0] * k
    for point, cluster in zip(data, clusters):
        counts[cluster] += 1
        total = sums[cluster]
        for j, value in enumerate(point[:dims]):
            total[j] += value
    return [
        tuple(old_means[i]) if counts[i] == 0 else tuple(v / counts[i] for v in sums[i])
        for i in range(k)
    ]


def deltas(old_means: Sequence[Sequence[float]], means: Sequence[Sequence[float]]) -> list[float]:
    """Distance each mean moved since the previous iteration."""
    if len(old_means) != len(means):
        raise ValueError("old_means and means must have the same length")
    return [distance(new, old) for new, old in zip(means, old_means)]


def deltas_below_limit(deltas: Sequence[float], min_delta: float) -> bool:
    """True when no delta exceeds ``min_delta``."""
    return all(d <= min_delta for d in deltas)


def kmeans_lloyd(
    data: Sequence[Sequence[float]], parameters: ClusteringParameters
) -> tuple[list[Point], list[int]]:
    """Cluster ``data`` and return ``(means, cluster index per point)``."""
    k = parameters.k
    if len(data) < k:
        raise ValueError("there must be at least k data points")
    points = [tuple(float(v) for v in p) for p in data]
    if len({len(p) for p in points}) > 1:
        raise ValueError("all points must have the same dimension")
    seed = parameters.random_seed
    if seed is None:
        seed = random.SystemRandom().getrandbits(64)
    means = random_plusplus(points, k, seed)

    old_means: list[Point] = []
    clusters: list[int] = []
    count = 0
    while True:
        clusters = calculate_clusters(points, means)
        old_old_means, old_means = old_means, means
        means = calculate_means(points, clusters, old_means, k)
        count += 1
        if means == old_means or means == old_old_means:
            break
        if parameters.max_iteration is not None and count == parameters.max_iteration:
            break
        if parameters.min_delta is not None and deltas_below_limit(
            deltas(old_means, means), parameters.min_delta
        ):
            break
    return means, clusters


def kmeans(
    data: Sequence[Sequence[float]],
    k: int,
    max_iter: int = 0,
    min_delta: float = -1.0,
) -> tuple[list[Point], list[int]]:
    """Shorthand for :func:`kmeans_lloyd`; zero disables ``max_iter``/``min_delta``."""
    parameters = ClusteringParameters(
        k,
        max_iteration=max_iter if max_iter != 0 else None,
        min_delta=min_delta if min_delta != 0 else None,
    )
    return kmeans_lloyd(data, parameters)