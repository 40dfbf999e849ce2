"""Simulated annealing for an open travelling-salesman route."""

from __future__ import annotations

import argparse
import math
import random
import time
from dataclasses import dataclass
from typing import Sequence

T_START = 50000.0
T_END = 1e-8
COOLING = 0.98
CHAIN_LENGTH = 5000

# City 1 is the fixed start; the rest are 31 Chinese city coordinates.
CITIES: tuple[tuple[float, float], ...] = (
    (900, 500),
    (1304, 2312), (3639, 1315), (4177, 2244), (3712, 1399),
    (3488, 1535), (3326, 1556), (3238, 1229), (4196, 1004),
    (4312, 790), (4386, 570), (3007, 1970), (2562, 1756),
    (2788, 1491), (2381, 1676), (1332, 695),
    (3715, 1678), (3918, 2179), (4061, 2370),
    (3780, 2212), (3676, 2578), (4029, 2838),
    (4263, 2931), (3429, 1908), (3507, 2367),
    (3394, 2643), (3439, 3201), (2935, 3240),
    (3140, 3550), (2545, 2357), (2778, 2826),
    (2370, 2975),
)


@dataclass(frozen=True)
class AnnealingResult:
    """Final route (1-based city numbers), its length and the cooling steps taken."""

    order: tuple[int, ...]
    length: float
    cooling_steps: int


def euclidean(city_a: Sequence[float], city_b: Sequence[float]) -> float:
    """Straight-line distance between two cities."""
    return math.hypot(city_a[0] - city_b[0], city_a[1] - city_b[1])


def path_length(order: Sequence[int], cities: Sequence[Sequence[float]]) -> float:
    """Length of the open path visiting 1-based city numbers in ``order``."""
    return sum(
        euclidean(cities[a - 1], cities[b - 1]) for a, b in zip(order, order[1:])
    )


def swap_neighbour(order: Sequence[int], rng: random.Random) -> list[int]:
    """Copy of ``order`` with two distinct positions other than the first swapped."""
    n = len(order)
    if n < 3:
        raise ValueError("need at least three cities to swap")
    pos1 = rng.randrange(1, n)
    pos2 = rng.randrange(1, n)
    while pos2 == pos1:
        pos2 = rng.randrange(1, n)
    result = list(order)
    result[pos1], result[pos2] = result[pos2], result[pos1]
    return result


def anneal(
    cities: Sequence[Sequence[float]] = CITIES,
    t_start: float = T_START,
    t_end: float = T_END,
    cooling: float = COOLING,
    chain_length: int = CHAIN_LENGTH,
    rng: random.Random | None = None,
) -> AnnealingResult:
    """Run the annealing schedule starting from the route 1, 2, ..., n."""
    if not 0 < cooling < 1:
        raise ValueError("cooling must lie strictly between 0 and 1")
    if t_start <= 0 or t_end <= 0:
        raise ValueError("temperatures must be positive")
    if chain_length < 0:
        raise ValueError("chain_length must not be negative")
    rng = rng if rng is not None else random.Random()

    order = list(range(1, len(cities) + 1))
    current = path_length(order, cities)
    temperature = t_start
    steps = 0
    while temperature > t_end:
        for _ in range(chain_length):
            candidate = swap_neighbour(order, rng)
            length = path_length(candidate, cities)
            df = length - current
            if df >= 0 and math.exp(-df / temperature) <= rng.random():
                continue
            order, current = candidate, length
        temperature *= cooling
        steps += 1
    return AnnealingResult(tuple(order), path_length(order, cities), steps)


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the built-in 32-city problem and print the route."""
    parser = argparse.ArgumentParser(description="Simulated annealing TSP solver.")
    parser.add_argument("--t-start", type=float, default=T_START)
    parser.add_argument("--t-end", type=float, default=T_END)
    parser.add_argument("--cooling", type=float, default=COOLING)
    parser.add_argument("--chain-length", type=int, default=CHAIN_LENGTH)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    started = time.perf_counter()
    result = anneal(
        CITIES,
        args.t_start,
        args.t_end,
        args.cooling,
        args.chain_length,
        random.Random(args.seed),
    )
    elapsed = time.perf_counter() - started

    print(
        f"Simulated annealing, initial temperature TS={args.t_start:.2f}, "
        f"cooling q={args.cooling:.2f}, {args.chain_length} iterations per "
        f"temperature, {result.cooling_steps} cooling steps; best route:"
    )
    print(",".join(str(city) for city in result.order))
    print(f"Route length: {result.length:f}")
    print(f"Elapsed: {elapsed:f} s.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())