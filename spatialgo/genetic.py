"""Genetic algorithm for the travelling-salesman problem on a distance matrix."""

from __future__ import annotations

import argparse
import random
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

MAX_LENGTH = 9999999.0
GROUP_SIZE = 30
P_CROSSOVER = 0.8
P_MUTATION = 0.01
ITERATIONS = 1500
NO_EDGE = -1


@dataclass
class Graph:
    """Cities labelled 1..n and the matrix of distances between them."""

    vexs: list[int]
    arcs: list[list[float]]

    @property
    def vex_num(self) -> int:
        return len(self.vexs)

    def arc_count(self) -> int:
        """Number of matrix entries holding a positive distance."""
        return sum(1 for row in self.arcs for value in row if value > 0)


@dataclass
class Solution:
    """A route (city labels in visiting order), its length and its selection weight."""

    path: list[int]
    length: float = MAX_LENGTH
    probability: float = 0.0


def parse_graph(text: str) -> Graph:
    """Read a city count, the city labels and the full distance matrix."""
    tokens = text.split()
    if not tokens:
        raise ValueError("graph data is empty")
    count = int(tokens[0])
    if count <= 0:
        raise ValueError("city count must be positive")
    expected = 1 + count + count * count
    if len(tokens) < expected:
        raise ValueError(f"expected {expected} values, found {len(tokens)}")
    labels = [int(token) for token in tokens[1 : 1 + count]]
    values = [float(token) for token in tokens[1 + count : expected]]
    arcs = [values[row * count : (row + 1) * count] for row in range(count)]
    return Graph(labels, arcs)


def read_graph(path: str | Path) -> Graph:
    """Load a graph from a text file."""
    return parse_graph(Path(path).read_text(encoding="utf-8"))


def path_length(graph: Graph, path: Sequence[int]) -> float:
    """Length of the closed tour; ``MAX_LENGTH`` if any leg has no edge."""
    total = 0.0
    closed = list(path) + [path[0]]
    for start, end in zip(closed, closed[1:]):
        value = graph.arcs[start - 1][end - 1]
        if value == NO_EDGE:
            return MAX_LENGTH
        total += value
    return total


def is_valid_path(path: Sequence[int]) -> bool:
    """True when no city appears twice."""
    return len(set(path)) == len(path)


def get_conflict(detection: Sequence[int], model: Sequence[int]) -> list[int]:
    """Cities of ``detection`` that do not occur in ``model``, in order."""
    model_set = set(model)
    return [city for city in detection if city not in model_set]


def handle_conflict(
    path: Sequence[int],
    detection_conflicts: Sequence[int],
    model_conflicts: Sequence[int],
    cross_i: int,
    cross_j: int,
) -> list[int]:
    """Repair duplicates outside the swapped segment ``[cross_i, cross_j]``.

    Each city of ``model_conflicts`` found outside the segment is replaced by
    the city at the same position of ``detection_conflicts``.
    """
    result = list(path)
    outside = [*range(cross_i), *range(cross_j + 1, len(result))]
    for model_city, detection_city in zip(model_conflicts, detection_conflicts):
        index = next((k for k in outside if result[k] == model_city), None)
        if index is None:
            raise ValueError(f"city {model_city} not found outside the crossed segment")
        result[index] = detection_city
    return result


@dataclass
class GeneticTsp:
    """Population, operators and evolution loop of the genetic solver."""

    graph: Graph
    group_size: int = GROUP_SIZE
    p_crossover: float = P_CROSSOVER
    p_mutation: float = P_MUTATION
    rng: random.Random = field(default_factory=random.Random)
    group: list[Solution] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.graph.vex_num < 3:
            raise ValueError("need at least three cities")
        if self.group_size < 2:
            raise ValueError("group_size must be at least 2")
        if not 0 < self.p_crossover <= 1:
            raise ValueError("p_crossover must lie in (0, 1]")
        if not 0 <= self.p_mutation <= 1:
            raise ValueError("p_mutation must lie in [0, 1]")

    def _chance(self) -> float:
        return self.rng.randrange(100) / 100.0

    def _solution(self, path: list[int]) -> Solution:
        if not is_valid_path(path):
            return Solution(path, MAX_LENGTH, 0.0)
        return Solution(path, path_length(self.graph, path))

    def initial_group(self) -> Solution:
        """Create a random population keeping the first city fixed."""
        self.group = []
        for _ in range(self.group_size):
            path = list(self.graph.vexs)
            tail = path[1:]
            self.rng.shuffle(tail)
            self.group.append(self._solution(path[:1] + tail))
        self.calc_probability(self.group)
        return self.evaluate()

    def calc_probability(self, solutions: Sequence[Solution]) -> None:
        """Set selection weights proportional to the inverse route length."""
        if any(s.length <= 0 for s in solutions):
            raise ValueError("route lengths must be positive")
        inverse = [1.0 / s.length for s in solutions]
        total = sum(inverse)
        for solution, weight in zip(solutions, inverse):
            solution.probability = weight / total

    def select(self) -> int:
        """Roulette-wheel selection of a population index."""
        chance = self._chance()
        cumulative = 0.0
        for index, solution in enumerate(self.group):
            cumulative += solution.probability
            if chance < cumulative:
                return index
        return 0

    def cross(self, father: Solution, mother: Solution) -> tuple[Solution, Solution]:
        """Swap a random segment between two parents and repair both children."""
        n = self.graph.vex_num
        cross_i, cross_j = sorted((self.rng.randrange(1, n), self.rng.randrange(1, n)))
        father_segment = father.path[cross_i : cross_j + 1]
        mother_segment = mother.path[cross_i : cross_j + 1]
        father_conflicts = get_conflict(father_segment, mother_segment)
        mother_conflicts = get_conflict(mother_segment, father_segment)

        son = father.path[:cross_i] + mother_segment + father.path[cross_j + 1 :]
        daughter = mother.path[:cross_i] + father_segment + mother.path[cross_j + 1 :]
        son = handle_conflict(son, father_conflicts, mother_conflicts, cross_i, cross_j)
        daughter = handle_conflict(daughter, mother_conflicts, father_conflicts, cross_i, cross_j)
        return self._solution(son), self._solution(daughter)

    def mutate(self, solution: Solution) -> Solution:
        """Copy of ``solution`` with two cities other than the first swapped."""
        n = self.graph.vex_num
        i = self.rng.randrange(1, n)
        j = self.rng.randrange(1, n)
        while i == j:
            j = self.rng.randrange(1, n)
        path = list(solution.path)
        path[i], path[j] = path[j], path[i]
        return self._solution(path)

    def update_group(self, offspring: Sequence[Solution]) -> Solution:
        """Replace longer population members by shorter children."""
        for child in sorted(offspring, key=lambda s: s.length):
            for index, member in enumerate(self.group):
                if child.length < member.length:
                    self.group[index] = child
                    break
        self.calc_probability(self.group)
        return self.evaluate()

    def evaluate(self) -> Solution:
        """The shortest route of the population; the first wins on ties."""
        if not self.group:
            raise ValueError("population is empty")
        return min(self.group, key=lambda s: s.length)

    def step(self) -> Solution:
        """One generation: select, cross, mutate and update."""
        if not self.group:
            self.initial_group()
        father_index = self.select()
        mother_index = self.select()
        while mother_index == father_index:
            mother_index = self.select()
        father = self.group[father_index]
        mother = self.group[mother_index]

        offspring: list[Solution] = []
        remaining = self.group_size - self.group_size // 2
        while remaining:
            if self._chance() < self.p_crossover:
                offspring.extend(self.cross(father, mother))
                remaining -= 1

        offspring = [
            self.mutate(child) if self._chance() < self.p_mutation else child
            for child in offspring
        ]
        return self.update_group(offspring)

    def evolve(self, iterations: int = ITERATIONS) -> Solution:
        """Run ``iterations`` generations and return the best route."""
        if iterations < 0:
            raise ValueError("iterations must not be negative")
        best = self.initial_group() if not self.group else self.evaluate()
        for _ in range(iterations):
            best = self.step()
        return best


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the TSP stored in a distance-matrix file."""
    parser = argparse.ArgumentParser(description="Genetic algorithm TSP solver.")
    parser.add_argument("graph", help="file with city count, labels and distance matrix")
    parser.add_argument("--iterations", type=int, default=ITERATIONS)
    parser.add_argument("--group-size", type=int, default=GROUP_SIZE)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--output", default=None, help="write the best route here")
    args = parser.parse_args(argv)

    started = time.perf_counter()
    try:
        graph = read_graph(args.graph)
    except (OSError, ValueError) as exc:
        parser.exit(1, f"cannot read graph: {exc}\n")

    print(f"Cities: {graph.vex_num}")
    print(f"Edges: {graph.arc_count()}")
    print("Labels: " + " ".join(str(v) for v in graph.vexs))

    solver = GeneticTsp(graph, group_size=args.group_size, rng=random.Random(args.seed))
    best = solver.evolve(args.iterations)

    route = best.path + best.path[:1]
    print("Best route: " + " -> ".join(str(city) for city in route))
    print(f"length = {best.length:g}")
    if args.output:
        Path(args.output).write_text(",".join(str(c) for c in best.path), encoding="utf-8")
    print(f"Running time: {time.perf_counter() - started:f} s")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())