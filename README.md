# spatialgo

Small spatial and optimisation algorithms in pure Python, with no
third-party dependencies:

- **k-means clustering** (Lloyd's algorithm with k-means++ seeding) for
  points of any dimension: `spatialgo.kmeans`, with a command-line demo in
  `spatialgo.kmeans_cli`
- **Travelling salesman** heuristics:
  - simulated annealing with random two-city swaps: `spatialgo.annealing`
  - a genetic algorithm with roulette-wheel selection, segment crossover
    with conflict repair and swap mutation: `spatialgo.genetic`
- **Polygon offsetting**: move every edge of a polygon by a fixed
  distance: `spatialgo.polygon`
- **Geometry primitives** (points, axis-aligned boxes, polygons, WKT output):
  `spatialgo.shapes`
- **An R-tree** spatial index with quadratic splitting and intersection,
  containment and nearest-neighbour queries: `spatialgo.rtree`

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library use

### k-means

```python
from spatialgo.kmeans import kmeans

points = [(1.0, 1.0), (1.2, 0.9), (8.0, 8.1), (7.9, 8.3)]
means, clusters = kmeans(points, 2)
```

`means` holds one centre per cluster and `clusters` the cluster index of each
input point. `kmeans(data, k, max_iter=0, min_delta=-1.0)` treats a value of
zero as "no limit". For full control build a `ClusteringParameters(k,
max_iteration=..., min_delta=..., random_seed=...)` and call
`kmeans_lloyd(data, parameters)`; a fixed `random_seed` makes runs
reproducible. Iteration also stops when the means stop changing or start
oscillating between two states. `ValueError` is raised for `k <= 0`, for
fewer than `k` points, or for points of differing dimension.

The helpers used by the algorithm (`distance`, `distance_squared`,
`closest_mean`, `calculate_clusters`, `calculate_means`, `random_plusplus`,
`deltas`, ...) are public as well.

### Simulated annealing

```python
import random
from spatialgo.annealing import CITIES, anneal, path_length

result = anneal(CITIES, chain_length=500, rng=random.Random(1))
print(result.order, result.length, result.cooling_steps)
```

`anneal(cities, t_start, t_end, cooling, chain_length, rng)` starts from the
route `1, 2, ..., n`, keeps the first city fixed, and accepts worse routes
with the Metropolis probability while the temperature falls by the factor
`cooling` until it reaches `t_end`. The route is open: `path_length(order,
cities)` sums the legs between consecutive 1-based city numbers without
returning to the start. `CITIES` holds the built-in 32-city problem.

### Genetic algorithm

```python
import random
from spatialgo.genetic import GeneticTsp, parse_graph

graph = parse_graph("""
4
1 2 3 4
0 1 2 1
1 0 1 2
2 1 0 1
1 2 1 0
""")
solver = GeneticTsp(graph, group_size=6, rng=random.Random(0))
best = solver.evolve(50)
print(best.path, best.length)
```

`parse_graph(text)` and `read_graph(path)` load a `Graph`. The text is
whitespace separated: the number of cities `n`, then the `n` city labels
(numbered from 1), then the `n × n` distance matrix row by row. A distance of
`-1` marks a missing edge; a tour using one gets length `MAX_LENGTH`.
`path_length(graph, path)` measures a closed tour.

`GeneticTsp` keeps a population of `Solution`s (`path`, `length`,
`probability`). `initial_group()`, `select()`, `cross(father, mother)`,
`mutate(solution)`, `update_group(offspring)` and `evaluate()` are the
individual operators; `step()` runs one generation and `evolve(iterations)`
runs many and returns the shortest route found. The first city of every
route stays fixed.

### Polygon offsetting

```python
from spatialgo.polygon import Vector2, stretch_polygon

square = [Vector2(0, 0), Vector2(0, 1), Vector2(1, 1), Vector2(1, 0)]
grown = stretch_polygon(square, 0.1)
```

Each vertex is moved so that both of its edges end up `dist` further along
their normals. For a clockwise outline a positive `dist` expands the polygon;
for a counter-clockwise outline it shrinks it. `ValueError` is raised for
fewer than three points, coincident consecutive points, or collinear edges
at a vertex. `Vector2` supports `+`, `-`, scaling by a number, `dot`,
`cross`, `length` and `normalized`.

### Shapes and the R-tree

```python
from spatialgo.shapes import Box, Point
from spatialgo.rtree import RTree

tree = RTree()
for i in range(10):
    tree.insert((Box(Point(i, i), Point(i + 0.5, i + 0.5)), i))

hits = tree.query_intersects(Box(Point(0, 0), Point(5, 5)))
closest = tree.query_nearest(Point(0, 0), 5)
```

Values stored in an `RTree` may be a `Point`, `Box`, `Polygon`, an `(x, y)`
pair, or a `(geometry, data)` pair; pass `indexable=` to map any other value
to its `Box`. `query_intersects` and `query_contains` return matching values
in insertion order; `query_nearest(point, k)` returns up to `k` values,
closest first. `bounds()` gives the box around everything stored (or
`None`), and the tree supports `len()` and iteration. `max_entries` (default
16) and `min_entries` control node size.

`Box` offers `from_points`, `intersects`, `contains`, `union`,
`distance_to_point`, `area`, `wkt` and `dsv`; `Polygon` offers `envelope`
and `wkt`; `Point` offers `wkt`. `as_box(geometry)` returns the bounding box
of any supported geometry and `hexagon(center)` builds a small six-sided
polygon around a point.

## Command-line tools

Each tool runs a worked example and prints its result:

| Command             | What it does                                              | Options |
|---------------------|-----------------------------------------------------------|---------|
| `spatialgo-kmeans`  | clusters the built-in sample of 2-D points                | `--k` (default 5), `--seed` |
| `spatialgo-anneal`  | solves the built-in 32-city route with simulated annealing | `--t-start`, `--t-end`, `--cooling`, `--chain-length`, `--seed` |
| `spatialgo-genetic` | runs the genetic algorithm on a distance-matrix file      | `GRAPH` (required), `--iterations`, `--group-size`, `--seed`, `--output` |
| `spatialgo-stretch` | offsets the sample polygon and prints the new vertices    | `--dist` (default 0.1) |
| `spatialgo-rtree`   | indexes small boxes and runs a window and a k-NN query    | `--count` (default 10), `--k` (default 5) |

With the default settings `spatialgo-anneal` runs 5000 swaps at each of
about 1300 temperatures and takes a while; lower `--chain-length` for a quick
run.

## What the package does not do

- No distance-matrix data set is included; `spatialgo-genetic` needs a file
  in the format described above.
- The R-tree supports insertion and queries only; values cannot be removed.
- Nothing is drawn: results are printed as text (WKT for geometries).