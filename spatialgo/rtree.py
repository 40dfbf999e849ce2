"""An R-tree spatial index with quadratic node splitting."""

from __future__ import annotations

import argparse
import heapq
import itertools
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Sequence, Union

from spatialgo.shapes import Box, Point, Polygon, as_box

DEFAULT_MAX_ENTRIES = 16

_Shape = (Point, Box, Polygon)


def _default_indexable(value: Any) -> Box:
    """Bounding box of a geometry, or of the geometry in a ``(geometry, data)`` pair."""
    if isinstance(value, _Shape):
        return as_box(value)
    if isinstance(value, tuple) and len(value) == 2 and isinstance(value[0], _Shape):
        return as_box(value[0])
    return as_box(value)


@dataclass
class _Item:
    seq: int
    value: Any


@dataclass
class _Entry:
    box: Box
    child: Union["_Node", _Item]


class _Node:
    __slots__ = ("leaf", "entries")

    def __init__(self, leaf: bool, entries: list[_Entry] | None = None) -> None:
        self.leaf = leaf
        self.entries: list[_Entry] = entries if entries is not None else []

    def bounds(self) -> Box:
        box = self.entries[0].box
        for entry in self.entries[1:]:
            box = box.union(entry.box)
        return box


def _enlargement(box: Box, extra: Box) -> float:
    return box.union(extra).area() - box.area()


class RTree:
    """Spatial index of values keyed by their bounding boxes.

    A value may be a :class:`Point`, :class:`Box`, :class:`Polygon`, an
    ``(x, y)`` pair or a ``(geometry, data)`` pair; a custom ``indexable``
    function can map any other value to its box.
    """

    def __init__(
        self,
        values: Iterable[Any] = (),
        max_entries: int = DEFAULT_MAX_ENTRIES,
        min_entries: int | None = None,
        indexable: Callable[[Any], Box] | None = None,
    ) -> None:
        if max_entries < 2:
            raise ValueError("max_entries must be at least 2")
        if min_entries is None:
            min_entries = max(1, int(max_entries * 0.3))
        if not 1 <= min_entries <= max_entries // 2:
            raise ValueError("min_entries must lie between 1 and max_entries // 2")
        self.max_entries = max_entries
        self.min_entries = min_entries
        self._indexable = indexable or _default_indexable
        self._root = _Node(leaf=True)
        self._counter = itertools.count()
        self._size = 0
        for value in values:
            self.insert(value)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __iter__(self) -> Iterator[Any]:
        items = sorted(self._items(self._root), key=lambda item: item.seq)
        return (item.value for item in items)

    def _items(self, node: _Node) -> Iterator[_Item]:
        for entry in node.entries:
            if node.leaf:
                yield entry.child  # type: ignore[misc]
            else:
                yield from self._items(entry.child)  # type: ignore[arg-type]

    def insert(self, value: Any) -> None:
        """Add ``value`` to the index."""
        box = self._indexable(value)
        entry = _Entry(box, _Item(next(self._counter), value))
        sibling = self._insert(self._root, entry)
        if sibling is not None:
            old_root = self._root
            self._root = _Node(
                leaf=False,
                entries=[_Entry(old_root.bounds(), old_root), _Entry(sibling.bounds(), sibling)],
            )
        self._size += 1

    def _insert(self, node: _Node, entry: _Entry) -> _Node | None:
        if node.leaf:
            node.entries.append(entry)
        else:
            target = min(
                node.entries,
                key=lambda e: (_enlargement(e.box, entry.box), e.box.area()),
            )
            child: _Node = target.child  # type: ignore[assignment]
            sibling = self._insert(child, entry)
            target.box = child.bounds()
            if sibling is not None:
                node.entries.append(_Entry(sibling.bounds(), sibling))
        if len(node.entries) > self.max_entries:
            return self._split(node)
        return None

    def _split(self, node: _Node) -> _Node:
        entries = node.entries
        first, second = max(
            itertools.combinations(entries, 2),
            key=lambda pair: pair[0].box.union(pair[1].box).area()
            - pair[0].box.area()
            - pair[1].box.area(),
        )
        remaining = [e for e in entries if e is not first and e is not second]
        group1, group2 = [first], [second]
        box1, box2 = first.box, second.box
        while remaining:
            if len(group1) + len(remaining) <= self.min_entries:
                group1.extend(remaining)
                break
            if len(group2) + len(remaining) <= self.min_entries:
                group2.extend(remaining)
                break
            chosen = max(
                remaining,
                key=lambda e: abs(_enlargement(box1, e.box) - _enlargement(box2, e.box)),
            )
            remaining.remove(chosen)
            d1 = _enlargement(box1, chosen.box)
            d2 = _enlargement(box2, chosen.box)
            if (d1, box1.area(), len(group1)) <= (d2, box2.area(), len(group2)):
                group1.append(chosen)
                box1 = box1.union(chosen.box)
            else:
                group2.append(chosen)
                box2 = box2.union(chosen.box)
        node.entries = group1
        return _Node(node.leaf, group2)

    def _search(self, node: _Node, descend: Callable[[Box], bool], accept: Callable[[Box], bool]) -> Iterator[_Item]:
        for entry in node.entries:
            if node.leaf:
                if accept(entry.box):
                    yield entry.child  # type: ignore[misc]
            elif descend(entry.box):
                yield from self._search(entry.child, descend, accept)  # type: ignore[arg-type]

    def _collect(self, descend: Callable[[Box], bool], accept: Callable[[Box], bool]) -> list[Any]:
        items = sorted(self._search(self._root, descend, accept), key=lambda item: item.seq)
        return [item.value for item in items]

    def query_intersects(self, geometry: Any) -> list[Any]:
        """Values whose box overlaps or touches ``geometry``, in insertion order."""
        query = as_box(geometry)
        return self._collect(query.intersects, query.intersects)

    def query_contains(self, geometry: Any) -> list[Any]:
        """Values whose box contains ``geometry``, in insertion order."""
        query = as_box(geometry)
        return self._collect(lambda box: box.contains(query), lambda box: box.contains(query))

    def query_nearest(self, point: Point | Sequence[float], k: int) -> list[Any]:
        """Up to ``k`` values nearest to ``point``, closest first; ties by insertion order."""
        if k <= 0:
            raise ValueError("k must be positive")
        tiebreak = itertools.count()
        heap: list[tuple[float, int, int, Any]] = [(0.0, 0, next(tiebreak), self._root)]
        result: list[Any] = []
        while heap and len(result) < k:
            _, kind, _, obj = heapq.heappop(heap)
            if kind == 1:
                result.append(obj.value)
                continue
            for entry in obj.entries:
                dist = entry.box.distance_to_point(point)
                if obj.leaf:
                    item: _Item = entry.child  # type: ignore[assignment]
                    heapq.heappush(heap, (dist, 1, item.seq, item))
                else:
                    heapq.heappush(heap, (dist, 0, next(tiebreak), entry.child))
        return result

    def bounds(self) -> Box | None:
        """Box covering every value, or ``None`` when the index is empty."""
        if not self._root.entries:
            return None
        return self._root.bounds()


def main(argv: Sequence[str] | None = None) -> int:
    """Index ten small boxes and run a window query and a nearest query."""
    parser = argparse.ArgumentParser(description="R-tree query demonstration.")
    parser.add_argument("--count", type=int, default=10, help="number of boxes to index")
    parser.add_argument("--k", type=int, default=5, help="number of nearest values")
    args = parser.parse_args(argv)

    tree = RTree(
        (Box(Point(i, i), Point(i + 0.5, i + 0.5)), i) for i in range(args.count)
    )
    query_box = Box(Point(0, 0), Point(5, 5))
    print()
    print("spatial query box:")
    print(query_box.wkt())
    print("spatial query result:")
    for box, index in tree.query_intersects(query_box):
        print(f"{box.wkt()} - {index}")

    origin = Point(0, 0)
    print()
    print("knn query point:")
    print(origin.wkt())
    print("knn query result:")
    try:
        nearest = tree.query_nearest(origin, args.k)
    except ValueError as exc:
        parser.error(str(exc))
    for box, index in nearest:
        print(f"{box.wkt()} - {index}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())