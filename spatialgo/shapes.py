"""Planar geometry primitives for spatial indexing: points, boxes and polygons."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from typing import Iterable, Sequence, Union


def _num(value: float) -> str:
    return f"{value:g}"


def _f32(value: float) -> float:
    """Round a value to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


@dataclass(frozen=True)
class Point:
    """A point in the cartesian plane."""

    x: float = 0.0
    y: float = 0.0

    def wkt(self) -> str:
        """Well-known-text form, e.g. ``POINT(0 0)``."""
        return f"POINT({_num(self.x)} {_num(self.y)})"

    def _coords(self) -> str:
        return f"{_num(self.x)} {_num(self.y)}"


def _as_point(value: Point | Sequence[float]) -> Point:
    if isinstance(value, Point):
        return value
    try:
        x, y = value
    except (TypeError, ValueError) as exc:
        raise TypeError(f"cannot interpret {value!r} as a point") from exc
    return Point(float(x), float(y))


@dataclass(frozen=True)
class Box:
    """An axis-aligned rectangle given by its lower-left and upper-right corners."""

    min_corner: Point
    max_corner: Point

    def __post_init__(self) -> None:
        low = _as_point(self.min_corner)
        high = _as_point(self.max_corner)
        object.__setattr__(self, "min_corner", low)
        object.__setattr__(self, "max_corner", high)
        if low.x > high.x or low.y > high.y:
            raise ValueError("min_corner must not exceed max_corner")

    @classmethod
    def from_points(cls, points: Iterable[Point | Sequence[float]]) -> Box:
        """Smallest box enclosing all ``points``."""
        pts = [_as_point(p) for p in points]
        if not pts:
            raise ValueError("cannot build a box from no points")
        xs = [p.x for p in pts]
        ys = [p.y for p in pts]
        return cls(Point(min(xs), min(ys)), Point(max(xs), max(ys)))

    def intersects(self, other: Geometry) -> bool:
        """True when the two geometries' boxes overlap or touch."""
        box = as_box(other)
        return (
            self.min_corner.x <= box.max_corner.x
            and box.min_corner.x <= self.max_corner.x
            and self.min_corner.y <= box.max_corner.y
            and box.min_corner.y <= self.max_corner.y
        )

    def contains(self, other: Geometry) -> bool:
        """True when the other geometry's box lies inside this one, boundary included."""
        box = as_box(other)
        return (
            self.min_corner.x <= box.min_corner.x
            and self.min_corner.y <= box.min_corner.y
            and box.max_corner.x <= self.max_corner.x
            and box.max_corner.y <= self.max_corner.y
        )

    def union(self, other: Geometry) -> Box:
        """Smallest box covering both geometries."""
        box = as_box(other)
        return Box(
            Point(min(self.min_corner.x, box.min_corner.x), min(self.min_corner.y, box.min_corner.y)),
            Point(max(self.max_corner.x, box.max_corner.x), max(self.max_corner.y, box.max_corner.y)),
        )

    def distance_to_point(self, point: Point | Sequence[float]) -> float:
        """Euclidean distance from ``point`` to the nearest point of the box."""
        p = _as_point(point)
        dx = max(self.min_corner.x - p.x, 0.0, p.x - self.max_corner.x)
        dy = max(self.min_corner.y - p.y, 0.0, p.y - self.max_corner.y)
        return math.hypot(dx, dy)

    def area(self) -> float:
        """Width times height."""
        return (self.max_corner.x - self.min_corner.x) * (self.max_corner.y - self.min_corner.y)

    def _ring(self) -> list[Point]:
        low, high = self.min_corner, self.max_corner
        return [low, Point(low.x, high.y), high, Point(high.x, low.y), low]

    def wkt(self) -> str:
        """Well-known-text form as a closed polygon."""
        return "POLYGON((" + ",".join(p._coords() for p in self._ring()) + "))"

    def dsv(self) -> str:
        """Delimiter-separated form, e.g. ``((0, 0), (1, 1))``."""
        low, high = self.min_corner, self.max_corner
        return (
            f"(({_num(low.x)}, {_num(low.y)}), "
            f"({_num(high.x)}, {_num(high.y)}))"
        )


@dataclass(frozen=True)
class Polygon:
    """A polygon given by its outer ring; the ring is stored open."""

    outer: tuple[Point, ...]

    def __post_init__(self) -> None:
        ring = tuple(_as_point(p) for p in self.outer)
        if len(ring) > 1 and ring[0] == ring[-1]:
            ring = ring[:-1]
        object.__setattr__(self, "outer", ring)

    def envelope(self) -> Box:
        """Bounding box of the outer ring."""
        if not self.outer:
            raise ValueError("an empty polygon has no envelope")
        return Box.from_points(self.outer)

    def wkt(self) -> str:
        """Well-known-text form with the ring closed."""
        ring = list(self.outer)
        if ring:
            ring.append(ring[0])
        return "POLYGON((" + ",".join(p._coords() for p in ring) + "))"


Geometry = Union[Point, Box, Polygon, Sequence[float]]


def as_box(geometry: Geometry) -> Box:
    """The bounding box of a point, box, polygon or ``(x, y)`` pair."""
    if isinstance(geometry, Box):
        return geometry
    if isinstance(geometry, Polygon):
        return geometry.envelope()
    point = _as_point(geometry)
    return Box(point, point)


def hexagon(center: Point | Sequence[float]) -> Polygon:
    """A six-sided polygon of radius one around ``center``.

    Vertices are stepped every 60 degrees and their offsets are truncated to
    one decimal, computed in single precision.
    """
    c = _as_point(center)
    step = _f32(1.04720)
    limit = _f32(6.28316)
    tenth = _f32(0.1)
    vertices = []
    angle = 0.0
    while angle < limit:
        dx = int(_f32(10 * _f32(math.cos(angle))))
        dy = int(_f32(10 * _f32(math.sin(angle))))
        x = _f32(c.x + _f32(dx * tenth))
        y = _f32(c.y + _f32(dy * tenth))
        vertices.append(Point(x, y))
        angle = _f32(angle + step)
    return Polygon(tuple(vertices))