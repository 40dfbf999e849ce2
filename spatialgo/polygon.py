"""Offsetting a polygon outline by a fixed distance."""

from __future__ import annotations

import argparse
import math
from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass(frozen=True)
class Vector2:
    """A 2D point or vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, value: float) -> Vector2:
        return Vector2(self.x * value, self.y * value)

    __rmul__ = __mul__

    def dot(self, other: Vector2) -> float:
        """Scalar product."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector2) -> float:
        """The z component of the cross product."""
        return self.x * other.y - self.y * other.x

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.dot(self))

    def normalized(self) -> Vector2:
        """Unit vector in the same direction."""
        r = self.length()
        if r == 0:
            raise ValueError("cannot normalise a zero-length vector")
        return self * (1.0 / r)


def stretch_polygon(points: Sequence[Vector2], dist: float) -> list[Vector2]:
    """Move every edge of a closed polygon by ``dist`` along its normal.

    For a clockwise outline a positive ``dist`` expands the polygon; for a
    counter-clockwise outline it shrinks it.
    """
    count = len(points)
    if count < 3:
        raise ValueError("a polygon needs at least three points")
    try:
        edges = [(points[(i + 1) % count] - p).normalized() for i, p in enumerate(points)]
    except ValueError as exc:
        raise ValueError("polygon has coincident consecutive points") from exc

    result = []
    for i, point in enumerate(points):
        before, after = edges[i - 1], edges[i]
        sina = before.cross(after)
        if sina == 0:
            raise ValueError(f"edges meeting at vertex {i} are collinear")
        result.append(point + (after - before) * (dist / sina))
    return result


SAMPLE_POINTS = (
    (-0.5, 0.4), (-0.3, 0.6), (-0.3, 0.4), (-0.0, 0.5), (0.0, 0.3), (-0.3, 0.3),
    (-0.1, -0.2), (-0.4, -0.1), (-0.5, 0.1), (-0.8, 0.1), (-0.8, 0.7), (-0.6, 0.3),
)


def _format(points: Iterable[Vector2]) -> str:
    return "\n".join(f" {p.x:.1f},{p.y:.1f}," for p in points)


def main(argv: Sequence[str] | None = None) -> int:
    """Offset the sample outline and print the new vertices."""
    parser = argparse.ArgumentParser(description="Offset a polygon outline.")
    parser.add_argument("--dist", type=float, default=0.1, help="offset distance")
    args = parser.parse_args(argv)
    points = [Vector2(x, y) for x, y in SAMPLE_POINTS]
    print(_format(stretch_polygon(points, args.dist)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())