import pytest

from spatialgo.polygon import SAMPLE_POINTS, Vector2, main, stretch_polygon

SQUARE = [Vector2(0, 0), Vector2(1, 0), Vector2(1, 1), Vector2(0, 1)]


def _line_distance(point, a, b):
    edge = b - a
    return abs(edge.cross(point - a)) / edge.length()


def _signed_area(points):
    n = len(points)
    return sum(points[i].cross(points[(i + 1) % n]) for i in range(n)) / 2


def test_vector_operations():
    a, b = Vector2(1, 2), Vector2(3, 4)
    assert a + b == Vector2(4, 6)
    assert b - a == Vector2(2, 2)
    assert a * 2 == Vector2(2, 4)
    assert a.dot(b) == 11
    assert a.cross(b) == -2
    assert a.cross(b) == -b.cross(a)


def test_normalized_has_unit_length():
    v = Vector2(3, 4).normalized()
    assert v.length() == pytest.approx(1.0)
    assert v.cross(Vector2(3, 4)) == pytest.approx(0.0)


def test_normalize_zero_vector_raises():
    with pytest.raises(ValueError):
        Vector2(0, 0).normalized()


def test_zero_distance_keeps_points():
    result = stretch_polygon(SQUARE, 0.0)
    for got, want in zip(result, SQUARE):
        assert got.x == pytest.approx(want.x)
        assert got.y == pytest.approx(want.y)


@pytest.mark.parametrize("dist", [0.1, -0.2, 0.3])
def test_new_vertices_are_offset_from_both_adjacent_edges(dist):
    result = stretch_polygon(SQUARE, dist)
    n = len(SQUARE)
    for i, p in enumerate(result):
        before = (SQUARE[i - 1], SQUARE[i])
        after = (SQUARE[i], SQUARE[(i + 1) % n])
        assert _line_distance(p, *before) == pytest.approx(abs(dist))
        assert _line_distance(p, *after) == pytest.approx(abs(dist))


def test_counter_clockwise_positive_distance_shrinks():
    assert _signed_area(SQUARE) > 0
    shrunk = stretch_polygon(SQUARE, 0.1)
    assert abs(_signed_area(shrunk)) < abs(_signed_area(SQUARE))


def test_clockwise_positive_distance_expands():
    clockwise = list(reversed(SQUARE))
    grown = stretch_polygon(clockwise, 0.1)
    assert abs(_signed_area(grown)) > abs(_signed_area(clockwise))


def test_too_few_points_raises():
    with pytest.raises(ValueError):
        stretch_polygon(SQUARE[:2], 0.1)


def test_collinear_vertex_raises():
    with pytest.raises(ValueError):
        stretch_polygon([Vector2(0, 0), Vector2(1, 0), Vector2(2, 0), Vector2(1, 1)], 0.1)


def test_duplicate_point_raises():
    with pytest.raises(ValueError):
        stretch_polygon([Vector2(0, 0), Vector2(0, 0), Vector2(1, 1)], 0.1)


def test_main_prints_one_line_per_vertex(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.strip("\n").splitlines()
    assert len(lines) == len(SAMPLE_POINTS)
    assert all(line.startswith(" ") and line.endswith(",") for line in lines)