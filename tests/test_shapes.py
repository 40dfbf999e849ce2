import pytest

from spatialgo.shapes import Box, Point, Polygon, as_box, hexagon


def test_point_wkt():
    assert Point(0, 0).wkt() == "POINT(0 0)"


def test_box_wkt():
    assert Box(Point(0, 0), Point(5, 5)).wkt() == "POLYGON((0 0,0 5,5 5,5 0,0 0))"


def test_hexagon_wkt_first():
    assert hexagon(Point(0, 0)).wkt() == (
        "POLYGON((1 0,0.4 0.8,-0.5 0.8,-1 0,-0.4 -0.8,0.5 -0.8,1 0))"
    )


def test_hexagon_wkt_last():
    assert hexagon(Point(9, 9)).wkt() == (
        "POLYGON((10 9,9.4 9.8,8.5 9.8,8 9,8.6 8.2,9.5 8.2,10 9))"
    )


def test_hexagon_has_six_vertices():
    assert len(hexagon((3, 3)).outer) == 6


def test_envelopes_intersecting_query_box():
    query = Box(Point(0, 0), Point(5, 5))
    hits = [i for i in range(10) if query.intersects(hexagon(Point(i, i)).envelope())]
    assert hits == [0, 1, 2, 3, 4, 5]


def test_rect_point_query():
    rects = [Box(Point(0, 0), Point(10, 10)), Box(Point(20, 20), Point(30, 30))]
    assert [r for r in rects if r.intersects(Point(5, 5))] == [rects[0]]
    query = Box(Point(21, 21), Point(25, 25))
    assert [r for r in rects if r.intersects(query)] == [rects[1]]


def test_overlapping_rects():
    rects = [Box(Point(0, 0), Point(10, 10)), Box(Point(8, 8), Point(15, 15))]
    assert [r for r in rects if r.intersects((3.0, 3.0))] == [rects[0]]
    query = Box(Point(11, 11), Point(12, 12))
    assert [r for r in rects if r.intersects(query)] == [rects[1]]


def test_degenerate_query_boxes():
    boxes = [Box(Point(0, 0), Point(1, 1)), Box(Point(0.5, 0.5), Point(1.5, 1.5))]
    far = Box(Point(2.2, 2.2), Point(2.2, 2.2))
    near = Box(Point(1.2, 1.2), Point(1.2, 1.2))
    assert [b for b in boxes if b.intersects(far)] == []
    assert [b for b in boxes if b.intersects(near)] == [boxes[1]]


def test_touching_boxes_intersect():
    assert Box(Point(0, 0), Point(1, 1)).intersects(Box(Point(1, 1), Point(2, 2)))


def test_dsv():
    assert Box(Point(0.5, 0.5), Point(1.5, 1.5)).dsv() == "((0.5, 0.5), (1.5, 1.5))"


def test_contains():
    outer = Box(Point(0, 0), Point(10, 10))
    assert outer.contains(Point(10, 0))
    assert outer.contains(Box(Point(1, 1), Point(2, 2)))
    assert not outer.contains(Box(Point(8, 8), Point(15, 15)))


def test_union_covers_both():
    a = Box(Point(0, 0), Point(1, 1))
    b = Box(Point(-1, 2), Point(0.5, 3))
    u = a.union(b)
    assert u.contains(a) and u.contains(b)
    assert u.area() >= a.area() + b.area()
    assert u == b.union(a)


def test_distance_to_point():
    box = Box(Point(0, 0), Point(1, 1))
    assert box.distance_to_point(Point(0.5, 0.5)) == 0
    assert box.distance_to_point((4, 5)) == pytest.approx(5.0)


def test_area_of_degenerate_box_is_zero():
    assert as_box(Point(3, 4)).area() == 0


def test_from_points_matches_envelope():
    pts = [Point(1, 2), Point(-3, 5), Point(0, -1)]
    box = Box.from_points(pts)
    assert box == Polygon(tuple(pts)).envelope()
    assert all(box.contains(p) for p in pts)


def test_as_box_of_polygon():
    poly = hexagon(Point(2, 2))
    assert as_box(poly) == poly.envelope()


def test_polygon_wkt_closes_ring_once():
    ring = (Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 0))
    poly = Polygon(ring)
    assert len(poly.outer) == 3
    assert poly.wkt().count("0 0") == 2


def test_inverted_box_rejected():
    with pytest.raises(ValueError):
        Box(Point(1, 1), Point(0, 0))


def test_from_no_points_rejected():
    with pytest.raises(ValueError):
        Box.from_points([])


def test_empty_polygon_envelope_rejected():
    with pytest.raises(ValueError):
        Polygon(()).envelope()


def test_as_box_rejects_garbage():
    with pytest.raises(TypeError):
        as_box("abc")