"""Unit tests for the combing boundary."""

from pathorder.core.combing import CombingBoundary
from pathorder.domain import Point

OUTER = [Point(0, 0), Point(1000, 0), Point(1000, 1000), Point(0, 1000)]
HOLE = [Point(340, 400), Point(360, 400), Point(360, 600), Point(340, 600)]


class TestInside:
    def test_point_inside_outer(self):
        boundary = CombingBoundary([OUTER])
        assert boundary.inside(Point(500, 500))
        assert not boundary.inside(Point(1500, 500))

    def test_hole_is_outside(self):
        boundary = CombingBoundary([OUTER, HOLE])
        assert not boundary.inside(Point(350, 500))
        assert boundary.inside(Point(300, 500))

    def test_polygons_kept_by_reference(self):
        polygons = [OUTER]
        assert CombingBoundary(polygons).polygons is polygons


class TestSegments:
    def test_segment_crossing_hole_collides(self):
        boundary = CombingBoundary([OUTER, HOLE])
        assert boundary.collides_with_segment(Point(300, 500), Point(400, 500))
        assert not boundary.segment_inside(Point(300, 500), Point(400, 500))

    def test_segment_beside_hole_is_inside(self):
        boundary = CombingBoundary([OUTER, HOLE])
        assert not boundary.collides_with_segment(Point(300, 500), Point(200, 500))
        assert boundary.segment_inside(Point(300, 500), Point(200, 500))

    def test_segment_fully_outside_is_not_inside(self):
        boundary = CombingBoundary([OUTER])
        assert not boundary.collides_with_segment(Point(1100, 0), Point(1100, 500))
        assert not boundary.segment_inside(Point(1100, 0), Point(1100, 500))

    def test_segment_leaving_region_collides(self):
        boundary = CombingBoundary([OUTER], cell_size=100)
        assert boundary.collides_with_segment(Point(500, 500), Point(1500, 500))


# Outline with a slot open to the top whose V-shaped floor has its rim
# vertices at (10, 50) and (20, 50)
NOTCHED = [
    Point(0, 0),
    Point(100, 0),
    Point(100, 100),
    Point(20, 100),
    Point(20, 50),
    Point(15, 45),
    Point(10, 50),
    Point(10, 100),
    Point(0, 100),
]

# Hole whose top vertex touches y=500 from below
DIAMOND = [Point(500, 500), Point(450, 450), Point(500, 400), Point(550, 450)]


class TestBoundaryVertices:
    def test_leaving_through_vertices_is_not_inside(self):
        """Crossing the slot exactly at its rim vertices leaves the region."""
        boundary = CombingBoundary([NOTCHED], cell_size=10)

        assert not boundary.inside(Point(15, 50))
        assert not boundary.collides_with_segment(Point(5, 50), Point(95, 50))
        assert not boundary.segment_inside(Point(5, 50), Point(95, 50))

    def test_below_slot_floor_is_inside(self):
        boundary = CombingBoundary([NOTCHED], cell_size=10)
        assert boundary.segment_inside(Point(5, 40), Point(95, 40))

    def test_grazing_hole_vertex_stays_inside(self):
        boundary = CombingBoundary([OUTER, DIAMOND])
        assert boundary.segment_inside(Point(100, 500), Point(900, 500))

    def test_zero_length_segment(self):
        boundary = CombingBoundary([OUTER, HOLE])
        assert boundary.segment_inside(Point(300, 500), Point(300, 500))
        assert not boundary.segment_inside(Point(350, 500), Point(350, 500))
