"""Obstacle (combing) boundary for travel estimation.

The combing boundary is the region inside which the print head may travel
without crossing printed walls. A straight travel that leaves it has to
detour in reality; the line optimizer only needs to know whether that is
the case.
"""

from collections.abc import Sequence

from pathorder.core.geometry import orientation, point_in_polygon, segments_cross
from pathorder.core.grid import LocToLineGrid
from pathorder.domain import Point


class CombingBoundary:
    """Even-odd region bounded by closed polygons.

    Outer outlines and holes are given together; a point is inside when it
    lies within an odd number of polygons. Edges are indexed in a
    LocToLineGrid so collision checks only test nearby edges.
    """

    def __init__(self, polygons: Sequence[Sequence[Point]], cell_size: int = 2000) -> None:
        """Initialize the boundary.

        Args:
            polygons: Closed polygons; kept by reference, not copied
            cell_size: Cell size of the edge index
        """
        self.polygons = polygons
        self.loc_to_line = LocToLineGrid.from_polygons(polygons, cell_size)

    def inside(self, point: Point) -> bool:
        """Whether a point lies inside the region."""
        return self._inside(point.x, point.y)

    def _inside(self, x: float, y: float) -> bool:
        inside = False
        for polygon in self.polygons:
            if point_in_polygon(x, y, polygon):
                inside = not inside
        return inside

    def collides_with_segment(self, p0: Point, p1: Point) -> bool:
        """Whether any boundary edge properly crosses the segment p0-p1."""
        for _, a, b in self.loc_to_line.segments_near(p0, p1):
            if segments_cross(p0, p1, a, b):
                return True
        return False

    def segment_inside(self, p0: Point, p1: Point) -> bool:
        """Whether the straight travel p0-p1 stays inside the region.

        A proper crossing means the travel leaves the region. Otherwise the
        segment can still touch the boundary at vertices lying on it, so it
        is split at those vertices and the midpoint of every piece is tested.
        """
        if self.collides_with_segment(p0, p1):
            return False

        direction = p1 - p0
        length2 = direction.size2()
        if length2 == 0:
            return self._inside(p0.x, p0.y)

        params = {0.0, 1.0}
        for _, a, b in self.loc_to_line.segments_near(p0, p1):
            for vertex in (a, b):
                if orientation(p0, p1, vertex) != 0:
                    continue
                t = (vertex - p0).dot(direction) / length2
                if 0.0 < t < 1.0:
                    params.add(t)

        ordered = sorted(params)
        for t0, t1 in zip(ordered, ordered[1:]):
            t = (t0 + t1) / 2
            if not self._inside(p0.x + direction.x * t, p0.y + direction.y * t):
                return False
        return True
