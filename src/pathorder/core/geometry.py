"""Geometric primitives used by the order optimizers.

This module provides the small set of vector and polygon operations the
optimizers and their collaborators are built on:
- Distances and unit vectors
- Corner angles for seam preference
- Exact segment crossing tests
- Point-in-polygon testing (ray casting algorithm)

All functions are pure and stateless. Coordinates are integers, so the
orientation and crossing tests are exact.
"""

import math
from collections.abc import Sequence

from pathorder.domain import Point


def vsize2(p0: Point, p1: Point) -> int:
    """Squared distance between two points."""
    return (p1 - p0).size2()


def vsize(p0: Point, p1: Point) -> float:
    """Euclidean distance between two points."""
    return (p1 - p0).size()


def unit_vector(v: Point) -> tuple[float, float]:
    """Normalize a vector.

    Args:
        v: Vector to normalize

    Returns:
        Tuple (ux, uy) of unit length, or (0.0, 0.0) for the zero vector
    """
    length = v.size()
    if length == 0.0:
        return 0.0, 0.0
    return v.x / length, v.y / length


def turn90_ccw(v: Point) -> Point:
    """Rotate a vector 90 degrees counter-clockwise: (x, y) -> (-y, x)."""
    return Point(-v.y, v.x)


def angle_left(a: Point, b: Point, c: Point) -> float:
    """Angle on the left-hand side when walking a -> b -> c.

    Args:
        a: Previous vertex
        b: Corner vertex
        c: Next vertex

    Returns:
        Angle in radians in the range [0, 2*pi)

    Examples:
        >>> angle_left(Point(0, 0), Point(10, 0), Point(10, 10))  # left turn
        1.5707963267948966
    """
    ba = a - b
    bc = c - b
    angle = -math.atan2(ba.cross(bc), ba.dot(bc))
    if angle >= 0:
        return angle
    return 2 * math.pi + angle


def corner_angle(a: Point, b: Point, c: Point) -> float:
    """Left angle at ``b`` scaled to [0, 2).

    Below 1 the corner is convex for a counter-clockwise contour, above 1 it is
    concave. A zero-length neighbouring edge makes the corner count as straight.
    """
    if a == b or b == c:
        return 1.0
    return angle_left(a, b, c) / math.pi


def orientation(a: Point, b: Point, c: Point) -> int:
    """Sign of the turn a -> b -> c: 1 left, -1 right, 0 collinear."""
    cross = (b - a).cross(c - a)
    if cross > 0:
        return 1
    if cross < 0:
        return -1
    return 0


def segments_cross(p0: Point, p1: Point, q0: Point, q1: Point) -> bool:
    """Determine whether two segments properly cross each other.

    Touching at an endpoint or overlapping collinearly does not count as a
    crossing.

    Args:
        p0: First endpoint of segment p
        p1: Second endpoint of segment p
        q0: First endpoint of segment q
        q1: Second endpoint of segment q

    Returns:
        True if the interiors of the segments intersect in a single point
    """
    d1 = orientation(q0, q1, p0)
    d2 = orientation(q0, q1, p1)
    d3 = orientation(p0, p1, q0)
    d4 = orientation(p0, p1, q1)
    return d1 * d2 < 0 and d3 * d4 < 0


def point_in_polygon(x: float, y: float, polygon: Sequence[Point]) -> bool:
    """Determine if a point is inside a polygon using ray casting algorithm.

    Casts a horizontal ray from the point to the right and counts intersections
    with polygon edges. Odd number of intersections = inside, even = outside.

    Args:
        x: X coordinate of the point to test
        y: Y coordinate of the point to test
        polygon: Closed polygon boundary

    Returns:
        True if point is inside polygon, False otherwise
    """
    n = len(polygon)
    if n < 3:
        return False

    inside = False
    j = n - 1

    for i in range(n):
        xi, yi = polygon[i].x, polygon[i].y
        xj, yj = polygon[j].x, polygon[j].y

        if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            inside = not inside

        j = i

    return inside
