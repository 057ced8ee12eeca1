"""Core ordering algorithms for pathorder.

This module contains:

- Geometry operations (distances, corner angles, segment crossings)
- The LocToLineGrid spatial index
- The CombingBoundary obstacle region
- The contour and line order optimizers

Both optimizers are greedy nearest-neighbour heuristics: they never
backtrack and give the same result for the same input.

Key classes:
- ContourOrderOptimizer: Orders closed contours and places their seams
- LineOrderOptimizer: Orders lines and picks their entry endpoints
- LocToLineGrid: Sparse grid over line segments
- CombingBoundary: Region inside which travel is direct
"""

from pathorder.core.combing import CombingBoundary
from pathorder.core.contour_order import ContourOrderOptimizer
from pathorder.core.geometry import (
    angle_left,
    corner_angle,
    point_in_polygon,
    segments_cross,
    turn90_ccw,
    unit_vector,
    vsize,
    vsize2,
)
from pathorder.core.grid import LocToLineGrid
from pathorder.core.line_order import LineOrderOptimizer

__all__ = [
    "CombingBoundary",
    "ContourOrderOptimizer",
    "LineOrderOptimizer",
    "LocToLineGrid",
    "angle_left",
    "corner_angle",
    "point_in_polygon",
    "segments_cross",
    "turn90_ccw",
    "unit_vector",
    "vsize",
    "vsize2",
]
