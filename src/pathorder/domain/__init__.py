"""Domain models for pathorder.

This module contains the value types shared by the optimizers:

- Point: An integer 2D coordinate
- PolygonRef: A non-owning view onto caller-owned contour or line vertices
- PathStep: One (feature index, start index) pair of a tour
- OrderResult: The complete tour produced by an optimizer
"""

from pathorder.domain.path import OrderResult, PathStep, PolygonRef
from pathorder.domain.point import Point

__all__: list[str] = [
    "OrderResult",
    "PathStep",
    "Point",
    "PolygonRef",
]
