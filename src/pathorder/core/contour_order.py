"""Print order and seam placement for closed contours.

This module implements the contour tour:
- Choosing a start vertex (seam) per contour from the seam policy
- Greedily visiting the contour whose seam is nearest the current position

Key classes:
- ContourOrderOptimizer: Orders contours and picks their seams
"""

import math
import random
from collections.abc import Hashable, Iterable, Sequence

import structlog

from pathorder.config import CornerPreference, SeamType, ZSeamConfig
from pathorder.core._optimizer import OrderOptimizer
from pathorder.core.geometry import corner_angle, vsize2
from pathorder.domain import PathStep, Point, PolygonRef

# Fixed distance score used by the sharpest corner policy, so that only
# curvature decides.
SHARPEST_CORNER_SCORE = 10000.0


class ContourOrderOptimizer(OrderOptimizer):
    """Orders closed contours to keep travel between them short.

    The tour is greedy nearest-neighbour: starting at ``start_point``, the
    next contour is always the unvisited one whose seam vertex is nearest.
    Ties go to the contour added first.

    Example:
        optimizer = ContourOrderOptimizer(Point(0, 0), ZSeamConfig())
        optimizer.add_contours(walls)
        result = optimizer.optimize()
        for step in result:
            emit_wall(walls[step.feature_index], start=step.start_index)
    """

    feature_kind = "contour"

    def __init__(
        self,
        start_point: Point,
        seam_config: ZSeamConfig | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the optimizer.

        Args:
            start_point: Position of the print head before the first contour
            seam_config: Seam placement policy (default: shortest travel)
            logger: Logger to report to (default: the package logger)
        """
        super().__init__(start_point, logger)
        self.config = seam_config if seam_config is not None else ZSeamConfig()

    def add_contour(self, contour: Sequence[Point] | PolygonRef, source_id: Hashable | None = None) -> None:
        """Append a reference to a closed contour.

        Raises:
            EmptyFeatureError: If the contour has no vertices
            OptimizerStateError: If optimize() has already run
        """
        self._add(contour, source_id)

    def add_contours(self, contours: Iterable[Sequence[Point] | PolygonRef]) -> None:
        """Append references to several contours."""
        for contour in contours:
            self._add(contour, None)

    def _run(self) -> tuple[list[PathStep], float]:
        use_fixed = not self.config.depends_on_position
        fixed_seams: dict[int, int] = {}
        if use_fixed:
            fixed_seams = {idx: self._seam_vertex(idx, self.start_point) for idx in range(len(self.polygons))}

        unvisited = list(range(len(self.polygons)))
        prev_point = self.start_point
        steps: list[PathStep] = []
        travel = 0.0

        while unvisited:
            best_poly_idx = -1
            best_vertex = 0
            best_dist2 = math.inf

            for poly_idx in unvisited:
                if use_fixed:
                    vertex = fixed_seams[poly_idx]
                else:
                    vertex = self._seam_vertex(poly_idx, prev_point)
                dist2 = vsize2(prev_point, self.polygons[poly_idx][vertex])
                self.stats.candidates_evaluated += 1
                if dist2 < best_dist2:
                    best_poly_idx = poly_idx
                    best_vertex = vertex
                    best_dist2 = dist2

            unvisited.remove(best_poly_idx)
            steps.append(PathStep(best_poly_idx, best_vertex))
            travel += math.sqrt(best_dist2)
            prev_point = self.polygons[best_poly_idx][best_vertex]

        return steps, travel

    def _reference_point(self, prev_point: Point) -> Point:
        if self.config.type in (SeamType.BACK, SeamType.USER_SPECIFIED):
            return self.config.anchor
        return prev_point

    def _seam_vertex(self, poly_idx: int, prev_point: Point) -> int:
        """Index of the vertex the contour should start at.

        Args:
            poly_idx: Index of the contour
            prev_point: Current tour position (used by position dependent policies)

        Returns:
            Vertex index with the lowest score; lowest index on ties
        """
        polygon = self.polygons[poly_idx]
        n = len(polygon)
        if n == 1:
            return 0

        seam_type = self.config.type
        if seam_type == SeamType.RANDOM:
            return random.Random(f"{self.config.random_seed}:{poly_idx}").randrange(n)

        reference = self._reference_point(prev_point)
        curvature_only = seam_type == SeamType.SHARPEST_CORNER and self.config.corner_pref != CornerPreference.NONE

        best_point_idx = 0
        best_score = math.inf
        p0 = polygon[-1]
        for point_idx in range(n):
            p1 = polygon[point_idx]
            p2 = polygon[(point_idx + 1) % n]

            if curvature_only:
                score = SHARPEST_CORNER_SCORE
            else:
                score = float(vsize2(reference, p1))

            # The pull never exceeds a tenth of the vertex's own score, so a
            # corner only wins over vertices at nearly the same distance.
            corner_shift = score / 10
            if seam_type == SeamType.SHORTEST:
                corner_shift = min(corner_shift, float(self.config.corner_shift) ** 2)
            score -= self.corner_bonus(corner_angle(p0, p1, p2), corner_shift)

            if score < best_score:
                best_point_idx = point_idx
                best_score = score
            p0 = p1

        return best_point_idx

    def corner_bonus(self, angle: float, corner_shift: float) -> float:
        """Score reduction for a corner under the configured preference.

        Args:
            angle: Corner angle from corner_angle(), in [0, 2)
            corner_shift: Reduction for a maximally matching corner

        Returns:
            Non-negative amount to subtract from the vertex score
        """
        pref = self.config.corner_pref
        if pref == CornerPreference.CONCAVE:
            return (angle - 1) * corner_shift if angle > 1 else 0.0
        if pref == CornerPreference.CONVEX:
            return (1 - angle) * corner_shift if angle < 1 else 0.0
        if pref == CornerPreference.ANY:
            return abs(angle - 1) * corner_shift
        if pref == CornerPreference.WEIGHTED:
            bonus = abs(angle - 1) * corner_shift
            return bonus * 2 if angle > 1 else bonus
        return 0.0
