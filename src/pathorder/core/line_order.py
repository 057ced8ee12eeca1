"""Print order and entry points for infill lines.

This module implements the line tour:
- Enumerating candidate lines near the print head via a spatial index
- Scoring each candidate endpoint by travel distance and turning angle
- Estimating longer travel when the straight move leaves the combing boundary

Key classes:
- LineOrderOptimizer: Orders lines and picks the endpoint each is entered from
"""

import math
from collections.abc import Hashable, Iterable, Sequence
from typing import Protocol

import structlog

from pathorder.config import LineOrderConfig
from pathorder.core._optimizer import OrderOptimizer
from pathorder.core.geometry import turn90_ccw, unit_vector, vsize
from pathorder.domain import PathStep, Point, PolygonRef
from pathorder.exceptions import ResultNotReadyError


class ObstacleBoundary(Protocol):
    """Anything that can tell whether a straight travel stays in the allowed region."""

    def segment_inside(self, p0: Point, p1: Point) -> bool: ...


class LineIndex(Protocol):
    """Spatial index returning ids of lines near a point."""

    cell_size: int

    def nearby(self, point: Point, radius: float) -> list[int]: ...

    def covers(self, point: Point, radius: float) -> bool: ...


class LineOrderOptimizer(OrderOptimizer):
    """Orders lines to keep travel short and turns close to 90 degrees.

    Each step picks the (line, endpoint) pair with the lowest score, where the
    score is the estimated travel to that endpoint plus an angle score that
    rewards lines perpendicular to the previous one. The line is entered at
    that endpoint and left at the other.

    Both collaborators are optional: without a spatial index every unvisited
    line is scanned, without a combing boundary travel is straight-line.
    """

    feature_kind = "line"

    def __init__(
        self,
        start_point: Point,
        combing_boundary: ObstacleBoundary | None = None,
        loc_to_line: LineIndex | None = None,
        config: LineOrderConfig | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the optimizer.

        Args:
            start_point: Position of the print head before the first line
            combing_boundary: Region travel should stay inside
            loc_to_line: Spatial index over the lines, by insertion index
            config: Scoring parameters
            logger: Logger to report to (default: the package logger)
        """
        super().__init__(start_point, logger)
        self.combing_boundary = combing_boundary
        self.loc_to_line = loc_to_line
        self.config = config if config is not None else LineOrderConfig()

    def add_line(self, line: Sequence[Point] | PolygonRef, source_id: Hashable | None = None) -> None:
        """Append a reference to a line; its endpoints are its first and last vertex.

        Raises:
            EmptyFeatureError: If the line has no vertices
            OptimizerStateError: If optimize() has already run
        """
        self._add(line, source_id)

    def add_lines(self, lines: Iterable[Sequence[Point] | PolygonRef]) -> None:
        """Append references to several lines."""
        for line in lines:
            self._add(line, None)

    @staticmethod
    def angle_score(incoming_perpendicular: Point, from_point: Point, to_point: Point) -> float:
        """Score how well a line follows the previous one.

        90 degree turns are preferred. Turning around (180 degrees) is slow on
        machines with limited jerk, and going straight on (0 degrees) only
        happens when one infill line was interrupted, where the travel may
        need to comb around the gap.

        The score is symmetric in ``from_point`` and ``to_point``; the
        optimizer relies on that to score both entry endpoints with one value.

        Args:
            incoming_perpendicular: Direction the head arrived in, turned 90 degrees CCW
            from_point: One end of the candidate line
            to_point: The other end of the candidate line

        Returns:
            -1.0 for a perpendicular turn, 0.0 for straight on, reversal or
            degenerate input
        """
        nx, ny = unit_vector(incoming_perpendicular)
        dx, dy = unit_vector(to_point - from_point)
        return -abs(nx * dx + ny * dy)

    def travel_distance(self, p0: Point, p1: Point) -> float:
        """Estimate the distance covered when traveling from p0 to p1.

        Straight-line distance when there is no combing boundary or the
        straight move stays inside it; otherwise an inflated estimate
        standing in for the detour.
        """
        direct = vsize(p0, p1)
        if self.combing_boundary is None or direct == 0.0:
            return direct
        if self.combing_boundary.segment_inside(p0, p1):
            return direct
        return direct * self.config.detour_factor + self.config.detour_offset

    def entry_vertex(self, line_idx: int) -> int:
        """Vertex index at which line ``line_idx`` is entered."""
        if self._result is None:
            raise ResultNotReadyError("entry_vertex")
        if self.start[line_idx] == 0:
            return 0
        return len(self.polygons[line_idx]) - 1

    def _candidates(self, prev_point: Point, picked: list[bool]) -> list[int]:
        n = len(self.polygons)
        if self.loc_to_line is not None:
            radius = float(self.config.search_radius or self.loc_to_line.cell_size)
            while True:
                self.stats.index_queries += 1
                found = [
                    idx for idx in self.loc_to_line.nearby(prev_point, radius)
                    if 0 <= idx < n and not picked[idx]
                ]
                if found:
                    return found
                if self.loc_to_line.covers(prev_point, radius):
                    break
                radius *= 2

            self.stats.full_scans += 1
            self._logger.debug(
                "Spatial index found no candidates, scanning all lines",
                x=prev_point.x,
                y=prev_point.y,
                radius=radius,
            )

        return [idx for idx in range(n) if not picked[idx]]

    def _run(self) -> tuple[list[PathStep], float]:
        picked = [False] * len(self.polygons)
        prev_point = self.start_point
        incoming_perpendicular = Point(0, 0)
        steps: list[PathStep] = []
        travel = 0.0

        for _ in range(len(self.polygons)):
            best_line_idx = -1
            best_endpoint = 0
            best_score = math.inf
            best_travel = 0.0

            for line_idx in self._candidates(prev_point, picked):
                line = self.polygons[line_idx]
                angle_bonus = self.angle_score(incoming_perpendicular, line.first, line.last) * self.config.angle_weight

                for endpoint, point in ((0, line.first), (1, line.last)):
                    self.stats.candidates_evaluated += 1
                    distance = self.travel_distance(prev_point, point)
                    score = distance + angle_bonus
                    if score < best_score:
                        best_line_idx = line_idx
                        best_endpoint = endpoint
                        best_score = score
                        best_travel = distance

            line = self.polygons[best_line_idx]
            line_start, line_end = (line.first, line.last) if best_endpoint == 0 else (line.last, line.first)

            if best_travel > vsize(prev_point, line_start):
                self.stats.obstructed_travels += 1

            picked[best_line_idx] = True
            steps.append(PathStep(best_line_idx, best_endpoint))
            travel += best_travel
            prev_point = line_end
            incoming_perpendicular = turn90_ccw(line_end - line_start)

        return steps, travel
