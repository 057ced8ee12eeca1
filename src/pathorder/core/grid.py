"""Sparse grid spatial index over line segments.

LocToLineGrid buckets segments by the square cells they pass through so that
"which segments are near this point" and "which segments could cross this
segment" can be answered without scanning every segment.
"""

import math
from collections import defaultdict
from collections.abc import Iterable, Sequence

from pathorder.domain import Point
from pathorder.exceptions import GeometryError

Segment = tuple[int, Point, Point]


class LocToLineGrid:
    """Hash grid mapping cells to the segments that pass through them.

    Each segment is stored with an element id. Several segments may share an
    id (all edges of one polyline, for example); queries return ids.

    Example:
        grid = LocToLineGrid.from_lines(lines, cell_size=2000)
        candidates = grid.nearby(Point(0, 0), radius=2000)
    """

    def __init__(self, cell_size: int) -> None:
        """Initialize an empty grid.

        Args:
            cell_size: Edge length of a cell in machine units

        Raises:
            GeometryError: If cell_size is not positive
        """
        if cell_size <= 0:
            raise GeometryError(f"Grid cell size must be positive, got {cell_size}")
        self.cell_size = cell_size
        self._cells: defaultdict[tuple[int, int], list[Segment]] = defaultdict(list)
        self._ids: set[int] = set()
        self._min_cell: tuple[int, int] | None = None
        self._max_cell: tuple[int, int] | None = None

    @classmethod
    def from_lines(cls, lines: Iterable[Sequence[Point]], cell_size: int) -> "LocToLineGrid":
        """Index line features by their position in ``lines``.

        Every edge of a polyline is inserted; a single-vertex line is inserted
        as a zero-length segment.
        """
        grid = cls(cell_size)
        for line_idx, line in enumerate(lines):
            if len(line) == 1:
                grid.insert(line_idx, line[0], line[0])
            for i in range(len(line) - 1):
                grid.insert(line_idx, line[i], line[i + 1])
        return grid

    @classmethod
    def from_polygons(cls, polygons: Iterable[Sequence[Point]], cell_size: int) -> "LocToLineGrid":
        """Index the edges of closed polygons, including the closing edge."""
        grid = cls(cell_size)
        for poly_idx, polygon in enumerate(polygons):
            n = len(polygon)
            for i in range(n):
                grid.insert(poly_idx, polygon[i], polygon[(i + 1) % n])
        return grid

    def _cell_of(self, x: float, y: float) -> tuple[int, int]:
        return math.floor(x / self.cell_size), math.floor(y / self.cell_size)

    def _cells_along(self, p0: Point, p1: Point) -> set[tuple[int, int]]:
        # Sample at half-cell steps and pad by one cell on each side so no
        # cell the segment clips is missed.
        length = (p1 - p0).size()
        steps = max(1, math.ceil(2 * length / self.cell_size))
        cells: set[tuple[int, int]] = set()
        for i in range(steps + 1):
            t = i / steps
            cx, cy = self._cell_of(p0.x + (p1.x - p0.x) * t, p0.y + (p1.y - p0.y) * t)
            for dx in (-1, 0, 1):
                for dy in (-1, 0, 1):
                    cells.add((cx + dx, cy + dy))
        return cells

    def insert(self, element_id: int, p0: Point, p1: Point) -> None:
        """Register a segment under ``element_id``."""
        segment = (element_id, p0, p1)
        for cell in self._cells_along(p0, p1):
            self._cells[cell].append(segment)
            if self._min_cell is None or self._max_cell is None:
                self._min_cell = cell
                self._max_cell = cell
            else:
                self._min_cell = (min(self._min_cell[0], cell[0]), min(self._min_cell[1], cell[1]))
                self._max_cell = (max(self._max_cell[0], cell[0]), max(self._max_cell[1], cell[1]))
        self._ids.add(element_id)

    def _cells_in_box(self, min_x: float, min_y: float, max_x: float, max_y: float) -> Iterable[list[Segment]]:
        lo_x, lo_y = self._cell_of(min_x, min_y)
        hi_x, hi_y = self._cell_of(max_x, max_y)
        if self._min_cell is None or self._max_cell is None:
            return
        lo_x, lo_y = max(lo_x, self._min_cell[0]), max(lo_y, self._min_cell[1])
        hi_x, hi_y = min(hi_x, self._max_cell[0]), min(hi_y, self._max_cell[1])
        for cx in range(lo_x, hi_x + 1):
            for cy in range(lo_y, hi_y + 1):
                bucket = self._cells.get((cx, cy))
                if bucket:
                    yield bucket

    def nearby(self, point: Point, radius: float) -> list[int]:
        """Ids of segments registered in cells touching the query square.

        Args:
            point: Query centre
            radius: Half edge length of the query square

        Returns:
            Sorted list of distinct element ids
        """
        found: set[int] = set()
        for bucket in self._cells_in_box(point.x - radius, point.y - radius, point.x + radius, point.y + radius):
            found.update(element_id for element_id, _, _ in bucket)
        return sorted(found)

    def segments_near(self, p0: Point, p1: Point) -> list[Segment]:
        """Segments whose cells touch the bounding box of p0-p1, without duplicates."""
        seen: set[tuple[int, Point, Point]] = set()
        result: list[Segment] = []
        for bucket in self._cells_in_box(min(p0.x, p1.x), min(p0.y, p1.y), max(p0.x, p1.x), max(p0.y, p1.y)):
            for segment in bucket:
                if segment not in seen:
                    seen.add(segment)
                    result.append(segment)
        return result

    def covers(self, point: Point, radius: float) -> bool:
        """Whether the query square around ``point`` contains every occupied cell."""
        if self._min_cell is None or self._max_cell is None:
            return True
        lo_x, lo_y = self._cell_of(point.x - radius, point.y - radius)
        hi_x, hi_y = self._cell_of(point.x + radius, point.y + radius)
        return (
            lo_x <= self._min_cell[0]
            and lo_y <= self._min_cell[1]
            and hi_x >= self._max_cell[0]
            and hi_y >= self._max_cell[1]
        )

    @property
    def element_count(self) -> int:
        """Number of distinct element ids stored."""
        return len(self._ids)

    def __len__(self) -> int:
        return len(self._cells)
