"""Feature references and optimizer results.

The optimizers never copy geometry. They hold PolygonRef views onto
sequences owned by the caller, who must keep those sequences alive and
unmodified until the optimizer has been discarded.
"""

from collections.abc import Hashable, Iterator, Sequence
from dataclasses import dataclass, field

from pathorder.domain.point import Point


class PolygonRef:
    """Read-only, non-owning view onto a sequence of points.

    Used both for closed contours (last vertex connects back to the first)
    and for open lines (first and last vertex are the two endpoints).

    Example:
        outline = [Point(0, 0), Point(10, 0), Point(10, 10)]
        ref = PolygonRef(outline, source_id="wall-0")
        assert ref.points is outline
    """

    __slots__ = ("_points", "_source_id")

    def __init__(self, points: Sequence[Point], source_id: Hashable | None = None) -> None:
        self._points = points
        self._source_id = source_id

    @property
    def points(self) -> Sequence[Point]:
        """The referenced sequence itself (not a copy)."""
        return self._points

    @property
    def source_id(self) -> Hashable | None:
        """Caller supplied identifier of the referenced geometry."""
        return self._source_id

    @property
    def first(self) -> Point:
        return self._points[0]

    @property
    def last(self) -> Point:
        return self._points[-1]

    def is_empty(self) -> bool:
        return len(self._points) == 0

    def __len__(self) -> int:
        return len(self._points)

    def __getitem__(self, index: int) -> Point:
        return self._points[index]

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __repr__(self) -> str:
        return f"PolygonRef(size={len(self._points)}, source_id={self._source_id!r})"


@dataclass(frozen=True, slots=True)
class PathStep:
    """One visited feature.

    Attributes:
        feature_index: Index of the feature in insertion order
        start_index: Start vertex (contours) or entry endpoint 0/1 (lines)
    """

    feature_index: int
    start_index: int


@dataclass(frozen=True)
class OrderResult:
    """Visiting order and start choices produced by one optimize() call.

    Attributes:
        steps: Features in visiting order, each exactly once
        travel_distance: Estimated non-printing travel of the whole tour
    """

    steps: tuple[PathStep, ...] = field(default_factory=tuple)
    travel_distance: float = 0.0

    @property
    def order(self) -> list[int]:
        """Feature indices in visiting order."""
        return [step.feature_index for step in self.steps]

    @property
    def start(self) -> list[int]:
        """Chosen start per original feature index."""
        starts = [0] * len(self.steps)
        for step in self.steps:
            starts[step.feature_index] = step.start_index
        return starts

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[PathStep]:
        return iter(self.steps)
