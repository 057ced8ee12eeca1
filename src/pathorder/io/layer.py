"""Layer files: one layer's features and settings as JSON.

A layer file holds the start point, the seam and line settings, and the
contours, lines and optional combing boundary as lists of [x, y] pairs:

    {
        "start_point": [0, 0],
        "seam": {"type": "shortest", "corner_pref": "convex"},
        "contours": [[[0, 0], [1000, 0], [1000, 1000], [0, 1000]]],
        "lines": [[[100, 100], [900, 100]]],
        "combing_boundary": [[[0, 0], [1000, 0], [1000, 1000], [0, 1000]]],
        "grid_cell_size": 2000
    }
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import structlog
from pydantic import BaseModel, Field, ValidationError

from pathorder.config import GridConfig, LineOrderConfig, ZSeamConfig
from pathorder.core import CombingBoundary, ContourOrderOptimizer, LineOrderOptimizer, LocToLineGrid
from pathorder.domain import OrderResult, Point
from pathorder.exceptions import LayerFileError

Coordinate = tuple[int, int]


class LayerSpec(BaseModel):
    """Contents of a layer file."""

    start_point: Coordinate = Field(
        default=(0, 0),
        description="Print head position before the layer starts",
    )
    seam: ZSeamConfig = Field(default_factory=ZSeamConfig)
    line_order: LineOrderConfig = Field(default_factory=LineOrderConfig)
    contours: list[list[Coordinate]] = Field(default_factory=list)
    lines: list[list[Coordinate]] = Field(default_factory=list)
    combing_boundary: list[list[Coordinate]] | None = Field(
        default=None,
        description="Closed polygons travel should stay inside",
    )
    grid_cell_size: int | None = Field(
        default=None,
        gt=0,
        description="Index the lines in a grid with this cell size (None = no index)",
    )


@dataclass
class LayerResult:
    """Tours computed for one layer."""

    contours: OrderResult
    lines: OrderResult


def _to_points(coordinates: list[list[Coordinate]]) -> list[list[Point]]:
    return [[Point(x, y) for x, y in feature] for feature in coordinates]


def read_layer(path: Path) -> LayerSpec:
    """Load and validate a layer file.

    Raises:
        LayerFileError: If the file cannot be read or is not a valid layer
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise LayerFileError(str(path), str(e)) from e

    try:
        return LayerSpec.model_validate_json(text)
    except ValidationError as e:
        raise LayerFileError(str(path), str(e)) from e


def optimize_layer(spec: LayerSpec, logger: structlog.stdlib.BoundLogger | None = None) -> LayerResult:
    """Order the contours, then the lines, of one layer.

    Lines are ordered starting from the seam of the last contour printed, or
    from the layer start point when there are no contours.

    Raises:
        ContractViolationError: If a contour or line has no vertices
    """
    start_point = Point(*spec.start_point)
    contours = _to_points(spec.contours)
    lines = _to_points(spec.lines)
    cell_size = spec.grid_cell_size or GridConfig().cell_size

    contour_optimizer = ContourOrderOptimizer(start_point, spec.seam, logger=logger)
    contour_optimizer.add_contours(contours)
    contour_result = contour_optimizer.optimize()

    line_start = start_point
    if contour_result.steps:
        last = contour_result.steps[-1]
        line_start = contours[last.feature_index][last.start_index]

    combing_boundary = None
    if spec.combing_boundary:
        combing_boundary = CombingBoundary(_to_points(spec.combing_boundary), cell_size=cell_size)

    loc_to_line = None
    if spec.grid_cell_size is not None:
        loc_to_line = LocToLineGrid.from_lines(lines, spec.grid_cell_size)

    line_optimizer = LineOrderOptimizer(
        line_start,
        combing_boundary=combing_boundary,
        loc_to_line=loc_to_line,
        config=spec.line_order,
        logger=logger,
    )
    line_optimizer.add_lines(lines)
    line_result = line_optimizer.optimize()

    return LayerResult(contours=contour_result, lines=line_result)


def order_to_dict(result: OrderResult) -> dict[str, Any]:
    """Serialize one tour."""
    return {
        "order": result.order,
        "start": result.start,
        "travel_distance": round(result.travel_distance, 3),
    }


def result_to_dict(result: LayerResult) -> dict[str, Any]:
    """Serialize a layer result."""
    return {
        "contours": order_to_dict(result.contours),
        "lines": order_to_dict(result.lines),
    }


def write_result(path: Path, result: LayerResult) -> None:
    """Write a layer result as JSON."""
    path.write_text(json.dumps(result_to_dict(result), indent=2) + "\n", encoding="utf-8")
