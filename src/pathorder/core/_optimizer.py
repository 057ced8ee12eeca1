"""Shared lifecycle for the order optimizers.

An optimizer collects feature references, runs exactly once, and then
exposes its result. Any other sequence of calls is a contract violation and
is raised at the offending call.
"""

from collections.abc import Hashable, Sequence

import structlog

from pathorder.domain import OrderResult, PathStep, Point, PolygonRef
from pathorder.exceptions import EmptyFeatureError, OptimizerStateError, ResultNotReadyError
from pathorder.utils import OptimizationStats, get_logger


class OrderOptimizer:
    """Base class holding the feature list and the single-use result."""

    feature_kind = "feature"

    def __init__(self, start_point: Point, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self.start_point = start_point
        self.polygons: list[PolygonRef] = []
        self.stats = OptimizationStats()
        self._logger = logger if logger is not None else get_logger()
        self._optimized = False
        self._result: OrderResult | None = None

    def _add(self, polygon: Sequence[Point] | PolygonRef, source_id: Hashable | None) -> None:
        if self._optimized:
            raise OptimizerStateError(f"cannot add a {self.feature_kind} after optimize()")

        ref = polygon if isinstance(polygon, PolygonRef) else PolygonRef(polygon, source_id)
        if ref.is_empty():
            raise EmptyFeatureError(self.feature_kind, len(self.polygons))

        self.polygons.append(ref)
        self._logger.debug(
            "Feature added",
            kind=self.feature_kind,
            index=len(self.polygons) - 1,
            vertices=len(ref),
        )

    def _run(self) -> tuple[list[PathStep], float]:
        raise NotImplementedError

    def optimize(self) -> OrderResult:
        """Compute the visiting order and start choices.

        Returns:
            The tour over all added features

        Raises:
            OptimizerStateError: If called more than once
        """
        if self._optimized:
            raise OptimizerStateError("optimize() may only be called once per optimizer")
        self._optimized = True

        self.stats = OptimizationStats(feature_count=len(self.polygons))
        self.stats.start()
        steps, travel = self._run()
        self.stats.travel_distance = travel
        self.stats.finish()

        self._result = OrderResult(steps=tuple(steps), travel_distance=travel)
        self._logger.info(
            "Order optimized",
            kind=self.feature_kind,
            features=self.stats.feature_count,
            candidates=self.stats.candidates_evaluated,
            index_queries=self.stats.index_queries,
            full_scans=self.stats.full_scans,
            obstructed=self.stats.obstructed_travels,
            travel=round(travel, 2),
            duration_ms=round(self.stats.duration_ms, 2),
        )
        return self._result

    @property
    def result(self) -> OrderResult:
        """Result of optimize()."""
        if self._result is None:
            raise ResultNotReadyError("result")
        return self._result

    @property
    def order(self) -> list[int]:
        """Feature indices in visiting order."""
        if self._result is None:
            raise ResultNotReadyError("order")
        return self._result.order

    @property
    def start(self) -> list[int]:
        """Chosen start per original feature index."""
        if self._result is None:
            raise ResultNotReadyError("start")
        return self._result.start
