"""Unit tests for the contour order optimizer.

Tests cover:
- Greedy nearest-first ordering
- Seam placement policies and corner preferences
- Usage contract (empty contours, single use, reading results early)
"""

import math
import random

import pytest

from pathorder.config import CornerPreference, SeamType, ZSeamConfig
from pathorder.core.contour_order import ContourOrderOptimizer
from pathorder.domain import Point, PolygonRef
from pathorder.exceptions import EmptyFeatureError, OptimizerStateError, ResultNotReadyError


def square(cx: int, cy: int, half: int) -> list[Point]:
    """Counter-clockwise square centered at (cx, cy)."""
    return [
        Point(cx - half, cy - half),
        Point(cx + half, cy - half),
        Point(cx + half, cy + half),
        Point(cx - half, cy + half),
    ]


# L-shaped outline (CCW) with its reflex corner at index 3
L_SHAPE = [
    Point(0, 0),
    Point(200, 0),
    Point(200, 100),
    Point(100, 100),
    Point(100, 200),
    Point(0, 200),
]


def run(contours, start=Point(0, 0), config=None) -> ContourOrderOptimizer:
    optimizer = ContourOrderOptimizer(start, config)
    optimizer.add_contours(contours)
    optimizer.optimize()
    return optimizer


class TestOrdering:
    """Tests for the greedy tour."""

    def test_empty_input(self):
        """No contours gives an empty tour without error."""
        optimizer = run([])
        assert optimizer.order == []
        assert optimizer.start == []
        assert optimizer.result.travel_distance == 0.0

    def test_single_contour_starts_at_nearest_vertex(self):
        contour = [Point(100, 100), Point(10, 5), Point(50, -40), Point(200, 0)]
        optimizer = run([contour])

        assert optimizer.order == [0]
        assert optimizer.start == [1]

    def test_single_vertex_contour(self):
        optimizer = run([[Point(30, 40)]])
        assert optimizer.order == [0]
        assert optimizer.start == [0]
        assert optimizer.result.travel_distance == pytest.approx(50.0)

    def test_nearer_contour_first(self):
        """A square at x=10 is visited before a square at x=100."""
        near = square(10, 0, 2)
        far = square(100, 0, 2)

        assert run([near, far]).order == [0, 1]
        assert run([far, near]).order == [1, 0]

    def test_travel_distance_of_tour(self):
        optimizer = run([square(10, 0, 2), square(100, 0, 2)])

        # (0,0) -> (8,-2) -> (98,-2)
        assert optimizer.start == [0, 0]
        assert optimizer.result.travel_distance == pytest.approx(math.sqrt(68) + 90)

    def test_equal_distance_prefers_first_added(self):
        optimizer = run([square(0, 50, 5), square(0, -50, 5)])
        assert optimizer.order[0] == 0

    def test_order_is_permutation(self):
        rng = random.Random(7)
        contours = [square(rng.randint(-5000, 5000), rng.randint(-5000, 5000), rng.randint(1, 300)) for _ in range(25)]
        optimizer = run(contours)

        assert sorted(optimizer.order) == list(range(25))
        for idx, vertex in enumerate(optimizer.start):
            assert 0 <= vertex < len(contours[idx])

    def test_deterministic(self):
        rng = random.Random(11)
        contours = [square(rng.randint(-5000, 5000), rng.randint(-5000, 5000), 100) for _ in range(15)]
        config = ZSeamConfig(corner_pref=CornerPreference.ANY)

        first = run(contours, config=config)
        second = run(contours, config=config)

        assert first.order == second.order
        assert first.start == second.start

    def test_accepts_polygon_ref_without_copy(self):
        contour = square(0, 0, 10)
        optimizer = ContourOrderOptimizer(Point(0, 0))
        optimizer.add_contour(PolygonRef(contour, source_id="outer"))
        optimizer.add_contour(contour, source_id="again")

        assert optimizer.polygons[0].points is contour
        assert optimizer.polygons[1].points is contour
        assert optimizer.polygons[1].source_id == "again"


class TestSeamPolicies:
    """Tests for seam placement."""

    def test_user_specified_ignores_start_point(self):
        """With an anchor, moving the start point never moves a seam."""
        contours = [square(0, 0, 100), square(500, 300, 50), square(-800, 200, 80)]
        config = ZSeamConfig(type=SeamType.USER_SPECIFIED, position=(1000, 1000))

        from_origin = run(contours, start=Point(0, 0), config=config)
        from_elsewhere = run(contours, start=Point(5000, -3000), config=config)

        assert from_origin.start == from_elsewhere.start
        # Vertex nearest (1000, 1000) is the top-right corner
        assert from_origin.start == [2, 2, 2]

    def test_back_uses_anchor_position(self):
        """The back policy seams at the vertex nearest the configured position."""
        contour = square(1000, 1000, 100)

        near_origin = ZSeamConfig(type=SeamType.BACK, position=(0, 0))
        assert run([contour], start=Point(0, 0), config=near_origin).start == [0]
        assert run([contour], start=Point(5000, 5000), config=near_origin).start == [0]

        behind = ZSeamConfig(type=SeamType.BACK, position=(2000, 2000))
        assert run([contour], start=Point(0, 0), config=behind).start == [2]

    def test_random_is_reproducible(self):
        contours = [square(0, 0, 100), square(1000, 0, 100)]
        config = ZSeamConfig(type=SeamType.RANDOM, random_seed=42)

        first = run(contours, config=config)
        second = run(contours, config=config)

        assert first.start == second.start
        assert all(0 <= vertex < 4 for vertex in first.start)

    def test_sharpest_corner_uses_curvature_only(self):
        config = ZSeamConfig(type=SeamType.SHARPEST_CORNER, corner_pref=CornerPreference.CONCAVE)

        assert run([L_SHAPE], start=Point(0, 0), config=config).start == [3]
        assert run([L_SHAPE], start=Point(200, 0), config=config).start == [3]

    def test_sharpest_corner_without_preference_is_shortest(self):
        config = ZSeamConfig(type=SeamType.SHARPEST_CORNER)
        assert run([L_SHAPE], start=Point(210, -10), config=config).start == [1]


class TestCornerPreference:
    """Tests for breaking distance near-ties with corner angles."""

    def test_convex_preference_on_equidistant_square_is_stable(self):
        """All four corners tie; the first one wins on every run."""
        config = ZSeamConfig(corner_pref=CornerPreference.CONVEX)
        starts = {run([square(0, 0, 10)], config=config).start[0] for _ in range(5)}
        assert starts == {0}

    def test_no_preference_takes_first_of_equal_vertices(self):
        # (200,100), (100,100) and (100,200) are equally far from (150,150)
        assert run([L_SHAPE], start=Point(150, 150)).start == [2]

    def test_concave_preference_picks_reflex_corner(self):
        config = ZSeamConfig(corner_pref=CornerPreference.CONCAVE)
        assert run([L_SHAPE], start=Point(150, 150), config=config).start == [3]

    def test_convex_preference_skips_reflex_corner(self):
        config = ZSeamConfig(corner_pref=CornerPreference.CONVEX)
        assert run([L_SHAPE], start=Point(150, 150), config=config).start == [2]

    def test_weighted_preference_favours_concave(self):
        config = ZSeamConfig(corner_pref=CornerPreference.WEIGHTED)
        assert run([L_SHAPE], start=Point(150, 150), config=config).start == [3]

    def test_corner_bonus_values(self):
        optimizer = ContourOrderOptimizer(Point(0, 0), ZSeamConfig(corner_pref=CornerPreference.ANY))
        assert optimizer.corner_bonus(0.5, 100.0) == pytest.approx(50.0)
        assert optimizer.corner_bonus(1.5, 100.0) == pytest.approx(50.0)
        assert optimizer.corner_bonus(1.0, 100.0) == 0.0

    def test_far_vertex_not_pulled_by_small_shift(self):
        """A tiny corner shift cannot beat a clearly closer vertex."""
        config = ZSeamConfig(corner_pref=CornerPreference.CONCAVE, corner_shift=1)
        assert run([L_SHAPE], start=Point(210, -10), config=config).start == [1]

    def test_nearby_vertex_beats_distant_corner(self):
        """With the head on a vertex, a matching corner farther away never wins."""
        contour = [Point(p.x * 40, p.y * 40) for p in L_SHAPE]
        config = ZSeamConfig(corner_pref=CornerPreference.CONCAVE)
        assert run([contour], start=Point(8000, 0), config=config).start == [1]

    def test_slightly_farther_corner_wins_near_tie(self):
        # (200,100) and (100,200) are nearer than the reflex corner, but only just
        config = ZSeamConfig(corner_pref=CornerPreference.CONCAVE)
        assert run([L_SHAPE], start=Point(151, 151), config=config).start == [3]

    def test_clearly_nearer_vertex_beats_corner(self):
        config = ZSeamConfig(corner_pref=CornerPreference.CONCAVE)
        assert run([L_SHAPE], start=Point(150, 160), config=config).start == [4]


class TestContract:
    """Tests for the usage contract."""

    def test_empty_contour_rejected(self):
        optimizer = ContourOrderOptimizer(Point(0, 0))
        optimizer.add_contour(square(0, 0, 1))

        with pytest.raises(EmptyFeatureError) as exc_info:
            optimizer.add_contour([])
        assert exc_info.value.index == 1
        assert len(optimizer.polygons) == 1

    def test_optimize_twice_rejected(self):
        optimizer = run([square(0, 0, 1)])
        with pytest.raises(OptimizerStateError):
            optimizer.optimize()

    def test_add_after_optimize_rejected(self):
        optimizer = run([square(0, 0, 1)])
        with pytest.raises(OptimizerStateError):
            optimizer.add_contour(square(5, 5, 1))

    def test_results_unavailable_before_optimize(self):
        optimizer = ContourOrderOptimizer(Point(0, 0))
        with pytest.raises(ResultNotReadyError):
            _ = optimizer.order
        with pytest.raises(ResultNotReadyError):
            _ = optimizer.start
        with pytest.raises(ResultNotReadyError):
            _ = optimizer.result

    def test_stats_recorded(self):
        optimizer = run([square(0, 0, 1), square(10, 10, 1), square(20, 20, 1)])
        assert optimizer.stats.feature_count == 3
        # 3 + 2 + 1 candidate contours over the three rounds
        assert optimizer.stats.candidates_evaluated == 6
        assert optimizer.stats.duration_ms >= 0.0
