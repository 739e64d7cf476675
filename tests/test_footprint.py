"""Tests for footprint generation."""

from __future__ import annotations

import math

import pytest

from housegen.core.footprint import footprint_points, generate_footprint
from housegen.core.units import internal_to_mm, mm_to_internal
from housegen.errors import GeometryError


class TestFootprintPoints:
    def test_closed_loop(self) -> None:
        pts = footprint_points(10000, 5000)
        assert len(pts) == 5
        assert pts[0] == pts[-1]

    def test_corners(self) -> None:
        dx = mm_to_internal(10000) / 2
        dy = mm_to_internal(5000) / 2
        pts = footprint_points(10000, 5000)
        assert [(p.x, p.y) for p in pts] == [
            (-dx, -dy), (dx, -dy), (dx, dy), (-dx, dy), (-dx, -dy),
        ]
        assert all(p.z == 0.0 for p in pts)


class TestGenerateFootprint:
    def test_four_segments(self) -> None:
        assert len(generate_footprint(10000, 5000)) == 4

    def test_segments_chain(self) -> None:
        segs = generate_footprint(10000, 5000)
        for a, b in zip(segs, segs[1:] + segs[:1]):
            assert a.end == b.start

    @pytest.mark.parametrize("width,depth", [(10000, 5000), (3000, 7000), (1, 1), (12345.6, 789.1)])
    def test_edge_lengths_alternate(self, width: float, depth: float) -> None:
        lengths = [internal_to_mm(s.length) for s in generate_footprint(width, depth)]
        assert lengths == pytest.approx([width, depth, width, depth])

    def test_centroid_is_origin(self) -> None:
        segs = generate_footprint(8000, 6000)
        cx = sum(s.start.x for s in segs) / 4
        cy = sum(s.start.y for s in segs) / 4
        assert cx == pytest.approx(0.0)
        assert cy == pytest.approx(0.0)

    def test_front_wall_runs_along_x(self) -> None:
        front, right = generate_footprint(10000, 5000)[:2]
        assert front.start.y == front.end.y
        assert right.start.x == right.end.x

    def test_repeatable(self) -> None:
        assert generate_footprint(10000, 5000) == generate_footprint(10000, 5000)

    @pytest.mark.parametrize("width,depth", [(0, 5000), (10000, 0), (-1, 5000), (10000, -5)])
    def test_non_positive_raises(self, width: float, depth: float) -> None:
        with pytest.raises(GeometryError, match="must be positive"):
            generate_footprint(width, depth)

    @pytest.mark.parametrize("value", [math.nan, math.inf])
    def test_non_finite_raises(self, value: float) -> None:
        with pytest.raises(GeometryError):
            generate_footprint(value, 5000)

    def test_non_number_raises(self) -> None:
        with pytest.raises(GeometryError, match="must be a number"):
            generate_footprint("10000", 5000)  # type: ignore[arg-type]
