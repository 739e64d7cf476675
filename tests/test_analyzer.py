"""Tests for long/short wall classification."""

from __future__ import annotations

import pytest

from housegen.core.analyzer import WallClassifier
from housegen.core.footprint import generate_footprint
from housegen.errors import GeometryError
from housegen.models import WallAxis
from housegen.phases.walls import WallBuilder


def _walls(document, level1, level2, wall_type, width, depth):
    segments = generate_footprint(width, depth)
    return WallBuilder().build(document, segments, level1, level2, wall_type)


class TestWallClassifier:
    def test_wide_footprint(self, walls) -> None:
        profile, extrusion = WallClassifier().classify(walls)
        assert (profile, extrusion) == (1, 0)
        assert [w.axis for w in walls] == [
            WallAxis.LONG, WallAxis.SHORT, WallAxis.LONG, WallAxis.SHORT,
        ]

    def test_deep_footprint(self, document, level1, level2, wall_type) -> None:
        walls = _walls(document, level1, level2, wall_type, 4000, 9000)
        assert WallClassifier().classify(walls) == (0, 1)
        assert walls[0].axis == WallAxis.SHORT

    def test_square_falls_back_to_order(self, document, level1, level2, wall_type) -> None:
        walls = _walls(document, level1, level2, wall_type, 6000, 6000)
        assert WallClassifier().classify(walls) == (1, 0)
        assert [w.axis for w in walls] == [
            WallAxis.LONG, WallAxis.SHORT, WallAxis.LONG, WallAxis.SHORT,
        ]

    def test_too_few_walls(self, walls) -> None:
        with pytest.raises(GeometryError):
            WallClassifier().classify(walls[:1])
