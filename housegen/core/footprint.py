"""Footprint generation — wall centerlines of a closed rectangle."""

from __future__ import annotations
import logging
import math

from housegen.errors import GeometryError
from housegen.models import Point3D, Segment
from housegen.core.units import mm_to_internal

logger = logging.getLogger(__name__)


def _check_dimension(name: str, value: float) -> None:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        raise GeometryError(f"Footprint {name} must be a number, got {value!r}")
    if not math.isfinite(value) or value <= 0:
        raise GeometryError(f"Footprint {name} must be positive, got {value}")


def footprint_points(width_mm: float, depth_mm: float) -> list[Point3D]:
    """
    Closed rectangle centered on the origin at Z=0.

    Returns five points, the last repeating the first:
    (-dx,-dy), (dx,-dy), (dx,dy), (-dx,dy), (-dx,-dy).
    """
    _check_dimension("width", width_mm)
    _check_dimension("depth", depth_mm)

    dx = mm_to_internal(width_mm) / 2
    dy = mm_to_internal(depth_mm) / 2

    return [
        Point3D(x=-dx, y=-dy, z=0.0),
        Point3D(x=dx, y=-dy, z=0.0),
        Point3D(x=dx, y=dy, z=0.0),
        Point3D(x=-dx, y=dy, z=0.0),
        Point3D(x=-dx, y=-dy, z=0.0),
    ]


def generate_footprint(width_mm: float, depth_mm: float) -> list[Segment]:
    """Four wall centerlines in order: front, right, back, left."""
    points = footprint_points(width_mm, depth_mm)
    segments = [
        Segment(start=points[i], end=points[i + 1])
        for i in range(len(points) - 1)
    ]
    logger.debug("Footprint %s x %s mm -> %d segments", width_mm, depth_mm, len(segments))
    return segments
