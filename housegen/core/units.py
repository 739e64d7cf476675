"""Conversion between display units (millimetres) and internal units (feet)."""

from __future__ import annotations
import math

from housegen.errors import UnitConversionError


MM_PER_FOOT = 304.8

# Anything beyond this is not a building dimension (about 1000 km).
MAX_ABS_MM = 1.0e9


def _check(value: float, unit: str) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError) as exc:
        raise UnitConversionError(f"Not a number: {value!r}") from exc
    if not math.isfinite(value):
        raise UnitConversionError(f"Non-finite length: {value} {unit}")
    return value


def mm_to_internal(value_mm: float) -> float:
    """Convert millimetres to internal length units."""
    value_mm = _check(value_mm, "mm")
    if abs(value_mm) > MAX_ABS_MM:
        raise UnitConversionError(f"Length out of range: {value_mm} mm")
    return value_mm / MM_PER_FOOT


def internal_to_mm(value: float) -> float:
    """Convert internal length units to millimetres."""
    value = _check(value, "ft")
    return value * MM_PER_FOOT
