"""Build parameters and configuration."""

from __future__ import annotations
from pydantic import BaseModel

from .building import Level


class BuildParams(BaseModel):
    """User-adjustable dimensions of the building."""
    width_mm: float = 10000.0       # Footprint extent along X
    depth_mm: float = 5000.0        # Footprint extent along Y
    sill_height_mm: float = 900.0   # Window sill above the base level
    eave_rise: float = 1.3          # Eave above the roof level (internal units)
    ridge_rise: float = 3.0         # Ridge above the eaves (internal units)
    base_level_name: str = "Level 1"
    top_level_name: str = "Level 2"


class TypeRef(BaseModel):
    """Catalog lookup key: type name within a family."""
    name: str
    family_name: str


class BuildConfig(BaseModel):
    """Controls which catalog types and phases are used."""
    wall_type: TypeRef = TypeRef(name="Generic - 200mm", family_name="Basic Wall")
    door_type: TypeRef = TypeRef(name="0915 x 2134mm", family_name="Single-Flush")
    window_type: TypeRef = TypeRef(name="0915 x 1830mm", family_name="Fixed")
    roof_type: TypeRef = TypeRef(name="Generic - 400mm", family_name="Basic Roof")
    atomic_build: bool = True  # Roll back every phase if a later one fails
    enabled_phases: list[str] = []    # Empty = all registered
    disabled_phases: list[str] = []


class FootprintSpec(BaseModel):
    """Rectangular footprint between two levels."""
    width: float   # mm
    depth: float   # mm
    base_level: Level
    top_level: Level
