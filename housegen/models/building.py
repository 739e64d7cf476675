"""Building element models — levels, walls, openings and the roof."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel

from .catalog import CatalogType
from .geometry import Point3D, Segment, Vector3D


class Level(BaseModel):
    """Named horizontal reference plane."""
    name: str
    elevation: float  # Internal units


class WallAxis(str, Enum):
    LONG = "long"
    SHORT = "short"


class Wall(BaseModel):
    """A straight wall hosted on a base level and bound to a top level."""
    id: str
    centerline: Segment
    base_level: Level
    top_level: Level | None = None
    thickness: float
    wall_type: CatalogType
    axis: WallAxis | None = None

    @property
    def length(self) -> float:
        return self.centerline.length

    @property
    def height(self) -> float:
        if self.top_level is None:
            return 0.0
        return self.top_level.elevation - self.base_level.elevation


class OpeningType(str, Enum):
    WINDOW = "window"
    DOOR = "door"


class OpeningPlacement(BaseModel):
    """A door or window instance inserted into a host wall."""
    id: str
    type: OpeningType
    wall_id: str
    symbol: CatalogType
    point: Point3D
    level: Level
    sill_height: float = 0.0  # Internal units above the wall base


class ReferencePlane(BaseModel):
    """
    Work plane for a roof profile.

    Spanned by `direction` (world up by default) and `cut_vector`; the
    profile is extruded along their cross product.
    """
    origin: Point3D
    direction: Vector3D
    cut_vector: Vector3D

    @property
    def extrusion_axis(self) -> Vector3D:
        return self.direction.cross(self.cut_vector).normalized()


class RoofProfile(BaseModel):
    """Open two-segment gable profile plus its extrusion span."""
    eave_start: Point3D
    ridge: Point3D
    eave_end: Point3D
    extrusion_start: float
    extrusion_end: float
    plane: ReferencePlane

    @property
    def segments(self) -> list[Segment]:
        return [
            Segment(start=self.eave_start, end=self.ridge),
            Segment(start=self.ridge, end=self.eave_end),
        ]

    @property
    def rise(self) -> float:
        return self.ridge.z - self.eave_start.z


class Roof(BaseModel):
    """Extrusion roof built from a gable profile."""
    id: str
    profile: RoofProfile
    level: Level
    roof_type: CatalogType


class BuildingModel(BaseModel):
    """The complete generated building."""
    walls: list[Wall]
    openings: list[OpeningPlacement] = []
    roof: Roof | None = None
    stats: BuildingStats = None  # type: ignore[assignment]

    def model_post_init(self, __context: object) -> None:
        if self.stats is None:
            self.stats = BuildingStats.from_model(self)

    @property
    def doors(self) -> list[OpeningPlacement]:
        return [o for o in self.openings if o.type == OpeningType.DOOR]

    @property
    def windows(self) -> list[OpeningPlacement]:
        return [o for o in self.openings if o.type == OpeningType.WINDOW]


class BuildingStats(BaseModel):
    """Summary counts for a generated building."""
    walls: int = 0
    doors: int = 0
    windows: int = 0
    roofs: int = 0

    @classmethod
    def from_model(cls, model: BuildingModel) -> BuildingStats:
        return cls(
            walls=len(model.walls),
            doors=len(model.doors),
            windows=len(model.windows),
            roofs=0 if model.roof is None else 1,
        )
