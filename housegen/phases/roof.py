"""Extrusion gable roof derived from the generated walls.

The cross-section is drawn over a short-axis wall: two eave points pushed
past the wall ends by one wall thickness, and a ridge point above their
midpoint. The open profile is then extruded along the long axis, across
the long wall's length plus one wall thickness of overhang at each end.
"""

from __future__ import annotations
import logging
import math

from housegen.errors import GeometryError
from housegen.phases.base import BuildPhase
from housegen.core.analyzer import WallClassifier
from housegen.models import (
    BuildContext, CatalogType, Category, Level, ModelDocument, Point3D,
    ReferencePlane, Roof, RoofProfile, Wall, WORLD_UP,
)

logger = logging.getLogger(__name__)

WALL_COUNT = 4
PERPENDICULAR_TOLERANCE = 1e-6


class RoofProfileBuilder:
    """Computes the gable profile and extrusion span for a rectangular plan."""

    def __init__(self, eave_rise: float = 1.3, ridge_rise: float = 3.0) -> None:
        self.eave_rise = eave_rise
        self.ridge_rise = ridge_rise
        self.classifier = WallClassifier()

    def build_profile(
        self,
        walls: list[Wall],
        level: Level,
        thickness: float,
        profile_index: int | None = None,
        extrusion_index: int | None = None,
    ) -> RoofProfile:
        """
        Gable profile over `walls[profile_index]`, extruded along
        `walls[extrusion_index]`.

        Indices default to the wall classification (first short wall,
        first long wall).
        """
        self._validate(walls, level, thickness)
        if profile_index is None or extrusion_index is None:
            profile_index, extrusion_index = self.classifier.classify(walls)

        dt = thickness / 2
        overhang = 2 * dt

        profile_wall = walls[profile_index]
        extrusion_wall = walls[extrusion_index]
        u = profile_wall.centerline.direction()
        v = extrusion_wall.centerline.direction()
        if abs(u.dot(v)) > PERPENDICULAR_TOLERANCE:
            raise GeometryError(
                f"Walls {profile_wall.id} and {extrusion_wall.id} are not perpendicular"
            )

        # Eaves: wall ends pushed outward along the wall by one thickness
        p1 = profile_wall.centerline.start
        p2 = profile_wall.centerline.end
        eave_start = Point3D(
            x=p1.x - u.x * overhang,
            y=p1.y - u.y * overhang,
            z=p1.z + level.elevation + self.eave_rise,
        )
        eave_end = Point3D(
            x=p2.x + u.x * overhang,
            y=p2.y + u.y * overhang,
            z=p2.z + level.elevation + self.eave_rise,
        )

        # Ridge above the middle of the cross-section
        ridge = eave_start.midpoint(eave_end).translated(dz=self.ridge_rise)

        extrusion_start = extrusion_wall.length / 2 + overhang
        extrusion_end = -extrusion_start

        plane = ReferencePlane(
            origin=Point3D(x=0.0, y=0.0, z=0.0),
            direction=WORLD_UP,
            cut_vector=u,
        )

        return RoofProfile(
            eave_start=eave_start,
            ridge=ridge,
            eave_end=eave_end,
            extrusion_start=extrusion_start,
            extrusion_end=extrusion_end,
            plane=plane,
        )

    def build(
        self,
        document: ModelDocument,
        walls: list[Wall],
        level: Level,
        roof_type: CatalogType,
        profile_index: int | None = None,
        extrusion_index: int | None = None,
    ) -> Roof:
        """Create the reference plane and the roof in one transaction."""
        if not walls:
            raise GeometryError("Cannot build a roof without walls")
        # Walls share one type, so any of them gives the thickness
        thickness = walls[0].thickness
        profile = self.build_profile(walls, level, thickness, profile_index, extrusion_index)

        with document.transaction("Create extrusion roof"):
            document.add_reference_plane(profile.plane)
            roof = document.add_roof(Roof(
                id=document.next_id("roof"),
                profile=profile,
                level=level,
                roof_type=roof_type,
            ))

        logger.info("Created roof '%s': ridge at %.3f, span %.3f..%.3f",
                    roof_type.name, profile.ridge.z,
                    profile.extrusion_end, profile.extrusion_start)
        return roof

    def _validate(self, walls: list[Wall], level: Level, thickness: float) -> None:
        if len(walls) != WALL_COUNT:
            raise GeometryError(f"Roof needs {WALL_COUNT} walls, got {len(walls)}")
        if not math.isfinite(thickness) or thickness <= 0:
            raise GeometryError(f"Wall thickness must be positive, got {thickness}")
        if not math.isfinite(level.elevation):
            raise GeometryError(f"Level '{level.name}' has no finite elevation")
        base = walls[0].base_level
        if level.elevation <= base.elevation:
            raise GeometryError(
                f"Roof level '{level.name}' must be above wall base level '{base.name}'"
            )
        for name, value in (("Eave rise", self.eave_rise), ("Ridge rise", self.ridge_rise)):
            if not math.isfinite(value):
                raise GeometryError(f"{name} must be finite, got {value}")
        if self.ridge_rise <= 0:
            raise GeometryError(f"Ridge rise must be positive, got {self.ridge_rise}")
        for wall in walls:
            if wall.length <= 0:
                raise GeometryError(f"Wall {wall.id} has zero length")


class ExtrusionRoofPhase(BuildPhase):
    """Gable roof extruded over the whole footprint."""

    priority = 60
    dependencies = ["walls.exterior"]

    def get_id(self) -> str:
        return "roof.extrusion_gable"

    def get_name(self) -> str:
        return "Extrusion Gable Roof"

    def applies(self, context: BuildContext) -> bool:
        return len(context.walls) == WALL_COUNT and context.roof is None

    def run(self, context: BuildContext) -> None:
        ref = context.config.roof_type
        roof_type = context.document.catalog.resolve(ref.name, ref.family_name, Category.ROOF)
        builder = RoofProfileBuilder(
            eave_rise=context.params.eave_rise,
            ridge_rise=context.params.ridge_rise,
        )
        context.roof = builder.build(
            context.document, context.walls, context.top_level, roof_type,
            context.profile_wall_index, context.extrusion_wall_index,
        )
