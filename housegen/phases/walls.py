"""Wall construction — one wall per footprint segment."""

from __future__ import annotations
import logging

from housegen.errors import GeometryError
from housegen.phases.base import BuildPhase
from housegen.core.analyzer import WallClassifier
from housegen.core.footprint import generate_footprint
from housegen.models import (
    BuildContext, CatalogType, Category, Level, ModelDocument, Segment, Wall,
)

logger = logging.getLogger(__name__)

MIN_WALL_LENGTH = 1e-6  # Internal units


class WallBuilder:
    """Creates walls from centerline segments between two levels."""

    def build(
        self,
        document: ModelDocument,
        segments: list[Segment],
        base_level: Level,
        top_level: Level,
        wall_type: CatalogType,
    ) -> list[Wall]:
        """
        Create one wall per segment, in order, in a single transaction.

        Either every wall is added to the document or none is.
        """
        self._validate(segments, base_level, top_level, wall_type)

        walls: list[Wall] = []
        with document.transaction("Create walls"):
            for segment in segments:
                wall = Wall(
                    id=document.next_id("wall"),
                    centerline=segment,
                    base_level=base_level,
                    thickness=wall_type.width,
                    wall_type=wall_type,
                )
                # Height follows the top level
                wall.top_level = top_level
                document.add_wall(wall)
                walls.append(wall)

        logger.info("Created %d walls of type '%s'", len(walls), wall_type.name)
        return walls

    def _validate(
        self,
        segments: list[Segment],
        base_level: Level,
        top_level: Level,
        wall_type: CatalogType,
    ) -> None:
        if not segments:
            raise GeometryError("No wall segments given")
        for i, segment in enumerate(segments):
            if segment.length < MIN_WALL_LENGTH:
                raise GeometryError(f"Wall segment {i} has zero length")
        if top_level.elevation <= base_level.elevation:
            raise GeometryError(
                f"Top level '{top_level.name}' ({top_level.elevation}) must be "
                f"above base level '{base_level.name}' ({base_level.elevation})"
            )
        if wall_type.category != Category.WALL:
            raise GeometryError(f"'{wall_type.name}' is not a wall type")
        if wall_type.width <= 0:
            raise GeometryError(f"Wall type '{wall_type.name}' has no thickness")


class ExteriorWallsPhase(BuildPhase):
    """Four exterior walls around the rectangular footprint."""

    priority = 10

    def __init__(self, builder: WallBuilder | None = None) -> None:
        self.builder = builder or WallBuilder()
        self.classifier = WallClassifier()

    def get_id(self) -> str:
        return "walls.exterior"

    def get_name(self) -> str:
        return "Exterior Walls"

    def applies(self, context: BuildContext) -> bool:
        return not context.walls

    def run(self, context: BuildContext) -> None:
        ref = context.config.wall_type
        wall_type = context.document.catalog.resolve(ref.name, ref.family_name, Category.WALL)
        segments = generate_footprint(context.footprint.width, context.footprint.depth)
        context.walls = self.builder.build(
            context.document, segments,
            context.base_level, context.top_level, wall_type,
        )
        self.classifier.analyze(context)
