"""Door and window placement at wall midpoints."""

from __future__ import annotations
import logging
from abc import abstractmethod

from housegen.phases.base import BuildPhase
from housegen.core.units import mm_to_internal
from housegen.models import (
    BuildContext, CatalogType, Category, Level, ModelDocument,
    OpeningPlacement, OpeningType, Point3D, TypeRef, Wall,
)

logger = logging.getLogger(__name__)


def compute_insertion_point(wall: Wall, vertical_offset_mm: float | None = None) -> Point3D:
    """
    Midpoint of the wall's centerline, raised by `vertical_offset_mm`.

    Doors pass no offset and sit on the wall's base plane.
    """
    point = wall.centerline.start.midpoint(wall.centerline.end)
    if vertical_offset_mm is not None:
        point = point.translated(dz=mm_to_internal(vertical_offset_mm))
    return point


class OpeningPlacer:
    """Inserts door and window instances into host walls."""

    def place(
        self,
        document: ModelDocument,
        wall: Wall,
        level: Level,
        symbol: CatalogType,
        opening_type: OpeningType,
        sill_height_mm: float | None = None,
    ) -> OpeningPlacement:
        point = compute_insertion_point(wall, sill_height_mm)

        with document.transaction(f"Insert {opening_type.value}"):
            document.activate(symbol)
            opening = document.add_opening(OpeningPlacement(
                id=document.next_id(opening_type.value),
                type=opening_type,
                wall_id=wall.id,
                symbol=symbol,
                point=point,
                level=level,
                sill_height=0.0 if sill_height_mm is None else mm_to_internal(sill_height_mm),
            ))

        logger.debug("Placed %s '%s' on %s at (%.3f, %.3f, %.3f)",
                     opening_type.value, symbol.name, wall.id, point.x, point.y, point.z)
        return opening


class _OpeningPhase(BuildPhase):
    category: Category
    opening_type: OpeningType
    dependencies = ["walls.exterior"]

    def __init__(self, placer: OpeningPlacer | None = None) -> None:
        self.placer = placer or OpeningPlacer()

    @abstractmethod
    def _type_ref(self, context: BuildContext) -> TypeRef:
        """Catalog key of the symbol this phase inserts."""
        ...

    def _resolve_symbol(self, context: BuildContext) -> CatalogType:
        ref = self._type_ref(context)
        return context.document.catalog.resolve(ref.name, ref.family_name, self.category)


class DoorPhase(_OpeningPhase):
    """One entrance door in the front wall."""

    priority = 30
    category = Category.DOOR
    opening_type = OpeningType.DOOR

    def get_id(self) -> str:
        return "openings.door"

    def get_name(self) -> str:
        return "Entrance Door"

    def applies(self, context: BuildContext) -> bool:
        return len(context.walls) > 0

    def _type_ref(self, context: BuildContext) -> TypeRef:
        return context.config.door_type

    def run(self, context: BuildContext) -> None:
        symbol = self._resolve_symbol(context)
        context.add_opening(self.placer.place(
            context.document, context.walls[0], context.base_level,
            symbol, self.opening_type,
        ))


class WindowsPhase(_OpeningPhase):
    """One window in each wall after the front wall, all at the same sill height."""

    priority = 40
    category = Category.WINDOW
    opening_type = OpeningType.WINDOW

    def get_id(self) -> str:
        return "openings.windows"

    def get_name(self) -> str:
        return "Windows"

    def applies(self, context: BuildContext) -> bool:
        return len(context.walls) > 1

    def _type_ref(self, context: BuildContext) -> TypeRef:
        return context.config.window_type

    def run(self, context: BuildContext) -> None:
        symbol = self._resolve_symbol(context)
        for wall in context.walls[1:]:
            context.add_opening(self.placer.place(
                context.document, wall, context.base_level,
                symbol, self.opening_type, context.params.sill_height_mm,
            ))
