from .geometry import (
    Point3D, Vector3D, Segment, direction_from_points,
    WORLD_UP, WORLD_Y,
)
from .catalog import Catalog, CatalogType, Category
from .building import (
    Level, Wall, WallAxis, OpeningType, OpeningPlacement,
    ReferencePlane, RoofProfile, Roof, BuildingModel, BuildingStats,
)
from .parameters import BuildParams, BuildConfig, TypeRef, FootprintSpec
from .document import ModelDocument, create_default_document
from .context import BuildContext

__all__ = [
    "Point3D", "Vector3D", "Segment", "direction_from_points",
    "WORLD_UP", "WORLD_Y",
    "Catalog", "CatalogType", "Category",
    "Level", "Wall", "WallAxis", "OpeningType", "OpeningPlacement",
    "ReferencePlane", "RoofProfile", "Roof", "BuildingModel", "BuildingStats",
    "BuildParams", "BuildConfig", "TypeRef", "FootprintSpec",
    "ModelDocument", "create_default_document",
    "BuildContext",
]
