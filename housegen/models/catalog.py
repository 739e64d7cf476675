"""Named type catalog — the library of wall, door, window and roof types."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel

from housegen.errors import CatalogLookupError


class Category(str, Enum):
    WALL = "wall"
    DOOR = "door"
    WINDOW = "window"
    ROOF = "roof"


class CatalogType(BaseModel):
    """A reusable family type, looked up by type name and family name."""
    name: str
    family_name: str
    category: Category
    width: float = 0.0      # Thickness for wall/roof types (internal units)
    is_active: bool = True  # Placeable symbols must be activated before use

    @property
    def key(self) -> str:
        return f"{self.category.value}:{self.family_name}:{self.name}"

    def activate(self) -> None:
        self.is_active = True


class Catalog(BaseModel):
    types: list[CatalogType] = []

    def add(self, catalog_type: CatalogType) -> CatalogType:
        self.types.append(catalog_type)
        return catalog_type

    def of_category(self, category: Category) -> list[CatalogType]:
        return [t for t in self.types if t.category == category]

    def find(
        self, name: str, family_name: str, category: Category,
    ) -> CatalogType | None:
        """Return the first type matching name, family and category exactly."""
        for t in self.types:
            if t.category == category and t.name == name and t.family_name == family_name:
                return t
        return None

    def resolve(
        self, name: str, family_name: str, category: Category,
    ) -> CatalogType:
        """Like `find`, but a missing type is an error."""
        found = self.find(name, family_name, category)
        if found is None:
            raise CatalogLookupError(name, family_name, category.value)
        return found
