"""Exception hierarchy for building generation."""

from __future__ import annotations


class HouseGenError(Exception):
    """Base class for every error raised by the generator."""


class CatalogLookupError(HouseGenError):
    """A named catalog type could not be resolved."""

    def __init__(
        self,
        name: str,
        family_name: str | None = None,
        category: str | None = None,
        message: str | None = None,
    ) -> None:
        self.name = name
        self.family_name = family_name
        self.category = category
        if message is None:
            kind = f"{category} type" if category else "type"
            where = f"family '{family_name}'" if family_name else "the catalog"
            message = f"No {kind} named '{name}' in {where}"
        super().__init__(message)


class LevelNotFoundError(CatalogLookupError):
    """A level with the requested name does not exist in the document."""

    def __init__(self, name: str) -> None:
        super().__init__(name, category="level", message=f"No level named '{name}'")


class GeometryError(HouseGenError):
    """Input would produce degenerate or invalid geometry."""


class UnitConversionError(HouseGenError):
    """A numeric value could not be converted between units."""


class TransactionError(HouseGenError):
    """A document modification was attempted outside of a transaction."""
