"""Model document — the shared, explicitly passed building database.

Holds levels, the type catalog and every committed element. All element
changes happen inside `transaction()`; a failing unit of work leaves the
document exactly as it was when the unit started.
"""

from __future__ import annotations
import logging
from contextlib import contextmanager
from typing import Iterator

from pydantic import BaseModel, Field, PrivateAttr

from housegen.core.units import mm_to_internal
from housegen.errors import LevelNotFoundError, TransactionError
from .building import Level, OpeningPlacement, ReferencePlane, Roof, Wall
from .catalog import Catalog, CatalogType, Category

logger = logging.getLogger(__name__)


class ModelDocument(BaseModel):
    levels: list[Level] = []
    catalog: Catalog = Field(default_factory=Catalog)

    # Committed elements
    walls: list[Wall] = []
    openings: list[OpeningPlacement] = []
    roofs: list[Roof] = []
    reference_planes: list[ReferencePlane] = []

    _open: list[str] = PrivateAttr(default_factory=list)
    _counters: dict[str, int] = PrivateAttr(default_factory=dict)

    # -- levels ---------------------------------------------------------

    def get_level(self, name: str) -> Level | None:
        """Exact, case-sensitive name match; first one wins."""
        for level in self.levels:
            if level.name == name:
                return level
        return None

    def require_level(self, name: str) -> Level:
        level = self.get_level(name)
        if level is None:
            raise LevelNotFoundError(name)
        return level

    # -- transactions ---------------------------------------------------

    @property
    def in_transaction(self) -> bool:
        return bool(self._open)

    @contextmanager
    def transaction(self, name: str) -> Iterator[ModelDocument]:
        """
        Atomic unit of work.

        Commits when the block exits normally. Any exception rolls back
        elements, id counters and type activation to the state at entry,
        then propagates. Transactions may nest; an inner commit is undone
        if an enclosing transaction rolls back.
        """
        snapshot = self._snapshot()
        self._open.append(name)
        logger.debug("Transaction started: %s", name)
        try:
            yield self
        except BaseException:
            self._restore(snapshot)
            logger.warning("Transaction rolled back: %s", name)
            raise
        finally:
            self._open.pop()
        logger.info("Transaction committed: %s", name)

    def _snapshot(self) -> dict:
        return {
            "walls": list(self.walls),
            "openings": list(self.openings),
            "roofs": list(self.roofs),
            "reference_planes": list(self.reference_planes),
            "counters": dict(self._counters),
            "active": [(t, t.is_active) for t in self.catalog.types],
        }

    def _restore(self, snapshot: dict) -> None:
        self.walls = snapshot["walls"]
        self.openings = snapshot["openings"]
        self.roofs = snapshot["roofs"]
        self.reference_planes = snapshot["reference_planes"]
        self._counters = snapshot["counters"]
        for t, was_active in snapshot["active"]:
            t.is_active = was_active

    def _require_transaction(self, action: str) -> None:
        if not self._open:
            raise TransactionError(f"Cannot {action} outside of a transaction")

    # -- element creation -----------------------------------------------

    def next_id(self, prefix: str) -> str:
        n = self._counters.get(prefix, 0) + 1
        self._counters[prefix] = n
        return f"{prefix}-{n}"

    def add_wall(self, wall: Wall) -> Wall:
        self._require_transaction("add a wall")
        self.walls.append(wall)
        return wall

    def add_opening(self, opening: OpeningPlacement) -> OpeningPlacement:
        self._require_transaction("insert an opening")
        if not opening.symbol.is_active:
            raise TransactionError(f"Type '{opening.symbol.name}' is not active")
        self.openings.append(opening)
        return opening

    def add_reference_plane(self, plane: ReferencePlane) -> ReferencePlane:
        self._require_transaction("add a reference plane")
        self.reference_planes.append(plane)
        return plane

    def add_roof(self, roof: Roof) -> Roof:
        self._require_transaction("add a roof")
        self.roofs.append(roof)
        return roof

    def activate(self, symbol: CatalogType) -> None:
        """Make a symbol placeable. Idempotent."""
        self._require_transaction("activate a type")
        if not symbol.is_active:
            symbol.activate()
            logger.debug("Activated type %s", symbol.key)

    @property
    def element_count(self) -> int:
        return len(self.walls) + len(self.openings) + len(self.roofs)


def create_default_document() -> ModelDocument:
    """Create a document with two levels and the standard type catalog."""
    catalog = Catalog()
    catalog.add(CatalogType(
        name="Generic - 200mm", family_name="Basic Wall",
        category=Category.WALL, width=mm_to_internal(200),
    ))
    catalog.add(CatalogType(
        name="0915 x 2134mm", family_name="Single-Flush",
        category=Category.DOOR, is_active=False,
    ))
    catalog.add(CatalogType(
        name="0915 x 1830mm", family_name="Fixed",
        category=Category.WINDOW, is_active=False,
    ))
    catalog.add(CatalogType(
        name="Generic - 400mm", family_name="Basic Roof",
        category=Category.ROOF, width=mm_to_internal(400),
    ))

    return ModelDocument(
        levels=[
            Level(name="Level 1", elevation=0.0),
            Level(name="Level 2", elevation=mm_to_internal(4000)),
        ],
        catalog=catalog,
    )
