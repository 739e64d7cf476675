"""Build context — accumulates state during a single generation pass."""

from __future__ import annotations
from pydantic import BaseModel, Field

from .building import Level, OpeningPlacement, Roof, Wall
from .document import ModelDocument
from .parameters import BuildConfig, BuildParams, FootprintSpec


class BuildContext(BaseModel):
    """
    Holds all state during a single build pass.

    The generator resolves the footprint and its levels, phases append
    walls, openings and the roof, and the wall classifier records which
    walls carry the roof profile and the extrusion span.
    """
    # Input
    document: ModelDocument
    params: BuildParams
    config: BuildConfig = Field(default_factory=BuildConfig)
    footprint: FootprintSpec

    # Analysis results (populated by the wall classifier)
    profile_wall_index: int | None = None
    extrusion_wall_index: int | None = None

    # Output (populated by phases)
    walls: list[Wall] = []
    openings: list[OpeningPlacement] = []
    roof: Roof | None = None

    @property
    def base_level(self) -> Level:
        return self.footprint.base_level

    @property
    def top_level(self) -> Level:
        return self.footprint.top_level

    def add_opening(self, opening: OpeningPlacement) -> None:
        self.openings.append(opening)
