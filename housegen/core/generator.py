"""Main building generator — orchestrates level lookup and build phases."""

from __future__ import annotations
import logging
from contextlib import nullcontext

from housegen.models import (
    BuildConfig, BuildContext, BuildingModel, BuildParams, FootprintSpec,
    ModelDocument,
)
from housegen.core.registry import PhaseRegistry

logger = logging.getLogger(__name__)


class BuildingGenerator:
    """
    Stateless building generator.

    Takes a document + params, resolves the levels, runs the enabled
    phases in order (each in its own transaction) and returns the
    resulting BuildingModel.
    """

    def __init__(self, registry: PhaseRegistry) -> None:
        self.registry = registry

    def generate(
        self,
        document: ModelDocument,
        params: BuildParams,
        config: BuildConfig | None = None,
    ) -> BuildingModel:
        if config is None:
            config = BuildConfig()

        # Build context
        context = BuildContext(
            document=document,
            params=params,
            config=config,
            footprint=FootprintSpec(
                width=params.width_mm,
                depth=params.depth_mm,
                base_level=document.require_level(params.base_level_name),
                top_level=document.require_level(params.top_level_name),
            ),
        )

        # Phases run strictly in sequence; with atomic_build a failure in
        # any of them also undoes the phases that already committed.
        outer = document.transaction("Build model") if config.atomic_build else nullcontext()
        with outer:
            for phase in self.registry.get_enabled_phases(context):
                if not phase.applies(context):
                    logger.debug("Skipping phase %s", phase.get_id())
                    continue
                logger.info("Running phase %s", phase.get_id())
                phase.run(context)

        return BuildingModel(
            walls=context.walls,
            openings=context.openings,
            roof=context.roof,
        )
