"""Wall classification — which walls run along the long and short axes."""

from __future__ import annotations
import logging

from housegen.errors import GeometryError
from housegen.models import BuildContext, Wall, WallAxis


logger = logging.getLogger(__name__)

TOLERANCE = 1e-6  # Internal units; lengths closer than this are equal


class WallClassifier:
    """Tags walls as long-axis or short-axis by comparing their lengths."""

    def analyze(self, context: BuildContext) -> None:
        """Classify the context's walls and record the roof wall indices."""
        profile, extrusion = self.classify(context.walls)
        context.profile_wall_index = profile
        context.extrusion_wall_index = extrusion

    def classify(self, walls: list[Wall]) -> tuple[int, int]:
        """
        Set `axis` on every wall.

        Returns (profile_index, extrusion_index): the first short wall
        carries the gable cross-section, the first long wall gives the
        extrusion span. A square footprint has no short wall; the walls
        then alternate long/short starting with index 0.
        """
        if len(walls) < 2:
            raise GeometryError(f"Need at least two walls to classify, got {len(walls)}")

        lengths = [w.length for w in walls]
        longest = max(lengths)

        axes = [
            WallAxis.LONG if longest - ln <= TOLERANCE else WallAxis.SHORT
            for ln in lengths
        ]
        if WallAxis.SHORT not in axes:
            axes = [WallAxis.LONG if i % 2 == 0 else WallAxis.SHORT for i in range(len(walls))]

        for wall, axis in zip(walls, axes):
            wall.axis = axis

        profile = axes.index(WallAxis.SHORT)
        extrusion = axes.index(WallAxis.LONG)
        logger.debug("Walls classified %s; profile=%d extrusion=%d",
                     [a.value for a in axes], profile, extrusion)
        return profile, extrusion
