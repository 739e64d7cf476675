"""Phase registry — stores build phases and resolves their run order."""

from __future__ import annotations

from housegen.models.context import BuildContext
from housegen.phases.base import BuildPhase


class PhaseRegistry:
    """Build phases keyed by id.

    Selection honours the config's enabled/disabled lists; order is by
    priority, with a phase's dependencies moved ahead of it.
    """

    def __init__(self) -> None:
        self._phases: dict[str, BuildPhase] = {}

    def register(self, phase: BuildPhase) -> None:
        """Register a build phase."""
        self._phases[phase.get_id()] = phase

    def unregister(self, phase_id: str) -> None:
        """Remove a phase from the registry."""
        self._phases.pop(phase_id, None)

    def get_phase(self, phase_id: str) -> BuildPhase | None:
        return self._phases.get(phase_id)

    def list_phases(self) -> list[BuildPhase]:
        """Return all registered phases."""
        return list(self._phases.values())

    def get_enabled_phases(self, context: BuildContext) -> list[BuildPhase]:
        """
        Return the phases selected by the config, in run order.

        Respects BuildConfig.enabled_phases and disabled_phases.
        `applies()` is left to the caller, since it depends on what
        earlier phases produced.
        """
        config = context.config
        candidates = list(self._phases.values())

        # If enabled_phases is specified, only use those
        if config.enabled_phases:
            candidates = [p for p in candidates if p.get_id() in config.enabled_phases]

        # Remove explicitly disabled phases
        if config.disabled_phases:
            candidates = [p for p in candidates if p.get_id() not in config.disabled_phases]

        # Sort by priority (lower first), then resolve dependencies
        candidates.sort(key=lambda p: p.priority)
        return self._resolve_order(candidates)

    def _resolve_order(self, phases: list[BuildPhase]) -> list[BuildPhase]:
        """Topological sort respecting dependencies."""
        phase_map = {p.get_id(): p for p in phases}
        visited: set[str] = set()
        ordered: list[BuildPhase] = []

        def visit(phase_id: str) -> None:
            if phase_id in visited:
                return
            visited.add(phase_id)
            phase = phase_map.get(phase_id)
            if phase is None:
                return
            for dep_id in phase.dependencies:
                visit(dep_id)
            ordered.append(phase)

        for p in phases:
            visit(p.get_id())

        return ordered


def create_default_registry() -> PhaseRegistry:
    """Create a registry with walls, door, windows and roof."""
    from housegen.phases.walls import ExteriorWallsPhase
    from housegen.phases.openings import DoorPhase, WindowsPhase
    from housegen.phases.roof import ExtrusionRoofPhase

    registry = PhaseRegistry()
    registry.register(ExteriorWallsPhase())
    registry.register(DoorPhase())
    registry.register(WindowsPhase())
    registry.register(ExtrusionRoofPhase())
    return registry
