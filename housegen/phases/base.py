"""A build phase creates one kind of element in the document.

The walls phase must come first; openings and the roof read the walls it
leaves on the context. Each phase opens its own transaction, so a failing
phase commits nothing.
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from housegen.models.context import BuildContext


class BuildPhase(ABC):
    """
    One step of the walls, openings, roof sequence.

    `applies()` is checked just before `run()`, against whatever the
    earlier phases have already put on the context.
    """

    # Lower priority = runs first. Default 100.
    priority: int = 100

    # IDs of phases that must run before this one.
    dependencies: list[str] = []

    @abstractmethod
    def get_id(self) -> str:
        """Unique identifier for this phase (e.g., 'roof.extrusion_gable')."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        """Human-readable name (e.g., 'Extrusion Gable Roof')."""
        ...

    @abstractmethod
    def applies(self, context: BuildContext) -> bool:
        """Return True if this phase should run for the given context."""
        ...

    @abstractmethod
    def run(self, context: BuildContext) -> None:
        """
        Create this phase's elements in the document and record them
        on the context.

        Must either commit everything it creates or nothing.
        """
        ...
