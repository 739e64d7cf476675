"""High-level building service — facade for the API layer."""

from __future__ import annotations

from housegen.models import (
    BuildingModel, BuildConfig, BuildParams, CatalogType, ModelDocument,
    create_default_document,
)
from housegen.core.generator import BuildingGenerator
from housegen.core.registry import PhaseRegistry, create_default_registry


class ModelService:
    """Supplies the document, delegates to the generator."""

    def __init__(
        self,
        registry: PhaseRegistry | None = None,
        document_factory=create_default_document,
    ) -> None:
        self.registry = registry or create_default_registry()
        self.generator = BuildingGenerator(self.registry)
        self.document_factory = document_factory

    def build(
        self,
        params: BuildParams | None = None,
        config: BuildConfig | None = None,
        document: ModelDocument | None = None,
    ) -> BuildingModel:
        """Build into `document`, or into a fresh default document."""
        if params is None:
            params = BuildParams()
        if config is None:
            config = BuildConfig()
        if document is None:
            document = self.document_factory()

        return self.generator.generate(document, params, config)

    def list_phases(self) -> list[dict[str, str]]:
        return [
            {"id": p.get_id(), "name": p.get_name()}
            for p in self.registry.list_phases()
        ]

    def list_catalog(self) -> list[CatalogType]:
        return list(self.document_factory().catalog.types)
