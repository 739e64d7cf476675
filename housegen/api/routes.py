"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter

from housegen.models import ModelDocument
from housegen.services.model_service import ModelService
from housegen.api.schemas import (
    BuildRequest, BuildResponse, CatalogEntry, PhaseInfo,
)

router = APIRouter()

# Shared service instance
_service = ModelService()


@router.post("/build", response_model=BuildResponse)
def build_model(request: BuildRequest) -> BuildResponse:
    """Generate the building into a fresh document."""
    document: ModelDocument = _service.document_factory()
    model = _service.build(request.params, request.config, document)

    return BuildResponse(
        model=model,
        element_count=document.element_count,
    )


@router.get("/phases", response_model=list[PhaseInfo])
def list_phases() -> list[PhaseInfo]:
    """List all registered build phases."""
    return [PhaseInfo(**p) for p in _service.list_phases()]


@router.get("/catalog", response_model=list[CatalogEntry])
def list_catalog() -> list[CatalogEntry]:
    """List the types available in a default document."""
    return [
        CatalogEntry(name=t.name, family_name=t.family_name, category=t.category.value)
        for t in _service.list_catalog()
    ]


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
