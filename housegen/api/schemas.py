"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel

from housegen.models import BuildConfig, BuildingModel, BuildParams


class BuildRequest(BaseModel):
    """Request body for the /build endpoint."""
    params: BuildParams = BuildParams()
    config: BuildConfig = BuildConfig()


class BuildResponse(BaseModel):
    """Response from the /build endpoint."""
    model: BuildingModel
    element_count: int


class PhaseInfo(BaseModel):
    id: str
    name: str


class CatalogEntry(BaseModel):
    name: str
    family_name: str
    category: str
