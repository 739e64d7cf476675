"""FastAPI application factory."""

from __future__ import annotations
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from housegen.api.routes import router
from housegen.errors import (
    CatalogLookupError, GeometryError, HouseGenError, UnitConversionError,
)

logger = logging.getLogger(__name__)


def _status_for(exc: HouseGenError) -> int:
    if isinstance(exc, CatalogLookupError):
        return 404
    if isinstance(exc, (GeometryError, UnitConversionError)):
        return 422
    return 500


async def housegen_error_handler(request: Request, exc: HouseGenError) -> JSONResponse:
    status = _status_for(exc)
    logger.warning("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status,
        content={"error": type(exc).__name__, "detail": str(exc)},
    )


def create_app() -> FastAPI:
    app = FastAPI(
        title="House Generator",
        description="Parametric walls, openings and gable roof from footprint dimensions",
        version="0.1.0",
    )

    # CORS — allow any local front end
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(HouseGenError, housegen_error_handler)
    app.include_router(router, prefix="/api")

    return app


app = create_app()
