"""``GET /health`` — liveness check (no auth)."""

from __future__ import annotations

from fastapi import APIRouter, Request

from octocatalog import __version__
from octocatalog.models import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(request: Request) -> HealthResponse:
    return HealthResponse(
        status="ok",
        catalog_entries=len(request.app.state.catalog),
        version=__version__,
    )
