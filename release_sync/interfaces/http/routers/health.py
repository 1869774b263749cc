"""Liveness endpoint."""

from fastapi import APIRouter

from release_sync import __version__
from release_sync.schemas import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse, summary="Liveness probe")
async def health() -> HealthResponse:
    return HealthResponse(version=__version__)
