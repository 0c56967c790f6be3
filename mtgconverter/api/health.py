"""
Health check endpoints.

Liveness answers as long as the process runs; readiness also requires the
session storage backend to answer a read.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from mtgconverter.api.dependencies import get_workspace
from mtgconverter.services.workspace import ConverterWorkspace

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    status: str
    storage: str | None = None


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Liveness probe. Does not touch session storage."""
    return HealthResponse(status="healthy")


@router.get(
    "/ready",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse}},
)
async def ready(
    response: Response,
    workspace: Annotated[ConverterWorkspace, Depends(get_workspace)],
) -> HealthResponse:
    """Readiness probe. Returns 503 while session storage cannot be read."""
    if await workspace.storage_reachable():
        return HealthResponse(status="ready", storage="connected")

    response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return HealthResponse(status="not ready", storage="disconnected")
