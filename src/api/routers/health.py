"""Health check — no auth required."""

from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel

from src.api.app import API_VERSION

router = APIRouter(prefix="/api/v1", tags=["health"])


class HealthResponse(BaseModel):
    status: str
    version: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness only: upstream providers are not probed."""
    return HealthResponse(status="ok", version=API_VERSION)
