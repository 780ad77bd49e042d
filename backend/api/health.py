"""
Health check endpoint.
Polled by the orchestrator; performs no dependency checks.
"""
from fastapi import APIRouter
from backend.models import HealthResponse

router = APIRouter()

@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    return HealthResponse.healthy()
