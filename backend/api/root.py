from fastapi import APIRouter
from backend.models import ApiStatusResponse

router = APIRouter()


@router.get("/api", response_model=ApiStatusResponse)
async def api_status() -> ApiStatusResponse:
    """Report that the backend is up"""
    return ApiStatusResponse.running()
