from fastapi import APIRouter
from .schemas import HealthResponse
from .services import get_health_status

router = APIRouter(tags=["Health"])

@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint
    """
    return await get_health_status()
