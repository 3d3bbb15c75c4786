from config import settings
from .schemas import HealthResponse

async def get_health_status() -> HealthResponse:
    """
    Health check service
    """
    return HealthResponse(
        message="Server is running!",
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
    )
