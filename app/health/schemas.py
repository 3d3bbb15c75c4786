from pydantic import BaseModel

class HealthResponse(BaseModel):
    message: str
    status: str = "healthy"
    version: str
    environment: str
