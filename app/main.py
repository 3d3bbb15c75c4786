from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.nesting.routes import router as nesting_router
from app.health.routes import router as health_router
from config import settings
import logging

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Nesting Sample API",
    description="FastAPI backend exposing the nesting sample endpoint",
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
)

# Add CORS middleware to allow requests from the frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(nesting_router, prefix="/api/NestingSample")
app.include_router(health_router)

logger.info(f"Nesting Sample API {settings.APP_VERSION} starting in {settings.APP_ENV} mode")

@app.get("/")
async def root():
    return {"message": f"Welcome to Nesting Sample API {settings.APP_VERSION}"}

if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="127.0.0.1", port=8000, reload=settings.DEBUG)
