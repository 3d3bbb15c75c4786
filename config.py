import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

class Settings:
    """Application settings"""
    
    # Application Configuration
    APP_ENV: str = os.getenv("APP_ENV", "development")
    APP_VERSION: str = os.getenv("APP_VERSION", "1.0.0")
    DEBUG: bool = os.getenv("DEBUG", "true").lower() == "true"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    
    # Frontend URLs (comma-separated for several origins)
    FRONTEND_URL: str = os.getenv("FRONTEND_URL", "http://localhost:3000")
    
    @classmethod
    def get_cors_origins(cls) -> list:
        """Get allowed CORS origins"""
        return [origin.strip() for origin in cls.FRONTEND_URL.split(",") if origin.strip()]

# Create settings instance
settings = Settings()
