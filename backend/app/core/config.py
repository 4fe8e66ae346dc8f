from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # MongoDB Configuration
    MONGODB_URI: str = "mongodb://localhost:27017"
    MONGODB_DB_NAME: str = "order_management"

    # JWT Configuration
    JWT_SECRET_KEY: str
    JWT_ALGORITHM: str = "HS256"
    JWT_ISSUER: str = "Order Management"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 1440  # 24 hours

    # Rate Limiting
    RATE_LIMIT_PER_MINUTE: int = 3
    RATE_LIMIT_WINDOW_SECONDS: int = 60
    RATE_LIMIT_IDLE_SECONDS: int = 600  # Evict clients idle for 10 minutes
    RATE_LIMIT_CLEANUP_INTERVAL_SECONDS: int = 300

    # Application Settings
    BACKEND_CORS_ORIGINS: List[str] = ["*"]
    API_V1_PREFIX: str = "/api"
    PROJECT_NAME: str = "Order Management API"
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
