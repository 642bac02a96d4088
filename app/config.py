"""Configuration management for the application."""
from typing import List
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Configuration
    API_TITLE: str = "Answer Rendering Service"
    API_VERSION: str = "1.0.0"
    DEBUG: bool = False
    CORS_ALLOW_ORIGINS: List[str] = ["*"]

    # Logging
    LOG_LEVEL: str = "INFO"

    # Response normalization
    MAX_RECONCILE_DEPTH: int = 10  # nested "data"/list wrappers followed before stringifying

    # Exports
    EXPORT_FILENAME: str = "chat-response"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Ignore any extra env vars not defined here


settings = Settings()
