"""
Application Configuration

Centralized configuration management using Pydantic settings.
Handles environment variables, secrets, and application settings.
"""

from typing import List, Optional
from functools import lru_cache

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Application
    APP_NAME: str = "Jobtrack"
    VERSION: str = "1.0.0"
    DEBUG: bool = Field(False)
    ENVIRONMENT: str = Field("development")
    HOST: str = Field("0.0.0.0")
    PORT: int = Field(8000)
    LOG_LEVEL: str = Field("INFO")
    LOG_FILE: Optional[str] = Field(None, description="Optional JSON log file path")

    # Security
    SECRET_KEY: str = Field(...)
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(60 * 24)
    ALGORITHM: str = "HS256"
    DEMO_USER_ID: Optional[str] = Field(None, description="Read-only demo account")

    # Database
    DATABASE_URL: str = Field("sqlite+aiosqlite:///./jobtrack.db")
    DATABASE_POOL_SIZE: int = Field(5)
    DATABASE_MAX_OVERFLOW: int = Field(10)

    # Listing and statistics
    DEFAULT_PAGE_LIMIT: int = Field(10, ge=1)
    MAX_PAGE_LIMIT: Optional[int] = Field(None, ge=1, description="Upper bound for ?limit=, unset means uncapped")
    STATS_MONTHS: int = Field(6, ge=1)

    # CORS - simplified to avoid parsing issues
    CORS_ORIGINS: str = Field("http://localhost:3000,http://127.0.0.1:3000")
    CORS_CREDENTIALS: bool = Field(True)
    CORS_METHODS: str = Field("*")
    CORS_HEADERS: str = Field("*")

    def get_cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    def get_cors_methods_list(self) -> List[str]:
        """Get CORS methods as a list."""
        if self.CORS_METHODS == "*":
            return ["*"]
        return [method.strip() for method in self.CORS_METHODS.split(",")]

    def get_cors_headers_list(self) -> List[str]:
        """Get CORS headers as a list."""
        if self.CORS_HEADERS == "*":
            return ["*"]
        return [header.strip() for header in self.CORS_HEADERS.split(",")]

    class Config:
        """Pydantic configuration."""
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
