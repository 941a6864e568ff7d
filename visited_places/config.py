"""Application configuration using Pydantic Settings.

This module centralizes all configuration values that may vary between environments.
Values can be overridden via environment variables or .env file.
"""
from functools import lru_cache
from typing import List

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        # Allow extra fields from .env that aren't defined here
        extra="ignore",
    )

    # ===== Runtime Mode =====
    # Enables diagnostic logging for map URL parsing
    DEBUG: bool = False
    APP_TITLE: str = "Visited Places"
    APP_VERSION: str = "0.1.0"

    # ===== Persistence =====
    USE_DB_REPOS: bool = False
    DATABASE_URL: str = "sqlite:///./visited_places.db"

    # ===== CORS =====
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    # ===== Pagination Defaults =====
    DEFAULT_PAGE_SIZE: int = 20
    MAX_PAGE_SIZE: int = 100

    # ===== Map Preview =====
    MAP_DEFAULT_ZOOM: int = 15
    MAP_LINK_TEMPLATE: str = "https://mapy.cz/zakladni?x={lng}&y={lat}&z={zoom}"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure singleton pattern - settings are loaded once.
    """
    return Settings()


# Global settings instance for easy import
settings = get_settings()
