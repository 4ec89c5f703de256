"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

DEFAULT_SEED_DATA_DIR = Path(__file__).parent / "seeders" / "data"


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # MongoDB
    mongo_uri: str = "mongodb://localhost:27017"

    # JWT Configuration
    jwt_secret_key: str = "CHANGE_ME_IN_PRODUCTION_USE_STRONG_SECRET"
    jwt_algorithm: str = "HS256"
    jwt_access_token_expire_minutes: int = 60

    # CORS
    allowed_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]

    # Logging
    log_level: str = "INFO"

    # Seeder fixtures (kpiv2.*.json)
    seed_data_dir: Path = DEFAULT_SEED_DATA_DIR

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
