"""
Configuration settings for the Property Manager backend.
"""
from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Flat-file storage (one JSON array per collection)
    data_dir: Path = Path("data")
    seed_sample_data: bool = False

    # Local server (spawned by the desktop shell)
    host: str = "127.0.0.1"
    port: int = 3000
    log_level: str = "INFO"

    # CORS for the web UI dev server
    cors_origins: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    # Login tokens
    jwt_secret: str = "property-manager-jwt-secret-change-me"
    jwt_expiration_seconds: int = 86400  # 24 hours

    class Config:
        env_prefix = "PROPERTY_MANAGER_"
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
