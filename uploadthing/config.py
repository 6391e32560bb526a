# config.py
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from uploadthing.models.file import Region


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="UPLOADTHING_",
        env_file=Path(__file__).parents[1] / ".env",
        extra="ignore",
    )

    API_KEY: Optional[str] = None
    APP_ID: Optional[str] = None
    REGION: Region = Region.US_WEST_2

    API_URL: str = "https://api.uploadthing.com"
    INGEST_HOST: str = "ingest.uploadthing.com"
    PUBLIC_HOST: str = "utfs.io"

    TIMEOUT: float = 30.0  # seconds
    PRESIGN_EXPIRES_IN: int = 3600  # seconds


@lru_cache
def get_settings() -> Settings:
    return Settings()
