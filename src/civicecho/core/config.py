"""Configuration management for CivicEcho."""

from typing import Optional

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings."""

    # Logging
    log_level: str = Field("INFO", description="Logging level")

    # Processing
    processing_step: float = Field(
        0.1, ge=0.0, description="Cosmetic delay in seconds between processed comments"
    )
    random_seed: Optional[int] = Field(
        None, description="Seed for the neutral-confidence random source"
    )

    # UI
    preview_rows: int = Field(5, ge=1, description="Rows shown in the upload preview")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


# Global settings instance
settings = Settings()
