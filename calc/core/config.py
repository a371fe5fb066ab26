"""
Calculator configuration.

Settings are read from CALC_* environment variables or a local .env file.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Calculator settings"""

    model_config = SettingsConfigDict(
        env_prefix="CALC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Read loop
    PROMPT: str = ">>> "

    # Output
    PRECISION: Optional[int] = Field(default=None, ge=1, le=17)

    # Grammar
    ALLOW_TRAILING: bool = False

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: Literal["text", "json"] = "text"
    LOG_FILE: Optional[str] = None


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
