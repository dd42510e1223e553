"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App
    app_name: str = "Business Plan Scoring Engine"
    debug: bool = False
    log_level: str = "INFO"

    # Presentation language of result messages ("es" or "en")
    locale: str = "es"

    # Scoring
    scoring_weights_file: Optional[str] = None
    strict_submission_keys: bool = True

    # HTTP
    cors_origins: List[str] = ["*"]

    @property
    def effective_log_level(self) -> str:
        """DEBUG always wins when debug mode is on"""
        return "DEBUG" if self.debug else self.log_level.upper()

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
