from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import PERPLEXITY_CONFIG


class Settings(BaseSettings):
    """Server-side defaults for the HTTP service, loaded from the environment."""
    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore')

    PERPLEXITY_API_KEY: Optional[str] = None
    PERPLEXITY_MODEL: str = PERPLEXITY_CONFIG.DEFAULT_MODEL
    PERPLEXITY_SYSTEM_MESSAGE: str = PERPLEXITY_CONFIG.DEFAULT_SYSTEM_MESSAGE


@lru_cache
def get_settings() -> Settings:
    return Settings()
