from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="RAPIDCHECK_", env_file=".env", extra="ignore")

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for structured JSON, False for colored console output

    # Collect-all validation
    MAX_ERRORS: int = Field(50, ge=1)


@lru_cache
def get_settings() -> Settings:
    return Settings()
