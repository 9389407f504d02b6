from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="AS_PYDANTIC_",
        env_file=".env",
        extra="ignore",
    )

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for structured JSON, False for colored console output

    # Integration
    FACTORY_NAME: str = "from_model"  # attribute installed on the pydantic namespace

    # Synthesis
    STRICT_PRIMITIVES: bool = True  # no str->int style coercion for primitive types
    EXTRA_KEYS: Literal["ignore", "forbid", "allow"] = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
