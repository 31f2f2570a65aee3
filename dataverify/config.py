from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from dataverify.modes import ValidationMode


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for production (structured JSON), False for dev (colored)

    # Translation
    DEFAULT_LOCALE: str = "en"
    FALLBACK_LOCALE: str = "en"

    # Engine
    VALIDATION_MODE: ValidationMode = ValidationMode.COLLECT_ALL
    ALLOW_RULE_OVERRIDE: bool = False  # Duplicate registration replaces instead of raising

    model_config = SettingsConfigDict(env_prefix="DATAVERIFY_", env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()
