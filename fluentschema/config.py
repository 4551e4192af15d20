from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for structured JSON output, False for colored console output

    # JSON-Schema compiler
    SCHEMA_INDENT: int = 2
    JSON_SCHEMA_DIALECT: str = ""  # emitted as "$schema" on compiled documents when set

    model_config = SettingsConfigDict(env_prefix="FLUENTSCHEMA_", env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
