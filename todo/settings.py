from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App
    app_env: str = "dev"
    log_level: str = "INFO"

    # Database logging
    log_database: bool = True
    log_database_level: str = "WARNING"
    # "stdout", "stderr", "off" or a file path
    log_database_target: str = "stdout"

    # Infra
    database_url: str = "postgresql://todo:todo@db:5432/todo"
    redis_url: str = "redis://redis:6379/0"

    # Cache
    query_cache_ttl_seconds: int = 300

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
