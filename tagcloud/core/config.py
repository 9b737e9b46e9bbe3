"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Invalid combinations (e.g. redis cache without a
host, cloud size below 1) are rejected at load time.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings have defaults; validate_settings checks the values that
    the cloud builder and the cache backend factory rely on.
    """

    # App
    app_name: str = "tagcloud"
    app_version: str = "0.1.0"
    debug: bool = False

    # Database (content store holding taxonomy associations)
    database_url: str = ""
    database_echo: bool = False
    db_pool_size: int | None = None
    db_command_timeout: int | None = None

    # Content catalog: YAML with contenttypes and taxonomy sections
    catalog_path: str = "catalog.yml"

    # Tag cloud
    tagcloud_size: int = 20
    base_url: str = "/"

    # Cache backend: "memory" (in-process) or "redis"
    cache_backend: str = "memory"
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    redis_password: SecretStr | None = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_settings(self) -> "Settings":
        """Validate cloud size and cache backend selection."""
        if self.tagcloud_size < 1:
            raise ValueError(
                f"TAGCLOUD_SIZE must be a positive integer, got: {self.tagcloud_size}"
            )
        if self.cache_backend == "redis":
            if not self.redis_host:
                raise ValueError(
                    "REDIS_HOST is required when cache_backend is 'redis'. "
                    "Set in environment or .env file."
                )
        elif self.cache_backend != "memory":
            raise ValueError(
                f"cache_backend must be 'memory' or 'redis', got: {self.cache_backend!r}"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
