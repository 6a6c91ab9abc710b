"""Configuration management for the image host."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Every field can be set through an ``IMAGEHOST_`` prefixed variable or a
    ``.env`` file, e.g. ``IMAGEHOST_MONGO_URL`` or ``IMAGEHOST_CACHE_TTL_SECONDS``.
    """

    model_config = SettingsConfigDict(
        env_prefix="IMAGEHOST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # MongoDB
    mongo_url: str = "mongodb://127.0.0.1:27017"
    mongo_database: str = "imagecrudzod"
    mongo_collection: str = "images"
    mongo_timeout_ms: int = Field(default=5000, ge=1)

    # Server
    host: str = "0.0.0.0"
    port: int = 5000

    # Read cache
    cache_ttl_seconds: float = 300.0

    # CORS - comma-separated for env var compatibility
    cors_origins_str: str = Field(default="*", validation_alias="IMAGEHOST_CORS_ALLOWED_ORIGINS")

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    @field_validator("cache_ttl_seconds")
    @classmethod
    def validate_cache_ttl(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("cache_ttl_seconds must be positive")
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {v}")
        return level

    @property
    def cors_allowed_origins(self) -> list[str]:
        """CORS allowed origins as a list."""
        return [origin.strip() for origin in self.cors_origins_str.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
