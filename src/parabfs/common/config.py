"""Application configuration using Pydantic Settings.

Loads configuration from environment variables and .env files.
Each section carries its own environment variable prefix.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TraversalSettings(BaseSettings):
    """Concurrent BFS fan-out configuration."""

    model_config = SettingsConfigDict(env_prefix="TRAVERSAL_")

    # Number of pool workers used when a caller does not pass one
    worker_count: int = Field(default=4, ge=1, le=256)


class GeneratorSettings(BaseSettings):
    """Random graph generator configuration."""

    model_config = SettingsConfigDict(env_prefix="GENERATOR_")

    seed: int | None = None
    default_vertex_count: int = Field(default=100, ge=0)


class APISettings(BaseSettings):
    """HTTP API configuration."""

    model_config = SettingsConfigDict(env_prefix="API_")

    host: str = "0.0.0.0"
    port: int = 8000
    workers: int = Field(default=1, ge=1, le=32)
    reload: bool = False

    # Largest matrix accepted in a single request
    max_vertices: int = Field(
        default=2000, ge=1, le=20000,
        description="Maximum vertex count accepted by traversal and generator endpoints",
    )


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["json", "console"] = "json"
    include_timestamp: bool = True
    include_caller: bool = False


class Settings(BaseSettings):
    """Main application settings aggregating all configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # Application info
    app_name: str = "ParaBFS"
    app_version: str = "0.1.0"
    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = False

    # Sub-configurations
    traversal: TraversalSettings = Field(default_factory=TraversalSettings)
    generator: GeneratorSettings = Field(default_factory=GeneratorSettings)
    api: APISettings = Field(default_factory=APISettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings singleton."""
    return Settings()
