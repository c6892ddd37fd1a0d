"""
Engine settings.

Tunables for name generation and stage resolution, loaded from
environment variables prefixed with ``INFRA_CONFIG_`` or a ``.env`` file.

Dependencies: pydantic_settings
System role: Runtime configuration for the resolution engine
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from infra_config.configs.constants import CollisionStrategy


class EngineSettings(BaseSettings):
    """Settings shared by the name generator and the configuration resolver."""

    model_config = SettingsConfigDict(
        env_prefix="INFRA_CONFIG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    collision_strategy: CollisionStrategy = Field(
        default=CollisionStrategy.NUMERIC_SUFFIX,
        description="Strategy for resolving naming conflicts (NUMERIC_SUFFIX, HASH_SUFFIX, ERROR)",
    )
    max_collision_attempts: int = Field(
        default=10,
        ge=1,
        description="Maximum attempts to resolve a naming conflict",
    )
    check_reserved_prefixes: bool = Field(
        default=True,
        description="Warn when a generated name starts with a reserved prefix",
    )
    allow_unknown_stage: bool = Field(
        default=True,
        description="Fall back to the base configuration for stages without overrides",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )


@lru_cache
def get_settings() -> EngineSettings:
    """
    Get engine settings singleton.

    Environment variables are read once, on first call.

    Returns:
        EngineSettings: Engine settings instance
    """
    return EngineSettings()
