"""
Configuration module for the resolution engine.

Provides configuration types, the naming rule catalog, default tables,
and engine settings. The Pulumi stack stage loader lives in
``infra_config.configs.environment`` and is imported explicitly by stack code.
"""

from infra_config.configs.base import (
    ApplicationOverrides,
    BaseConfiguration,
    BuildOverrides,
    NamingConvention,
    StageOverride,
)
from infra_config.configs.constants import (
    LENGTH_LIMITS,
    NAMING_RULES,
    RESERVED_PREFIXES,
    CollisionStrategy,
    ResourceClass,
)
from infra_config.configs.defaults import DEFAULT_APPLICATION_CONFIG, STAGE_OVERRIDES
from infra_config.configs.settings import EngineSettings, get_settings

__all__ = [
    "ApplicationOverrides",
    "BaseConfiguration",
    "BuildOverrides",
    "NamingConvention",
    "StageOverride",
    "LENGTH_LIMITS",
    "NAMING_RULES",
    "RESERVED_PREFIXES",
    "CollisionStrategy",
    "ResourceClass",
    "DEFAULT_APPLICATION_CONFIG",
    "STAGE_OVERRIDES",
    "EngineSettings",
    "get_settings",
]
