"""
Core resolution engine.

Collision resolution, resource name generation, validation and the
stage configuration resolver.
"""

from infra_config.core.collision import resolve_collision, short_hash
from infra_config.core.exceptions import (
    ConfigurationEngineError,
    ConfigurationInvalidError,
    InvalidGeneratedNameError,
    NameTooLongError,
    NamingConflictError,
    NamingError,
    UnknownStageError,
    UnresolvableCollisionError,
)
from infra_config.core.name_generator import NameGenerationContext, ResourceNameGenerator
from infra_config.core.resolver import ConfigurationResolver
from infra_config.core.validation import ConfigurationValidator

__all__ = [
    "resolve_collision",
    "short_hash",
    "ConfigurationEngineError",
    "ConfigurationInvalidError",
    "InvalidGeneratedNameError",
    "NameTooLongError",
    "NamingConflictError",
    "NamingError",
    "UnknownStageError",
    "UnresolvableCollisionError",
    "NameGenerationContext",
    "ResourceNameGenerator",
    "ConfigurationResolver",
    "ConfigurationValidator",
]
