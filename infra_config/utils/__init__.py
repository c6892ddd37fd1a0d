"""
Utility functions for resource naming.

Provides naming conventions, registry name normalization and tag sets.
"""

from infra_config.utils.naming import apply_naming, normalize_for_registry
from infra_config.utils.tags import resource_tags, stage_tags

__all__ = [
    "apply_naming",
    "normalize_for_registry",
    "resource_tags",
    "stage_tags",
]
