"""
Engine models.

Resolved output types and validation outcome schemas.
"""

from infra_config.models.resolved import (
    RESOURCE_NAME_CLASSES,
    ResolvedConfiguration,
    ResourceNameSet,
)
from infra_config.models.validation import (
    DetailedValidationOutcome,
    TypedError,
    ValidationErrorKind,
    ValidationOutcome,
)

__all__ = [
    "RESOURCE_NAME_CLASSES",
    "ResolvedConfiguration",
    "ResourceNameSet",
    "DetailedValidationOutcome",
    "TypedError",
    "ValidationErrorKind",
    "ValidationOutcome",
]
