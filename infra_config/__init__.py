"""
Configuration resolution and resource naming for ECS deployments.

This package resolves a deployable application's configuration per stage:
- Merges the default configuration with stage-specific overrides
- Derives every AWS resource name (ECR, ECS, ALB, CloudWatch, security groups)
- Resolves naming collisions deterministically
- Validates settings and names against AWS naming rules before provisioning
"""

from infra_config.core.resolver import ConfigurationResolver
from infra_config.models.resolved import ResolvedConfiguration, ResourceNameSet

__all__ = [
    "ConfigurationResolver",
    "ResolvedConfiguration",
    "ResourceNameSet",
]
