"""
Resource naming conventions for stage-specific AWS resource names.

Follows pattern: {prefix}{separator}{base}{separator}{suffix}, where the
stage name fills prefix and/or suffix depending on the convention.
"""

import re

from infra_config.configs.base import NamingConvention

_REGISTRY_INVALID_CHARS = re.compile(r"[^a-z0-9._/-]")
_REGISTRY_SEPARATOR_RUNS = re.compile(r"[._-]{2,}")


def apply_naming(base: str, stage: str, convention: NamingConvention) -> str:
    """
    Generate a stage-qualified resource name.

    Args:
        base: Base identifier (e.g., 'svc-service')
        stage: Deployment stage; empty or blank leaves the name unqualified
        convention: Prefix/suffix/separator policy

    Returns:
        Stage-qualified name
    """
    if not stage or not stage.strip():
        return base

    name = base
    if convention.use_stage_prefix:
        name = f"{stage}{convention.separator}{name}"
    if convention.use_stage_suffix:
        name = f"{name}{convention.separator}{stage}"
    return name


def normalize_for_registry(name: str) -> str:
    """
    Rewrite a name into a legal ECR repository name.

    Lowercases, replaces illegal characters with hyphens, strips leading and
    trailing separators, then collapses separator runs. Idempotent.

    Args:
        name: Original name

    Returns:
        Normalized ECR-compliant name
    """
    normalized = _REGISTRY_INVALID_CHARS.sub("-", name.lower())
    normalized = normalized.strip("._-")
    return _REGISTRY_SEPARATOR_RUNS.sub("-", normalized)
