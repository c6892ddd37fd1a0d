"""
Naming rule catalog for generated AWS resource names.

Contains per-resource-class patterns, length limits, reserved prefixes,
and default tags.
"""

import enum
import re
from dataclasses import dataclass
from typing import Final


class ResourceClass(str, enum.Enum):
    """Category of cloud object with its own naming rules."""

    REGISTRY = "registry"
    CLUSTER = "cluster"
    SERVICE = "service"
    TASK_FAMILY = "task_family"
    LOAD_BALANCER = "load_balancer"
    TARGET_GROUP = "target_group"
    LOG_GROUP = "log_group"
    SECURITY_GROUP = "security_group"


class CollisionStrategy(str, enum.Enum):
    """How a colliding name is made unique."""

    NUMERIC_SUFFIX = "NUMERIC_SUFFIX"
    HASH_SUFFIX = "HASH_SUFFIX"
    ERROR = "ERROR"


# Alphanumeric and hyphens, cannot start or end with a hyphen
GENERAL_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[a-zA-Z0-9][a-zA-Z0-9-]*[a-zA-Z0-9]$")

# Lowercase segments joined by . _ - and optionally namespaced with /
REGISTRY_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^[a-z0-9]+(?:[._-][a-z0-9]+)*(?:/[a-z0-9]+(?:[._-][a-z0-9]+)*)*$"
)

LOG_GROUP_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[a-zA-Z0-9._/-]+$")

# Maximum name length in characters
LENGTH_LIMITS: Final[dict[ResourceClass, int]] = {
    ResourceClass.REGISTRY: 256,
    ResourceClass.CLUSTER: 255,
    ResourceClass.SERVICE: 255,
    ResourceClass.TASK_FAMILY: 255,
    ResourceClass.LOAD_BALANCER: 32,
    ResourceClass.TARGET_GROUP: 32,
    ResourceClass.LOG_GROUP: 512,
    ResourceClass.SECURITY_GROUP: 255,
}

# Warn (never fail) when a generated name starts with one of these
RESERVED_PREFIXES: Final[tuple[str, ...]] = ("aws", "amazon", "ecs", "ec2")

LOG_GROUP_PREFIX: Final[str] = "/aws/ecs/"

# Default tags applied to all resources
DEFAULT_TAGS: Final[dict[str, str]] = {
    "ManagedBy": "pulumi",
}

DEPLOYMENT_TYPE: Final[str] = "ECS-Fargate"


@dataclass(frozen=True)
class NamingRule:
    """Validation pattern and length limit for one resource class."""
    pattern: re.Pattern[str]
    max_length: int
    description: str

    def matches(self, name: str) -> bool:
        """Check the pattern and the length limit together."""
        return len(name) <= self.max_length and self.pattern.match(name) is not None


_GENERAL_DESCRIPTION = (
    "Name must contain only alphanumeric characters and hyphens, "
    "and cannot start or end with a hyphen"
)

NAMING_RULES: Final[dict[ResourceClass, NamingRule]] = {
    ResourceClass.REGISTRY: NamingRule(
        REGISTRY_PATTERN,
        LENGTH_LIMITS[ResourceClass.REGISTRY],
        "ECR repository name must contain only lowercase letters, numbers, "
        "hyphens, underscores, periods, and forward slashes",
    ),
    ResourceClass.LOG_GROUP: NamingRule(
        LOG_GROUP_PATTERN,
        LENGTH_LIMITS[ResourceClass.LOG_GROUP],
        "Log group name contains invalid characters",
    ),
    **{
        resource_class: NamingRule(GENERAL_PATTERN, LENGTH_LIMITS[resource_class], _GENERAL_DESCRIPTION)
        for resource_class in (
            ResourceClass.CLUSTER,
            ResourceClass.SERVICE,
            ResourceClass.TASK_FAMILY,
            ResourceClass.LOAD_BALANCER,
            ResourceClass.TARGET_GROUP,
            ResourceClass.SECURITY_GROUP,
        )
    },
}


def has_reserved_prefix(name: str) -> bool:
    """Check whether a name starts with a reserved prefix, ignoring case."""
    lowered = name.lower()
    return any(lowered.startswith(prefix) for prefix in RESERVED_PREFIXES)
