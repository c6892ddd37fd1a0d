"""
Resolved configuration output types.

Immutable results handed to stack-building code. Stacks take the
resource names literally and never re-derive them.

Dependencies: dataclasses
System role: Engine output contracts
"""

from dataclasses import asdict, dataclass, field
from typing import Final

from infra_config.configs.base import BaseConfiguration
from infra_config.configs.constants import ResourceClass


@dataclass(frozen=True)
class ResourceNameSet:
    """Generated names for every resource a deployment creates."""
    registry_name: str
    cluster_name: str
    service_name: str
    task_family: str
    load_balancer_name: str
    target_group_name: str
    log_group_name: str
    alb_security_group_name: str
    ecs_security_group_name: str

    def as_dict(self) -> dict[str, str]:
        """Return field name to generated name, in declaration order."""
        return asdict(self)

    def with_classes(self) -> list[tuple[str, ResourceClass, str]]:
        """Return (field, resource class, name) for every member."""
        return [
            (field_name, RESOURCE_NAME_CLASSES[field_name], name)
            for field_name, name in self.as_dict().items()
        ]

    def duplicates(self) -> list[str]:
        """Return names that appear more than once."""
        seen: set[str] = set()
        duplicates: list[str] = []
        for name in self.as_dict().values():
            if name in seen and name not in duplicates:
                duplicates.append(name)
            seen.add(name)
        return duplicates


# Security groups share one rule set but are claimed as separate names
RESOURCE_NAME_CLASSES: Final[dict[str, ResourceClass]] = {
    "registry_name": ResourceClass.REGISTRY,
    "cluster_name": ResourceClass.CLUSTER,
    "service_name": ResourceClass.SERVICE,
    "task_family": ResourceClass.TASK_FAMILY,
    "load_balancer_name": ResourceClass.LOAD_BALANCER,
    "target_group_name": ResourceClass.TARGET_GROUP,
    "log_group_name": ResourceClass.LOG_GROUP,
    "alb_security_group_name": ResourceClass.SECURITY_GROUP,
    "ecs_security_group_name": ResourceClass.SECURITY_GROUP,
}


@dataclass(frozen=True)
class ResolvedConfiguration:
    """
    Application configuration after stage overrides and name generation.

    Attributes:
        application: Merged application configuration
        stage: Stage the configuration was resolved for
        resource_names: Generated resource names
        warnings: Non-blocking warnings raised while resolving
    """
    application: BaseConfiguration
    stage: str
    resource_names: ResourceNameSet
    warnings: tuple[str, ...] = field(default_factory=tuple)
