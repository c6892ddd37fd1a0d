"""
Base configuration dataclasses for application deployment settings.

Provides the type-safe structures the resolver merges: the default
application configuration, per-stage overrides, and naming conventions.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class NamingConvention:
    """
    Policy used to make a base identifier stage-specific.

    Attributes:
        use_stage_prefix: Prepend the stage name (``beta-svc``)
        use_stage_suffix: Append the stage name (``svc-beta``)
        separator: Separator placed between stage and base identifier
    """
    use_stage_prefix: bool = False
    use_stage_suffix: bool = True
    separator: str = "-"


@dataclass(frozen=True)
class BaseConfiguration:
    """
    Default settings for an application deployment.

    Values are not checked on construction; the resolver validates the
    merged result so every violation is reported in one pass. Build commands
    are stored as a tuple and build args as a read-only mapping, so an
    instance cannot change after construction.

    Attributes:
        application_name: Unique identifier used in resource naming
        display_name: Human-readable application name
        source_directory: Directory containing the application code
        registry_name: Base ECR repository identifier
        dockerfile_path: Dockerfile path relative to the source directory
        container_port: Port the container listens on
        health_check_path: Health check endpoint path
        cluster_suffix: Suffix combined with the application name for the cluster
        service_name: Base ECS service identifier
        task_family: Base ECS task definition family
        load_balancer_name: Base Application Load Balancer identifier
        target_group_name: Base target group identifier
        build_commands: Commands run while building the application
        docker_build_args: Docker build arguments passed to the image build
    """
    application_name: str
    display_name: str
    source_directory: str
    registry_name: str
    container_port: int
    health_check_path: str
    cluster_suffix: str
    service_name: str
    task_family: str
    load_balancer_name: str
    target_group_name: str
    dockerfile_path: str = "Dockerfile"
    build_commands: Sequence[str] = field(default_factory=tuple)
    # Excluded from hashing; equality still compares it
    docker_build_args: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "build_commands", tuple(self.build_commands))
        object.__setattr__(self, "docker_build_args", MappingProxyType(dict(self.docker_build_args)))


@dataclass(frozen=True)
class ApplicationOverrides:
    """
    Partial application configuration for a single stage.

    Every field left as ``None`` keeps the base value. Any other value
    replaces the base field wholesale, including list and mapping fields.
    """
    application_name: str | None = None
    display_name: str | None = None
    source_directory: str | None = None
    registry_name: str | None = None
    container_port: int | None = None
    health_check_path: str | None = None
    cluster_suffix: str | None = None
    service_name: str | None = None
    task_family: str | None = None
    load_balancer_name: str | None = None
    target_group_name: str | None = None
    dockerfile_path: str | None = None
    build_commands: list[str] | None = None
    docker_build_args: dict[str, Any] | None = None

    def present_fields(self) -> dict[str, Any]:
        """Return the overrides that were actually set."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


@dataclass(frozen=True)
class BuildOverrides:
    """
    Stage-specific build settings.

    Attributes:
        build_commands: Replaces the base command list wholesale when set
        docker_build_args: Merged key-by-key into the base mapping when set
    """
    build_commands: list[str] | None = None
    docker_build_args: dict[str, Any] | None = None


@dataclass(frozen=True)
class StageOverride:
    """
    Override record for one deployment stage.

    Attributes:
        stage: Stage identifier (beta, gamma, prod)
        naming_convention: Naming policy for the stage's resource names
        application_overrides: Application fields replaced for this stage
        build_overrides: Build settings replaced or merged for this stage
    """
    stage: str
    naming_convention: NamingConvention = field(default_factory=NamingConvention)
    application_overrides: ApplicationOverrides | None = None
    build_overrides: BuildOverrides | None = None
