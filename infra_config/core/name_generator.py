"""
Resource name generator.

Derives every AWS resource name a deployment uses from the application
configuration, the stage, and its naming convention, then cross-checks
the resulting set against the naming rule catalog.

Dependencies: infra_config.utils.naming, infra_config.core.collision
System role: Single source of truth for deployment resource names
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from infra_config.configs.base import BaseConfiguration, NamingConvention
from infra_config.configs.constants import (
    LOG_GROUP_PREFIX,
    NAMING_RULES,
    ResourceClass,
    has_reserved_prefix,
)
from infra_config.configs.settings import EngineSettings, get_settings
from infra_config.core.collision import resolve_collision
from infra_config.core.exceptions import InvalidGeneratedNameError
from infra_config.models.resolved import ResourceNameSet
from infra_config.models.validation import ValidationOutcome
from infra_config.utils.naming import apply_naming, normalize_for_registry

logger = logging.getLogger(__name__)


@dataclass
class NameGenerationContext:
    """
    Inputs for one name generation call.

    Attributes:
        base_config: Merged application configuration
        stage: Deployment stage
        convention: Naming convention (defaults to stage suffix with '-')
        existing_names: Additional names to treat as claimed
    """
    base_config: BaseConfiguration
    stage: str
    convention: NamingConvention | None = None
    existing_names: set[str] = field(default_factory=set)


class ResourceNameGenerator:
    """
    Generates AWS resource names with collision avoidance.

    The claimed-name set is owned by the caller. Passing the same set to
    several generators extends collision avoidance across them; the caller
    must then serialize access to it.
    """

    def __init__(
        self,
        settings: EngineSettings | None = None,
        existing_names: set[str] | None = None,
    ) -> None:
        """
        Initialize the resource name generator.

        Args:
            settings: Engine settings (defaults to environment settings)
            existing_names: Claimed names, shared by reference when given
        """
        self.settings = settings or get_settings()
        self._existing_names = existing_names if existing_names is not None else set()

    def generate(self, context: NameGenerationContext) -> ResourceNameSet:
        """
        Generate all resource names for an application deployment.

        Each name is claimed as soon as it is generated, so two base
        identifiers that qualify to the same string never collide.
        Reserved-prefix warnings are not logged here; they are reported by
        validate_resource_names and by configuration validation.

        Args:
            context: Application configuration, stage and convention

        Returns:
            ResourceNameSet: Generated names

        Raises:
            NameTooLongError: If a stage-qualified name exceeds its limit
            NamingConflictError: If a name collides under the ERROR strategy
            UnresolvableCollisionError: If a collision cannot be resolved
            InvalidGeneratedNameError: If the generated set fails the cross-check
        """
        config = context.base_config
        stage = context.stage
        convention = context.convention or NamingConvention()
        self._existing_names.update(context.existing_names)
        claimed = set(self._existing_names)

        def qualify(base: str) -> str:
            return apply_naming(base, stage, convention)

        candidates = [
            ("registry_name", ResourceClass.REGISTRY, normalize_for_registry(qualify(config.registry_name))),
            ("cluster_name", ResourceClass.CLUSTER, qualify(f"{config.application_name}-{config.cluster_suffix}")),
            ("service_name", ResourceClass.SERVICE, qualify(config.service_name)),
            ("task_family", ResourceClass.TASK_FAMILY, qualify(config.task_family)),
            ("load_balancer_name", ResourceClass.LOAD_BALANCER, qualify(config.load_balancer_name)),
            ("target_group_name", ResourceClass.TARGET_GROUP, qualify(config.target_group_name)),
            ("log_group_name", ResourceClass.LOG_GROUP, f"{LOG_GROUP_PREFIX}{qualify(config.application_name)}"),
            ("alb_security_group_name", ResourceClass.SECURITY_GROUP, qualify(f"{config.application_name}-alb-sg")),
            ("ecs_security_group_name", ResourceClass.SECURITY_GROUP, qualify(f"{config.application_name}-ecs-sg")),
        ]

        generated: dict[str, str] = {}
        for field_name, resource_class, candidate in candidates:
            name = resolve_collision(
                candidate,
                resource_class,
                claimed,
                strategy=self.settings.collision_strategy,
                max_attempts=self.settings.max_collision_attempts,
            )
            claimed.add(name)
            generated[field_name] = name

        names = ResourceNameSet(**generated)

        validation = self.validate_resource_names(names)
        if not validation.is_valid:
            logger.error(f"Generated resource names failed validation: {validation.errors}")
            raise InvalidGeneratedNameError(validation.errors)

        self._existing_names.update(generated.values())
        return names

    def validate_resource_names(self, names: ResourceNameSet) -> ValidationOutcome:
        """
        Validate a complete name set against the naming rule catalog.

        Args:
            names: Resource names to validate

        Returns:
            ValidationOutcome: Pattern/length/duplicate errors and prefix warnings
        """
        errors: list[str] = []
        warnings: list[str] = []

        for field_name, resource_class, name in names.with_classes():
            if not name or not NAMING_RULES[resource_class].matches(name):
                errors.append(f"Invalid {field_name}: '{name}'")

        duplicates = names.duplicates()
        if duplicates:
            errors.append(f"Duplicate resource names detected: {', '.join(duplicates)}")

        if self.settings.check_reserved_prefixes:
            for field_name, name in names.as_dict().items():
                if name and has_reserved_prefix(name):
                    warnings.append(f"{field_name} '{name}' starts with reserved prefix")

        return ValidationOutcome(is_valid=not errors, errors=errors, warnings=warnings)

    def validate_single_resource_name(
        self,
        name: str,
        resource_class: ResourceClass,
    ) -> ValidationOutcome:
        """
        Validate one name for a resource class.

        Args:
            name: Resource name to validate
            resource_class: Resource class whose rules apply

        Returns:
            ValidationOutcome: Errors and warnings for the name
        """
        errors: list[str] = []
        warnings: list[str] = []

        if not name or not isinstance(name, str):
            return ValidationOutcome(
                is_valid=False,
                errors=["Resource name must be a non-empty string"],
            )

        rule = NAMING_RULES[resource_class]
        if len(name) > rule.max_length:
            errors.append(
                f"Name exceeds maximum length of {rule.max_length} characters (current: {len(name)})"
            )
        if rule.pattern.match(name) is None:
            errors.append(rule.description)

        if self.settings.check_reserved_prefixes and has_reserved_prefix(name):
            warnings.append("Name starts with a reserved prefix which may cause issues")

        if name in self._existing_names:
            errors.append("Name already exists and would cause a conflict")

        return ValidationOutcome(is_valid=not errors, errors=errors, warnings=warnings)

    @property
    def existing_names(self) -> frozenset[str]:
        """Snapshot of the claimed names."""
        return frozenset(self._existing_names)

    def add_existing_names(self, names: Iterable[str]) -> None:
        """Claim names so later generations avoid them."""
        self._existing_names.update(names)

    def clear_existing_names(self) -> None:
        """Forget every claimed name."""
        self._existing_names.clear()

    def name_exists(self, name: str) -> bool:
        """Check whether a name is already claimed."""
        return name in self._existing_names
