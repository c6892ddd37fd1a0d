"""
Configuration resolver.

Merges the default application configuration with stage overrides,
generates resource names for the stage, and validates the result before
any infrastructure is provisioned.

Dependencies: infra_config.core.name_generator, infra_config.core.validation
System role: Entry point for stage configuration resolution
"""

import dataclasses
import logging
from collections.abc import Iterable
from typing import NoReturn

from infra_config.configs.base import BaseConfiguration, NamingConvention, StageOverride
from infra_config.configs.defaults import DEFAULT_APPLICATION_CONFIG, STAGE_OVERRIDES
from infra_config.configs.settings import EngineSettings, get_settings
from infra_config.core.exceptions import ConfigurationInvalidError, UnknownStageError
from infra_config.core.name_generator import NameGenerationContext, ResourceNameGenerator
from infra_config.core.validation import ConfigurationValidator
from infra_config.models.resolved import ResolvedConfiguration
from infra_config.models.validation import DetailedValidationOutcome, ValidationOutcome

logger = logging.getLogger(__name__)


class ConfigurationResolver:
    """
    Resolves application configuration per deployment stage.

    Resolution does not mutate the resolver, so one instance can serve
    concurrent calls. The optional existing-names set is the exception:
    it is shared across calls on purpose and the caller serializes access.
    """

    def __init__(
        self,
        base_config: BaseConfiguration = DEFAULT_APPLICATION_CONFIG,
        overrides: Iterable[StageOverride] = STAGE_OVERRIDES,
        settings: EngineSettings | None = None,
        existing_names: set[str] | None = None,
    ) -> None:
        """
        Initialize the resolver.

        Args:
            base_config: Default application configuration
            overrides: Stage override records, one per stage
            settings: Engine settings (defaults to environment settings)
            existing_names: Claimed names shared across resolutions; each
                call starts from an empty set when omitted
        """
        self.base_config = base_config
        self.overrides = {override.stage: override for override in overrides}
        self.settings = settings or get_settings()
        self.existing_names = existing_names
        self.validator = ConfigurationValidator(self.settings)

    def resolve(self, stage: str) -> ResolvedConfiguration:
        """
        Resolve configuration for a deployment stage.

        Args:
            stage: Deployment stage to resolve

        Returns:
            ResolvedConfiguration: Merged configuration with resource names

        Raises:
            ValueError: If stage is empty
            UnknownStageError: If the stage has no overrides and fallback is disabled
            NamingError: If resource names cannot be generated
            ConfigurationInvalidError: If the merged configuration has errors
        """
        if not isinstance(stage, str) or not stage.strip():
            raise ValueError("Stage must be a non-empty string")

        warnings: list[str] = []
        override = self.overrides.get(stage)
        if override is None:
            if not self.settings.allow_unknown_stage:
                raise UnknownStageError(stage, self.available_stages())
            message = (
                f"No environment configuration found for stage '{stage}'. "
                "Using default configuration."
            )
            logger.warning(message)
            warnings.append(message)

        merged = self._merge(override)
        convention = override.naming_convention if override else NamingConvention()

        # Field errors first, otherwise an empty identifier surfaces as a naming failure
        precheck = self.validator.validate_application(merged)
        if not precheck.is_valid:
            self._fail(stage, precheck)

        generator = ResourceNameGenerator(
            settings=self.settings,
            existing_names=self.existing_names if self.existing_names is not None else set(),
        )
        resource_names = generator.generate(
            NameGenerationContext(base_config=merged, stage=stage, convention=convention)
        )

        resolved = ResolvedConfiguration(
            application=merged,
            stage=stage,
            resource_names=resource_names,
        )

        validation = self.validator.validate(resolved)
        if not validation.is_valid:
            self._fail(stage, validation)

        for warning in validation.warnings:
            logger.warning(warning)
        warnings.extend(validation.warnings)

        logger.info(
            f"Resolved configuration for stage '{stage}' "
            f"(service={resource_names.service_name}, cluster={resource_names.cluster_name})"
        )
        return dataclasses.replace(resolved, warnings=tuple(warnings))

    def _fail(self, stage: str, validation: ValidationOutcome) -> NoReturn:
        logger.error(
            f"Configuration validation failed for stage '{stage}' "
            f"with {len(validation.errors)} error(s)"
        )
        raise ConfigurationInvalidError(stage, validation.errors, validation.warnings)

    def merge(self, stage: str) -> BaseConfiguration:
        """
        Merge stage overrides onto the base configuration without naming.

        Args:
            stage: Deployment stage

        Returns:
            BaseConfiguration: Merged configuration (the base when the stage is unknown)
        """
        return self._merge(self.overrides.get(stage))

    def _merge(self, override: StageOverride | None) -> BaseConfiguration:
        # BaseConfiguration is immutable, so the base can be returned as is
        merged = self.base_config
        if override is None:
            return merged

        if override.application_overrides is not None:
            merged = dataclasses.replace(merged, **override.application_overrides.present_fields())

        build = override.build_overrides
        if build is not None:
            if build.build_commands is not None:
                merged = dataclasses.replace(merged, build_commands=build.build_commands)
            if build.docker_build_args is not None:
                merged = dataclasses.replace(
                    merged,
                    docker_build_args={**merged.docker_build_args, **build.docker_build_args},
                )

        return merged

    def validate(self, resolved: ResolvedConfiguration) -> ValidationOutcome:
        """Validate a resolved configuration, reporting flat messages."""
        return self.validator.validate(resolved)

    def validate_detailed(self, resolved: ResolvedConfiguration) -> DetailedValidationOutcome:
        """Validate a resolved configuration, reporting typed errors with suggestions."""
        return self.validator.validate_detailed(resolved)

    def available_stages(self) -> list[str]:
        """Return the configured stage names."""
        return list(self.overrides)

    def is_known_stage(self, stage: str) -> bool:
        """Check whether a stage has an override record."""
        return stage in self.overrides
