"""
Configuration validation.

One rule set over a resolved configuration, reported either as flat
strings or as typed errors with remediation suggestions. Every rule runs
independently so all violations are reported together.

Dependencies: infra_config.configs.constants, infra_config.models
System role: Pre-deployment configuration checks
"""

from collections.abc import Mapping
from typing import Any

from infra_config.configs.base import BaseConfiguration
from infra_config.configs.constants import (
    GENERAL_PATTERN,
    NAMING_RULES,
    has_reserved_prefix,
)
from infra_config.configs.settings import EngineSettings, get_settings
from infra_config.models.resolved import ResolvedConfiguration, ResourceNameSet
from infra_config.models.validation import (
    DetailedValidationOutcome,
    TypedError,
    ValidationErrorKind,
    ValidationOutcome,
)

REQUIRED_FIELDS: tuple[str, ...] = (
    "application_name",
    "source_directory",
    "registry_name",
    "service_name",
    "task_family",
    "load_balancer_name",
    "target_group_name",
)

# Base identifiers checked before stage qualification
AWS_NAME_FIELDS: tuple[str, ...] = (
    "registry_name",
    "service_name",
    "task_family",
    "load_balancer_name",
    "target_group_name",
)

MIN_PORT = 1
MAX_PORT = 65535


class ConfigurationValidator:
    """Validates resolved configurations before deployment."""

    def __init__(self, settings: EngineSettings | None = None) -> None:
        """
        Initialize the validator.

        Args:
            settings: Engine settings controlling reserved-prefix warnings
                (defaults to environment settings)
        """
        self.settings = settings or get_settings()

    def validate(self, resolved: ResolvedConfiguration) -> ValidationOutcome:
        """
        Validate a resolved configuration.

        Args:
            resolved: Resolved configuration to validate

        Returns:
            ValidationOutcome: Error messages and warnings
        """
        errors, warnings = self._collect(resolved)
        return ValidationOutcome(
            is_valid=not errors,
            errors=[error.message for error in errors],
            warnings=warnings,
        )

    def validate_detailed(self, resolved: ResolvedConfiguration) -> DetailedValidationOutcome:
        """
        Validate a resolved configuration with typed errors.

        Args:
            resolved: Resolved configuration to validate

        Returns:
            DetailedValidationOutcome: Typed errors, warnings and a summary line
        """
        errors, warnings = self._collect(resolved)
        if errors:
            summary = (
                f"Configuration validation failed with {len(errors)} error(s) "
                f"for stage '{resolved.stage}'"
            )
        else:
            summary = f"Configuration validation passed for stage '{resolved.stage}'"
        return DetailedValidationOutcome(
            is_valid=not errors,
            errors=errors,
            warnings=warnings,
            summary=summary,
        )

    def validate_application(self, application: BaseConfiguration) -> ValidationOutcome:
        """
        Run the field-level rules on a merged configuration.

        Used before name generation so field errors are reported together
        instead of surfacing as a naming failure.

        Args:
            application: Merged application configuration

        Returns:
            ValidationOutcome: Error messages and warnings for the fields
        """
        errors: list[TypedError] = []
        warnings: list[str] = []
        self._collect_application(application, errors, warnings)
        return ValidationOutcome(
            is_valid=not errors,
            errors=[error.message for error in errors],
            warnings=warnings,
        )

    def _collect(self, resolved: ResolvedConfiguration) -> tuple[list[TypedError], list[str]]:
        errors: list[TypedError] = []
        warnings: list[str] = []
        self._collect_application(resolved.application, errors, warnings)
        self._check_generated_names(resolved.resource_names, errors, warnings)
        return errors, warnings

    def _collect_application(
        self,
        application: BaseConfiguration,
        errors: list[TypedError],
        warnings: list[str],
    ) -> None:
        self._check_required_fields(application, errors)
        self._check_port(application, errors)
        self._check_paths(application, errors, warnings)
        self._check_aws_naming(application, errors)
        self._check_build(application, errors, warnings)

    def _check_required_fields(self, application: BaseConfiguration, errors: list[TypedError]) -> None:
        for field_name in REQUIRED_FIELDS:
            value = getattr(application, field_name)
            if not isinstance(value, str) or not value.strip():
                errors.append(TypedError(
                    kind=ValidationErrorKind.MISSING_REQUIRED_FIELD,
                    field=field_name,
                    message=f"Required field '{field_name}' is missing or empty",
                    value=value,
                    suggestion=f"Provide a non-empty value for '{field_name}'",
                ))

    def _check_port(self, application: BaseConfiguration, errors: list[TypedError]) -> None:
        port = application.container_port
        is_int = isinstance(port, int) and not isinstance(port, bool)
        if not is_int or not MIN_PORT <= port <= MAX_PORT:
            errors.append(TypedError(
                kind=ValidationErrorKind.INVALID_PORT,
                field="container_port",
                message=f"Container port must be an integer between {MIN_PORT} and {MAX_PORT}, got: {port}",
                value=port,
                suggestion="Use a valid port number (e.g., 3000, 8080, 80)",
            ))

    def _check_paths(
        self,
        application: BaseConfiguration,
        errors: list[TypedError],
        warnings: list[str],
    ) -> None:
        health_check_path = application.health_check_path
        if not isinstance(health_check_path, str) or not health_check_path.startswith("/"):
            errors.append(TypedError(
                kind=ValidationErrorKind.INVALID_PATH,
                field="health_check_path",
                message=f"Health check path must start with '/', got: {health_check_path}",
                value=health_check_path,
                suggestion="Use an absolute path like '/api/health' or '/health'",
            ))

        dockerfile_path = application.dockerfile_path
        if isinstance(dockerfile_path, str) and ".." in dockerfile_path:
            warnings.append(
                f"Dockerfile path contains '..' which may cause security issues: {dockerfile_path}"
            )

    def _check_aws_naming(self, application: BaseConfiguration, errors: list[TypedError]) -> None:
        for field_name in AWS_NAME_FIELDS:
            value = getattr(application, field_name)
            # Empty values are reported as missing
            if not isinstance(value, str) or not value:
                continue
            if GENERAL_PATTERN.match(value) is None:
                errors.append(TypedError(
                    kind=ValidationErrorKind.AWS_NAMING_VIOLATION,
                    field=field_name,
                    message=(
                        f"Field '{field_name}' contains invalid characters for AWS resources. "
                        "Must contain only alphanumeric characters and hyphens, "
                        "and cannot start or end with a hyphen."
                    ),
                    value=value,
                    suggestion="Use only alphanumeric characters and hyphens, cannot start or end with hyphen",
                ))

    def _check_generated_names(
        self,
        names: ResourceNameSet,
        errors: list[TypedError],
        warnings: list[str],
    ) -> None:
        for field_name, resource_class, name in names.with_classes():
            max_length = NAMING_RULES[resource_class].max_length
            if len(name) > max_length:
                errors.append(TypedError(
                    kind=ValidationErrorKind.NAME_TOO_LONG,
                    field=f"resource_names.{field_name}",
                    message=(
                        f"Generated {field_name} '{name}' exceeds AWS limit of "
                        f"{max_length} characters (current: {len(name)})"
                    ),
                    value=name,
                    suggestion=f"Shorten the base identifier so the stage-qualified name fits in {max_length} characters",
                ))

        duplicates = names.duplicates()
        if duplicates:
            warnings.append(f"Duplicate resource names detected: {', '.join(duplicates)}")

        if self.settings.check_reserved_prefixes:
            for field_name, name in names.as_dict().items():
                if has_reserved_prefix(name):
                    warnings.append(f"{field_name} '{name}' starts with reserved prefix")

    def _check_build(
        self,
        application: BaseConfiguration,
        errors: list[TypedError],
        warnings: list[str],
    ) -> None:
        if not application.build_commands:
            warnings.append("No build commands specified, build may fail")

        build_args: Mapping[str, Any] = application.docker_build_args
        for key, value in build_args.items():
            if not isinstance(value, str):
                errors.append(TypedError(
                    kind=ValidationErrorKind.INVALID_FORMAT,
                    field=f"docker_build_args.{key}",
                    message=f"Docker build arg '{key}' must be a string, got: {type(value).__name__}",
                    value=value,
                    suggestion=f"Quote the value of '{key}' as a string",
                ))
