"""
Test suite for ConfigurationValidator.

Covers each rule's error kind, warnings that never block resolution,
and aggregation of independent violations.
"""

import dataclasses

import pytest

from infra_config.core.validation import ConfigurationValidator
from infra_config.models.validation import ValidationErrorKind


@pytest.fixture
def validator(settings) -> ConfigurationValidator:
    """Provide a validator with default settings."""
    return ConfigurationValidator(settings)


@pytest.fixture
def resolved(resolved_for, api_config):
    """Provide a valid resolved configuration for the orders application."""
    return resolved_for(api_config)


def with_application(resolved, **changes):
    """Swap application fields while keeping the generated names."""
    return dataclasses.replace(
        resolved,
        application=dataclasses.replace(resolved.application, **changes),
    )


def with_names(resolved, **changes):
    """Swap generated names while keeping the application."""
    return dataclasses.replace(
        resolved,
        resource_names=dataclasses.replace(resolved.resource_names, **changes),
    )


def kinds(outcome) -> list[ValidationErrorKind]:
    return [error.kind for error in outcome.errors]


class TestValidConfiguration:
    """Tests for configurations that pass."""

    def test_valid_configuration_passes(self, validator, resolved) -> None:
        """A well-formed configuration has no errors or warnings."""
        result = validator.validate(resolved)

        assert result.is_valid
        assert result.errors == []
        assert result.warnings == []

    def test_detailed_summary_on_success(self, validator, resolved) -> None:
        """Summary names the stage on success."""
        result = validator.validate_detailed(resolved)

        assert result.is_valid
        assert result.summary == "Configuration validation passed for stage 'beta'"


class TestFieldRules:
    """Tests for field-level rules."""

    @pytest.mark.parametrize("port", [-1, 0, 65536, 3000.5, True])
    def test_invalid_port(self, validator, resolved, port) -> None:
        """Ports outside 1..65535 or non-integers are rejected."""
        result = validator.validate_detailed(with_application(resolved, container_port=port))

        assert not result.is_valid
        assert kinds(result) == [ValidationErrorKind.INVALID_PORT]
        assert str(port) in result.errors[0].message

    @pytest.mark.parametrize("port", [1, 80, 65535])
    def test_valid_port_bounds(self, validator, resolved, port) -> None:
        """Boundary ports are accepted."""
        assert validator.validate(with_application(resolved, container_port=port)).is_valid

    def test_port_error_message(self, validator, resolved) -> None:
        """Flat result carries the same message text."""
        result = validator.validate(with_application(resolved, container_port=-1))

        assert result.errors == ["Container port must be an integer between 1 and 65535, got: -1"]

    def test_relative_health_check_path(self, validator, resolved) -> None:
        """Health check path must be absolute."""
        result = validator.validate_detailed(with_application(resolved, health_check_path="status"))

        assert kinds(result) == [ValidationErrorKind.INVALID_PATH]
        assert result.errors[0].field == "health_check_path"
        assert result.errors[0].suggestion

    @pytest.mark.parametrize("field_name", ["application_name", "source_directory", "service_name"])
    def test_missing_required_field(self, validator, resolved, field_name) -> None:
        """Empty required fields are reported by name."""
        result = validator.validate_detailed(with_application(resolved, **{field_name: "  "}))

        assert ValidationErrorKind.MISSING_REQUIRED_FIELD in kinds(result)
        assert any(error.field == field_name for error in result.errors)

    def test_empty_identifier_is_only_reported_as_missing(self, validator, resolved) -> None:
        """An empty base identifier is not also an AWS naming violation."""
        result = validator.validate_detailed(with_application(resolved, task_family=""))

        assert kinds(result) == [ValidationErrorKind.MISSING_REQUIRED_FIELD]

    def test_aws_naming_violation(self, validator, resolved) -> None:
        """Base identifiers must be alphanumeric with inner hyphens."""
        result = validator.validate_detailed(with_application(resolved, service_name="orders_service"))

        assert kinds(result) == [ValidationErrorKind.AWS_NAMING_VIOLATION]
        assert result.errors[0].value == "orders_service"

    def test_leading_hyphen_is_a_naming_violation(self, validator, resolved) -> None:
        """Identifiers cannot start with a hyphen."""
        result = validator.validate_detailed(with_application(resolved, target_group_name="-orders-tg"))
        assert kinds(result) == [ValidationErrorKind.AWS_NAMING_VIOLATION]

    def test_non_string_build_arg(self, validator, resolved) -> None:
        """Build argument values must be strings."""
        result = validator.validate_detailed(
            with_application(resolved, docker_build_args={"NODE_ENV": "production", "PORT": 8080})
        )

        assert kinds(result) == [ValidationErrorKind.INVALID_FORMAT]
        assert result.errors[0].field == "docker_build_args.PORT"

    def test_validate_application_skips_names(self, validator, api_config) -> None:
        """Field rules run on a bare application configuration."""
        result = validator.validate_application(dataclasses.replace(api_config, container_port=0))

        assert not result.is_valid
        assert len(result.errors) == 1


class TestGeneratedNameRules:
    """Tests for rules over the generated names."""

    def test_name_too_long(self, validator, resolved) -> None:
        """Generated names over their class limit are errors."""
        result = validator.validate_detailed(with_names(resolved, load_balancer_name="a" * 40))

        assert kinds(result) == [ValidationErrorKind.NAME_TOO_LONG]
        assert result.errors[0].field == "resource_names.load_balancer_name"

    def test_duplicates_are_warnings(self, validator, resolved) -> None:
        """Duplicate generated names warn without failing."""
        result = validator.validate(with_names(resolved, task_family=resolved.resource_names.service_name))

        assert result.is_valid
        assert result.warnings == ["Duplicate resource names detected: orders-service-beta"]

    def test_reserved_prefix_warning(self, validator, resolved) -> None:
        """Reserved prefixes are flagged per name."""
        result = validator.validate(with_names(resolved, cluster_name="aws-cluster-beta"))

        assert result.is_valid
        assert result.warnings == ["cluster_name 'aws-cluster-beta' starts with reserved prefix"]


class TestWarnings:
    """Tests for non-blocking warnings."""

    def test_empty_build_commands(self, validator, resolved) -> None:
        """Missing build commands only warn."""
        result = validator.validate(with_application(resolved, build_commands=[]))

        assert result.is_valid
        assert result.warnings == ["No build commands specified, build may fail"]

    def test_dockerfile_parent_traversal(self, validator, resolved) -> None:
        """Parent directory references in the Dockerfile path warn."""
        result = validator.validate(with_application(resolved, dockerfile_path="../Dockerfile"))

        assert result.is_valid
        assert len(result.warnings) == 1
        assert "../Dockerfile" in result.warnings[0]


class TestAggregation:
    """Tests for reporting every violation together."""

    def test_all_errors_reported(self, validator, resolved) -> None:
        """Independent violations are all collected."""
        broken = with_application(
            resolved,
            container_port=-1,
            health_check_path="status",
            service_name="orders_service",
        )

        result = validator.validate_detailed(broken)

        assert set(kinds(result)) == {
            ValidationErrorKind.INVALID_PORT,
            ValidationErrorKind.INVALID_PATH,
            ValidationErrorKind.AWS_NAMING_VIOLATION,
        }
        assert result.summary == "Configuration validation failed with 3 error(s) for stage 'beta'"

    def test_flat_and_detailed_agree(self, validator, resolved) -> None:
        """Flat messages mirror the typed errors."""
        broken = with_application(resolved, container_port=-1, health_check_path="status")

        flat = validator.validate(broken)
        detailed = validator.validate_detailed(broken)

        assert flat.errors == [error.message for error in detailed.errors]
        assert flat.warnings == detailed.warnings
