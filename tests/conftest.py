"""
Shared test fixtures for the resolution engine test suite.

Provides: engine settings isolated from the environment, sample
application configurations, stage overrides and resolver factories
System role: Test infrastructure and fixture management
"""

import pytest

from infra_config.configs.base import (
    BaseConfiguration,
    BuildOverrides,
    StageOverride,
)
from infra_config.configs.constants import CollisionStrategy
from infra_config.configs.settings import EngineSettings
from infra_config.core.name_generator import NameGenerationContext, ResourceNameGenerator
from infra_config.core.resolver import ConfigurationResolver
from infra_config.models.resolved import ResolvedConfiguration


def make_settings(**overrides) -> EngineSettings:
    """Build engine settings that ignore INFRA_CONFIG_* variables and .env files."""
    values = {
        "collision_strategy": CollisionStrategy.NUMERIC_SUFFIX,
        "max_collision_attempts": 10,
        "check_reserved_prefixes": True,
        "allow_unknown_stage": True,
        "log_level": "INFO",
    }
    values.update(overrides)
    return EngineSettings(_env_file=None, **values)


@pytest.fixture
def settings() -> EngineSettings:
    """Provide default engine settings."""
    return make_settings()


@pytest.fixture
def svc_config() -> BaseConfiguration:
    """Provide the small 'svc' application configuration."""
    return BaseConfiguration(
        application_name="svc",
        display_name="Service",
        source_directory="svc",
        registry_name="svc",
        container_port=3000,
        health_check_path="/health",
        cluster_suffix="cluster",
        service_name="svc-service",
        task_family="svc",
        load_balancer_name="svc-alb",
        target_group_name="svc-tg",
        build_commands=["npm ci", "npm run build"],
        docker_build_args={"B": "2"},
    )


@pytest.fixture
def api_config() -> BaseConfiguration:
    """Provide a configuration whose base identifiers are all distinct."""
    return BaseConfiguration(
        application_name="orders",
        display_name="Orders API",
        source_directory="services/orders",
        registry_name="orders-api",
        container_port=8080,
        health_check_path="/api/health",
        cluster_suffix="cluster",
        service_name="orders-service",
        task_family="orders-task",
        load_balancer_name="orders-alb",
        target_group_name="orders-tg",
        build_commands=["make build"],
        docker_build_args={"NODE_ENV": "production"},
    )


@pytest.fixture
def stage_overrides() -> list[StageOverride]:
    """Provide beta and prod overrides."""
    return [
        StageOverride(stage="beta"),
        StageOverride(
            stage="prod",
            build_overrides=BuildOverrides(docker_build_args={"A": "1"}),
        ),
    ]


@pytest.fixture
def svc_resolver(svc_config, stage_overrides, settings) -> ConfigurationResolver:
    """Provide a resolver over the 'svc' configuration."""
    return ConfigurationResolver(svc_config, stage_overrides, settings=settings)


@pytest.fixture
def resolved_for(settings):
    """Provide a factory that resolves names for a configuration without validation."""

    def _resolved_for(config: BaseConfiguration, stage: str = "beta") -> ResolvedConfiguration:
        generator = ResourceNameGenerator(settings=settings)
        names = generator.generate(NameGenerationContext(base_config=config, stage=stage))
        return ResolvedConfiguration(application=config, stage=stage, resource_names=names)

    return _resolved_for


@pytest.fixture
def settings_factory():
    """Provide a factory for engine settings with overrides."""
    return make_settings
