"""
Default application configuration and stage override table.

Used by ConfigurationResolver when no explicit tables are supplied.
"""

from typing import Final

from infra_config.configs.base import (
    ApplicationOverrides,
    BaseConfiguration,
    BuildOverrides,
    NamingConvention,
    StageOverride,
)

APPLICATION_NAME: Final[str] = "web-app"

DEFAULT_APPLICATION_CONFIG: Final[BaseConfiguration] = BaseConfiguration(
    application_name=APPLICATION_NAME,
    display_name="Web Application",
    source_directory=APPLICATION_NAME,
    registry_name=APPLICATION_NAME,
    dockerfile_path="Dockerfile",
    container_port=3000,
    health_check_path="/api/health",
    cluster_suffix="cluster",
    service_name=f"{APPLICATION_NAME}-service",
    task_family=f"{APPLICATION_NAME}-task",
    load_balancer_name=f"{APPLICATION_NAME}-alb",
    target_group_name=f"{APPLICATION_NAME}-tg",
    build_commands=[
        "npm ci",
        "NODE_ENV=production npm run build",
    ],
    docker_build_args={
        "NODE_ENV": "production",
        "NEXT_TELEMETRY_DISABLED": "1",
    },
)

STAGE_OVERRIDES: Final[tuple[StageOverride, ...]] = (
    # Integration testing and pre-production validation
    StageOverride(
        stage="beta",
        naming_convention=NamingConvention(),
        application_overrides=ApplicationOverrides(),
        build_overrides=BuildOverrides(
            docker_build_args={
                "NEXT_PUBLIC_ENV": "beta",
            },
            build_commands=[
                "npm ci",
                "NODE_ENV=production npm run build",
                "npm run test:ci",
            ],
        ),
    ),
    # Mirrors production settings for final validation
    StageOverride(
        stage="gamma",
        naming_convention=NamingConvention(),
        build_overrides=BuildOverrides(
            docker_build_args={
                "NEXT_PUBLIC_ENV": "gamma",
                "NEXT_OPTIMIZE_FONTS": "true",
                "NEXT_OPTIMIZE_IMAGES": "true",
            },
            build_commands=[
                "npm ci",
                "NODE_ENV=production npm run build",
                "npm run test:ci",
                "npm run test:e2e",
            ],
        ),
    ),
    StageOverride(
        stage="prod",
        naming_convention=NamingConvention(),
        build_overrides=BuildOverrides(
            docker_build_args={
                "NEXT_PUBLIC_ENV": "production",
                "NEXT_OPTIMIZE_FONTS": "true",
                "NEXT_OPTIMIZE_IMAGES": "true",
                "NEXT_BUNDLE_ANALYZER": "false",
                "NEXT_STRICT_MODE": "true",
            },
            build_commands=[
                "npm ci --only=production",
                "NODE_ENV=production npm run build",
                "npm run validate:build",
            ],
        ),
    ),
)
