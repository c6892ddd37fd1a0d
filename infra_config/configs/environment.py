"""
Stage loader for Pulumi programs.

Reads the deployment stage from the active Pulumi stack config so stack
code can resolve its configuration without re-deriving names. Not
re-exported from ``infra_config.configs``, so the engine imports without
Pulumi installed.
"""

import pulumi

from infra_config.configs.settings import EngineSettings, get_settings
from infra_config.core.resolver import ConfigurationResolver
from infra_config.models.resolved import ResolvedConfiguration
from infra_config.observability.logger import configure_logging


def get_stage() -> str:
    """
    Load the deployment stage from Pulumi stack config.

    Uses the ``stage`` config key when set, otherwise the stack name
    (``pulumi stack select beta`` resolves the ``beta`` stage).

    Returns:
        str: Deployment stage identifier
    """
    config = pulumi.Config()
    return config.get("stage") or pulumi.get_stack()


def resolve_for_stack(settings: EngineSettings | None = None) -> ResolvedConfiguration:
    """
    Resolve the default application configuration for the active stack.

    Configures logging at the settings' log level first, so call this once
    from the Pulumi program entry point.

    Args:
        settings: Optional engine settings (defaults to environment settings)

    Returns:
        ResolvedConfiguration: Resolved configuration for the stack's stage

    Raises:
        ConfigurationInvalidError: If the merged configuration is invalid
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    return ConfigurationResolver(settings=settings).resolve(get_stage())
