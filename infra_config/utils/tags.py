"""
Tag sets for resolved deployments.

Stage tags go on every stack of a stage; resource tags add the generated
name of each resource on top of them.
"""

from infra_config.configs.constants import DEFAULT_TAGS, DEPLOYMENT_TYPE
from infra_config.models.resolved import ResolvedConfiguration


def stage_tags(resolved: ResolvedConfiguration, **extra_tags: str) -> dict[str, str]:
    """
    Create the stage-level tag set for a resolved configuration.

    Args:
        resolved: Resolved configuration
        **extra_tags: Additional tags; these win over the generated ones

    Returns:
        Dictionary of tags applied to every stack in the stage
    """
    return {
        **DEFAULT_TAGS,
        "Stage": resolved.stage,
        "Application": resolved.application.application_name,
        "Environment": resolved.stage,
        "DeploymentType": DEPLOYMENT_TYPE,
        **extra_tags,
    }


def resource_tags(resolved: ResolvedConfiguration, **extra_tags: str) -> dict[str, dict[str, str]]:
    """
    Create a tag set per generated resource name.

    Args:
        resolved: Resolved configuration
        **extra_tags: Additional tags applied to every resource

    Returns:
        Mapping of ResourceNameSet field to that resource's tags, each
        carrying the stage tags plus ``Name``
    """
    base = stage_tags(resolved, **extra_tags)
    return {
        field_name: {**base, "Name": name}
        for field_name, name in resolved.resource_names.as_dict().items()
    }
